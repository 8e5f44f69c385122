"""Unit tests for the Newcastle-Ottawa criteria catalog."""

import pytest

from robtool.core.errors import IndexOutOfRange, InvalidStudyType
from robtool.quality.catalog import (
    StudyType,
    criteria_for,
    domains_for,
    guidance_for,
    max_stars_for,
    max_total_stars,
)


class TestCriteriaFor:
    """Tests for checklist lookup."""

    def test_case_control_domains(self) -> None:
        """Case-control checklist lists selection, comparability, exposure in order."""
        assert domains_for(StudyType.CASE_CONTROL) == ["selection", "comparability", "exposure"]

    def test_cohort_domains(self) -> None:
        """Cohort checklist swaps exposure for outcome."""
        assert domains_for(StudyType.COHORT) == ["selection", "comparability", "outcome"]

    @pytest.mark.parametrize("study_type", ["caseControl", "cohort"])
    def test_criterion_counts(self, study_type: str) -> None:
        """Both designs have 4 selection, 1 comparability and 3 final criteria."""
        counts = [len(items) for items in criteria_for(study_type).values()]
        assert counts == [4, 1, 3]

    def test_accepts_wire_name(self) -> None:
        """String values resolve to the same checklist as the enum."""
        assert criteria_for("cohort") is criteria_for(StudyType.COHORT)

    def test_criterion_text(self) -> None:
        """Criteria keep their questionnaire wording."""
        assert criteria_for(StudyType.CASE_CONTROL)["selection"][0] == "Is the case definition adequate?"
        assert criteria_for(StudyType.COHORT)["outcome"][2] == "Adequacy of follow up of cohorts"

    def test_unknown_type(self) -> None:
        """Unknown designs raise InvalidStudyType (also a ValueError)."""
        with pytest.raises(InvalidStudyType):
            criteria_for("rct")
        with pytest.raises(ValueError):
            criteria_for("")

    def test_catalog_is_read_only(self) -> None:
        """The catalog cannot be modified by callers."""
        with pytest.raises(TypeError):
            criteria_for("cohort")["selection"] = ("x",)  # type: ignore[index]


class TestMaxStars:
    """Tests for per-criterion and total star limits."""

    def test_comparability_two_stars(self) -> None:
        assert max_stars_for("comparability") == 2

    @pytest.mark.parametrize("domain", ["selection", "exposure", "outcome", "anything"])
    def test_other_domains_one_star(self, domain: str) -> None:
        assert max_stars_for(domain) == 1

    @pytest.mark.parametrize("study_type", list(StudyType))
    def test_max_total_is_nine(self, study_type: StudyType) -> None:
        """Four + two + three stars for both built-in designs."""
        assert max_total_stars(study_type) == 9


class TestGuidance:
    """Tests for reviewer guidance text."""

    def test_guidance_shape_matches_criteria(self) -> None:
        for study_type in StudyType:
            for domain, items in criteria_for(study_type).items():
                for index in range(len(items)):
                    assert guidance_for(study_type, domain, index)

    def test_guidance_bad_domain(self) -> None:
        with pytest.raises(IndexOutOfRange):
            guidance_for("caseControl", "outcome", 0)

    def test_guidance_bad_index(self) -> None:
        with pytest.raises(IndexOutOfRange):
            guidance_for("cohort", "comparability", 1)
