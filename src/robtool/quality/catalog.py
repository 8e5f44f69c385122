"""Newcastle–Ottawa checklist for case‑control and cohort studies.

The catalog is static: for every study design it lists the appraisal
domains in display order and, within each domain, the criterion
questions a reviewer rates with stars.  Criteria in the comparability
domain may earn up to two stars; every other criterion earns at most
one.  With the built‑in checklists a study can therefore score at most
nine stars.

The catalog (and the guidance text shown next to each criterion) is
loaded once at import time and exposed through read‑only views.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Tuple, Union

from ..core.errors import IndexOutOfRange, InvalidStudyType


class StudyType(str, Enum):
    """Observational study designs covered by the checklist."""

    CASE_CONTROL = "caseControl"
    COHORT = "cohort"


COMPARABILITY = "comparability"
COMPARABILITY_MAX_STARS = 2
DEFAULT_MAX_STARS = 1

DomainCriteria = Mapping[str, Tuple[str, ...]]


def _freeze(table: dict) -> Mapping[StudyType, DomainCriteria]:
    return MappingProxyType(
        {
            study_type: MappingProxyType({domain: tuple(items) for domain, items in domains.items()})
            for study_type, domains in table.items()
        }
    )


CRITERIA: Mapping[StudyType, DomainCriteria] = _freeze(
    {
        StudyType.CASE_CONTROL: {
            "selection": [
                "Is the case definition adequate?",
                "Representativeness of the cases",
                "Selection of Controls",
                "Definition of Controls",
            ],
            "comparability": [
                "Comparability of cases and controls on the basis of the design or analysis",
            ],
            "exposure": [
                "Ascertainment of exposure",
                "Same method of ascertainment for cases and controls",
                "Non-Response rate",
            ],
        },
        StudyType.COHORT: {
            "selection": [
                "Representativeness of the exposed cohort",
                "Selection of the non exposed cohort",
                "Ascertainment of exposure",
                "Demonstration that outcome of interest was not present at start of study",
            ],
            "comparability": [
                "Comparability of cohorts on the basis of the design or analysis",
            ],
            "outcome": [
                "Assessment of outcome",
                "Was follow-up long enough for outcomes to occur",
                "Adequacy of follow up of cohorts",
            ],
        },
    }
)

# Reviewer guidance, one entry per criterion (same shape as CRITERIA)
GUIDANCE: Mapping[StudyType, DomainCriteria] = _freeze(
    {
        StudyType.CASE_CONTROL: {
            "selection": [
                "Star if cases were independently validated, e.g. by record linkage or "
                "more than one person or source.",
                "Star if cases are a consecutive or obviously representative series.",
                "Star for community controls drawn from the same population as the cases.",
                "Star if controls are stated to have no history of the disease or endpoint.",
            ],
            "comparability": [
                "One star if the study controls for the most important factor, a second "
                "star if it controls for any additional factor.",
            ],
            "exposure": [
                "Star for a secure record or a structured interview blind to case/control status.",
                "Star if exposure was ascertained the same way for cases and controls.",
                "Star if the non-response rate is the same for both groups.",
            ],
        },
        StudyType.COHORT: {
            "selection": [
                "Star if the exposed cohort is truly or somewhat representative of the "
                "average person in the community.",
                "Star if the non-exposed cohort is drawn from the same community as the exposed one.",
                "Star for a secure record or a structured interview.",
                "Star if the outcome of interest was shown to be absent at baseline.",
            ],
            "comparability": [
                "One star if the study controls for the most important factor, a second "
                "star if it controls for any additional factor.",
            ],
            "outcome": [
                "Star for independent blind assessment or record linkage.",
                "Star if follow-up was long enough for the outcome to occur.",
                "Star for complete follow-up, or losses unlikely to introduce bias.",
            ],
        },
    }
)


def resolve_study_type(study_type: Union[StudyType, str]) -> StudyType:
    """Coerce a study type or its wire name into :class:`StudyType`."""
    try:
        return StudyType(study_type)
    except ValueError:
        raise InvalidStudyType(
            f"Unknown study type {study_type!r}; expected one of "
            f"{', '.join(t.value for t in StudyType)}"
        ) from None


def criteria_for(study_type: Union[StudyType, str]) -> DomainCriteria:
    """Return the ordered domain -> criteria mapping for a study design."""
    return CRITERIA[resolve_study_type(study_type)]


def domains_for(study_type: Union[StudyType, str]) -> List[str]:
    return list(criteria_for(study_type))


def max_stars_for(domain: str) -> int:
    """Maximum stars a single criterion of ``domain`` can receive."""
    return COMPARABILITY_MAX_STARS if domain == COMPARABILITY else DEFAULT_MAX_STARS


def max_total_stars(study_type: Union[StudyType, str]) -> int:
    """Best achievable total score for a study design."""
    return sum(len(items) * max_stars_for(domain) for domain, items in criteria_for(study_type).items())


def guidance_for(study_type: Union[StudyType, str], domain: str, index: int) -> str:
    """Return the tooltip text for one criterion."""
    domains = GUIDANCE[resolve_study_type(study_type)]
    if domain not in domains:
        raise IndexOutOfRange(f"Domain {domain!r} is not part of the {StudyType(study_type).value} checklist")
    items = domains[domain]
    if not 0 <= index < len(items):
        raise IndexOutOfRange(f"Criterion {index} out of range for {domain!r} ({len(items)} criteria)")
    return items[index]
