"""Integration test for a full scoring session.

A reviewer adds studies, rates criteria one click at a time, and the
traffic-light and weighted-bar views are read back after each step.
"""

import pytest

from robtool.quality.aggregator import domain_labels, summarize, total_score
from robtool.quality.catalog import max_total_stars
from robtool.quality.models import RiskLabel, ScoreSet
from robtool.quality.registry import StudyRegistry


@pytest.fixture
def session() -> StudyRegistry:
    return StudyRegistry()


def test_end_to_end_scoring(session: StudyRegistry) -> None:
    """Full marks on one study, zeros on another, 50/50 pooled selection."""
    renders: list[ScoreSet] = []
    session.notifier.subscribe(renders.append)

    study1 = session.add()
    for index in range(4):
        session.update_score("selection", index, 1)
    session.update_score("comparability", 0, 2)
    for index in range(3):
        session.update_score("exposure", index, 1)
    study1 = session.get(study1.id)

    assert len(renders) == 8
    assert total_score(study1.scores) == 9 == max_total_stars(study1.study_type)
    assert set(domain_labels(study1.scores).values()) == {RiskLabel.LOW}

    study2 = session.add()
    assert session.current_id == study2.id
    assert total_score(study2.scores) == 0

    summary = summarize("selection", [study1.scores, study2.scores])
    assert summary.low_risk_percent == 50.0
    assert summary.high_risk_percent == 50.0

    by_domain = {s.domain: s for s in session.cross_study_summary()}
    assert by_domain["comparability"].low_risk_percent == 50.0
    assert by_domain["exposure"].high_risk_percent == 50.0


def test_removal_updates_views(session: StudyRegistry) -> None:
    """Views recompute on read after a study is removed."""
    first = session.add()
    session.update_score("selection", 0, 1)
    second = session.add("Cohort A", "cohort")
    session.update_score("outcome", 0, 1)

    before = {s.domain: s for s in session.cross_study_summary()}
    assert before["selection"].low_risk_percent == pytest.approx(100.0 / 8)

    session.select(first.id)
    session.remove(first.id)
    assert session.current_id == second.id
    assert session.current_labels() == {
        "selection": RiskLabel.HIGH,
        "comparability": RiskLabel.HIGH,
        "outcome": RiskLabel.HIGH,
    }
    cohort = {s.domain: s for s in session.cross_study_summary("cohort")}
    assert cohort["outcome"].low_risk_percent == pytest.approx(100.0 / 3)
    assert cohort["selection"].low_risk_percent == 0.0
