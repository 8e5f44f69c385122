"""Study‑level and cross‑study aggregation of star ratings.

Two different rules live here and are intentionally kept apart:

* per study, each domain is labelled by :func:`~.classifier.classify`
  (mean rating above 0.5 is low risk) and feeds the traffic‑light plot;
* across studies, :func:`summarize` pools every criterion rating of a
  domain and counts each rating above zero as low risk, which feeds the
  weighted‑bar plot.

Nothing is cached; every call recomputes from the score sets it is given.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Union

from ..core.errors import EmptyPool
from ..utils.logging import get_logger
from .catalog import StudyType, domains_for, max_stars_for
from .classifier import classify
from .models import DomainSummary, RiskLabel, ScoreSet, TrafficLightRow

logger = get_logger(__name__)


def total_score(score_set: ScoreSet) -> int:
    """Sum of every star awarded across all domains."""
    return sum(sum(scores) for scores in score_set.domains.values())


def max_score(score_set: ScoreSet) -> int:
    """Stars available to a study with this score set's shape."""
    return sum(len(scores) * max_stars_for(domain) for domain, scores in score_set.items())


def domain_labels(score_set: ScoreSet) -> Dict[str, RiskLabel]:
    """Risk label for each domain, in checklist order."""
    return {domain: classify(scores) for domain, scores in score_set.items()}


def traffic_light(score_set: ScoreSet) -> List[TrafficLightRow]:
    """Rows for the traffic‑light plot of one study."""
    return [TrafficLightRow(domain=domain, risk=label) for domain, label in domain_labels(score_set).items()]


def summarize(domain: str, score_sets: Iterable[ScoreSet], strict: bool = False) -> DomainSummary:
    """Percentage of pooled ratings at low and high risk for ``domain``.

    Args:
        domain: Domain to pool.  Score sets without it contribute nothing.
        score_sets: Ratings of every study in the review.
        strict: Raise :class:`EmptyPool` instead of returning a zero
            summary when there is nothing to pool.

    Returns:
        A :class:`DomainSummary`.  Percentages sum to 100 unless the pool
        is empty, in which case both are 0.
    """
    pooled = [score for score_set in score_sets if domain in score_set for score in score_set[domain]]
    total = len(pooled)
    if total == 0:
        if strict:
            raise EmptyPool(f"No ratings to summarise for domain {domain!r}")
        logger.debug(f"Empty pool for domain {domain}", extra={"domain": domain})
        return DomainSummary(domain=domain)
    low = sum(1 for score in pooled if score > 0)
    high = total - low
    return DomainSummary(
        domain=domain,
        low_risk_percent=100.0 * low / total,
        high_risk_percent=100.0 * high / total,
        n_ratings=total,
    )


def summarize_all(
    score_sets: Iterable[ScoreSet],
    study_type: Union[StudyType, str] = StudyType.CASE_CONTROL,
) -> List[DomainSummary]:
    """Summaries for every domain of ``study_type``'s checklist."""
    pool = list(score_sets)
    return [summarize(domain, pool) for domain in domains_for(study_type)]
