"""Newcastle–Ottawa quality appraisal.

This package scores observational studies (case‑control or cohort)
against the Newcastle–Ottawa star checklist and turns the ratings
into risk‑of‑bias judgments.  The catalog defines the checklist, the
scoring functions update ratings immutably, the classifier and
aggregators derive per‑study and cross‑study summaries, and the
registry keeps the studies of one review session together.
"""

from .aggregator import (  # noqa: F401
    domain_labels,
    max_score,
    summarize,
    summarize_all,
    total_score,
    traffic_light,
)
from .catalog import (  # noqa: F401
    StudyType,
    criteria_for,
    domains_for,
    guidance_for,
    max_stars_for,
    max_total_stars,
)
from .classifier import LOW_RISK_THRESHOLD, classify  # noqa: F401
from .models import DomainSummary, RiskLabel, ScoreSet, Study, StudyStatus, TrafficLightRow  # noqa: F401
from .registry import StudyRegistry  # noqa: F401
from .scoring import ScoreNotifier, init_scores, set_score  # noqa: F401
