"""Models for star‑rating scores and risk‑of‑bias summaries.

These Pydantic models capture a single study's Newcastle–Ottawa
ratings and the values derived from them.  ``ScoreSet`` holds one
tuple of star counts per domain and is frozen: updates go through
:func:`robtool.quality.scoring.set_score`, which returns a new
instance.  ``Study`` binds a score set to an identity and a name.
``RiskLabel`` and ``DomainSummary`` are the outputs consumed by the
traffic‑light and weighted‑bar charts respectively.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Dict, ItemsView, KeysView, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

from .catalog import StudyType, criteria_for, max_stars_for


class RiskLabel(str, Enum):
    """Binary risk‑of‑bias judgment for a domain."""

    LOW = "Low"
    HIGH = "High"


class StudyStatus(str, Enum):
    """Lifecycle stage of a study still present in the registry."""

    CREATED = "created"
    SCORED = "scored"


class ScoreSet(BaseModel):
    """Per‑domain star ratings for one study."""

    model_config = ConfigDict(frozen=True)

    study_type: StudyType
    domains: Dict[str, Tuple[int, ...]]

    @model_validator(mode="after")
    def _check_shape(self) -> "ScoreSet":
        expected = criteria_for(self.study_type)
        if list(self.domains) != list(expected):
            raise ValueError(
                f"Domains {list(self.domains)} do not match the "
                f"{self.study_type.value} checklist {list(expected)}"
            )
        for domain, scores in self.domains.items():
            if len(scores) != len(expected[domain]):
                raise ValueError(
                    f"Domain {domain!r} needs {len(expected[domain])} ratings, got {len(scores)}"
                )
            limit = max_stars_for(domain)
            for score in scores:
                if not 0 <= score <= limit:
                    raise ValueError(f"Rating {score} in {domain!r} outside 0..{limit}")
        # read-only view so ratings only change through set_score
        object.__setattr__(self, "domains", MappingProxyType(dict(self.domains)))
        return self

    @field_serializer("domains")
    def _dump_domains(self, domains: Dict[str, Tuple[int, ...]]) -> Dict[str, Tuple[int, ...]]:
        return dict(domains)

    def __getitem__(self, domain: str) -> Tuple[int, ...]:
        return self.domains[domain]

    def __contains__(self, domain: object) -> bool:
        return domain in self.domains

    def keys(self) -> KeysView[str]:
        return self.domains.keys()

    def items(self) -> ItemsView[str, Tuple[int, ...]]:
        return self.domains.items()


class Study(BaseModel):
    """A study being appraised."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., gt=0)
    study_type: StudyType = Field(..., alias="type")
    name: str
    scores: ScoreSet
    scored: bool = False

    @model_validator(mode="after")
    def _check_scores_type(self) -> "Study":
        if self.scores.study_type != self.study_type:
            raise ValueError(
                f"Scores for a {self.scores.study_type.value} study cannot belong to a "
                f"{self.study_type.value} study"
            )
        return self

    @property
    def status(self) -> StudyStatus:
        return StudyStatus.SCORED if self.scored else StudyStatus.CREATED


class DomainSummary(BaseModel):
    """Share of pooled criterion ratings at low and high risk for one domain."""

    domain: str
    low_risk_percent: float = Field(0.0, ge=0.0, le=100.0)
    high_risk_percent: float = Field(0.0, ge=0.0, le=100.0)
    n_ratings: int = Field(0, ge=0)


class TrafficLightRow(BaseModel):
    """One bar of the per‑study traffic‑light plot."""

    domain: str
    risk: RiskLabel
