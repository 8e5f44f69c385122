"""Loading study ratings from JSON and exporting summaries as tables.

The command line accepts a JSON document listing the studies of a
review, either as a bare list or under a ``"studies"`` key::

    [
        {"name": "Smith 2019", "type": "caseControl",
         "scores": {"selection": [1, 1, 0, 1], "comparability": [2],
                    "exposure": [1, 0, 1]}}
    ]

Every rating is replayed through :meth:`StudyRegistry.update_score`, so
the same range checks apply as for interactive scoring.  Omitted
domains stay at zero.  The frame helpers flatten registry views into
pandas DataFrames for CSV export.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from ..core.errors import IndexOutOfRange
from ..quality.aggregator import domain_labels, total_score
from ..quality.catalog import StudyType, criteria_for
from ..quality.registry import StudyRegistry
from ..utils.logging import get_logger

logger = get_logger(__name__)


class StudyRecord(BaseModel):
    """One study as written in a ratings file."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: Optional[str] = None
    study_type: StudyType = Field(StudyType.CASE_CONTROL, alias="type")
    scores: Dict[str, List[int]] = Field(default_factory=dict)


_records = TypeAdapter(List[StudyRecord])


def parse_records(payload: Union[list, dict]) -> List[StudyRecord]:
    if isinstance(payload, dict):
        payload = payload.get("studies", [])
    return _records.validate_python(payload)


def build_registry(records: List[StudyRecord]) -> StudyRegistry:
    """Create a registry holding ``records`` in order; the first becomes current."""
    registry = StudyRegistry()
    for record in records:
        study = registry.add(name=record.name, study_type=record.study_type)
        checklist = criteria_for(record.study_type)
        for domain, ratings in record.scores.items():
            if domain in checklist and len(ratings) != len(checklist[domain]):
                raise IndexOutOfRange(
                    f"{study.name}: domain {domain!r} needs {len(checklist[domain])} ratings, got {len(ratings)}"
                )
            for index, value in enumerate(ratings):
                registry.update_score(domain, index, value, study_id=study.id)
    if len(registry):
        registry.select(registry.studies[0].id)
    return registry


def load_studies(path: Path) -> StudyRegistry:
    """Read a ratings file into a fresh :class:`StudyRegistry`."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    records = parse_records(payload)
    registry = build_registry(records)
    logger.info(f"Loaded {len(registry)} studies from {path}")
    return registry


def traffic_light_frame(registry: StudyRegistry) -> pd.DataFrame:
    """One row per (study, domain) with the domain's rating sum and risk label."""
    rows = []
    for study in registry:
        labels = domain_labels(study.scores)
        total = total_score(study.scores)
        for domain, scores in study.scores.items():
            rows.append({
                "study_id": study.id,
                "study": study.name,
                "study_type": study.study_type.value,
                "domain": domain,
                "stars": sum(scores),
                "risk": labels[domain].value,
                "total_score": total,
            })
    columns = ["study_id", "study", "study_type", "domain", "stars", "risk", "total_score"]
    return pd.DataFrame(rows, columns=columns)


def summary_frame(
    registry: StudyRegistry,
    study_type: Union[StudyType, str] = StudyType.CASE_CONTROL,
) -> pd.DataFrame:
    """Cross‑study weighted‑bar summary as a DataFrame."""
    summaries = registry.cross_study_summary(study_type)
    columns = ["domain", "low_risk_percent", "high_risk_percent", "n_ratings"]
    return pd.DataFrame([s.model_dump() for s in summaries], columns=columns)
