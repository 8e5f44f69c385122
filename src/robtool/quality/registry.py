"""Session registry of the studies under appraisal.

The registry owns the ordered list of studies and the current
selection.  Studies are frozen models: scoring a criterion replaces the
study in place in the list with an updated copy.  Every computed view
(total score, domain labels, cross‑study summaries) is derived on read.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..config.settings import settings
from ..core.errors import NotFound
from ..utils.logging import get_logger
from .aggregator import domain_labels, summarize_all, total_score
from .catalog import StudyType, resolve_study_type
from .models import DomainSummary, RiskLabel, Study
from .scoring import ScoreNotifier, init_scores, set_score

logger = get_logger(__name__)


class StudyRegistry:
    """Ordered collection of studies plus the current selection.

    Ids are issued sequentially and never reused, even when the study
    holding the highest id is removed.
    """

    def __init__(self, notifier: Optional[ScoreNotifier] = None) -> None:
        self._studies: List[Study] = []
        self._current_id: Optional[int] = None
        self._last_id = 0
        self.notifier = notifier or ScoreNotifier()

    # ------------------------------------------------------------------
    # Collection access
    @property
    def studies(self) -> Tuple[Study, ...]:
        return tuple(self._studies)

    def __len__(self) -> int:
        return len(self._studies)

    def __iter__(self) -> Iterator[Study]:
        return iter(list(self._studies))

    def __contains__(self, study_id: object) -> bool:
        return any(study.id == study_id for study in self._studies)

    def get(self, study_id: int) -> Study:
        for study in self._studies:
            if study.id == study_id:
                return study
        raise NotFound(f"No study with id {study_id}")

    def current(self) -> Optional[Study]:
        if self._current_id is None:
            return None
        return self.get(self._current_id)

    @property
    def current_id(self) -> Optional[int]:
        return self._current_id

    # ------------------------------------------------------------------
    # Commands
    def add(
        self,
        name: Optional[str] = None,
        study_type: Union[StudyType, str, None] = None,
    ) -> Study:
        """Create a zero‑scored study, append it and make it current."""
        resolved = resolve_study_type(study_type or settings.default_study_type)
        study_id = self._last_id + 1
        study = Study(
            id=study_id,
            type=resolved,
            name=name or settings.study_name_template.format(id=study_id),
            scores=init_scores(resolved),
        )
        self._last_id = study_id
        self._studies.append(study)
        self._current_id = study_id
        logger.info(
            f"Added study {study.name!r}",
            extra={"study_id": study_id, "study_type": resolved.value},
        )
        return study

    def remove(self, study_id: int) -> None:
        """Remove a study; unknown ids are ignored."""
        remaining = [study for study in self._studies if study.id != study_id]
        if len(remaining) == len(self._studies):
            logger.debug(f"Remove ignored, no study {study_id}", extra={"study_id": study_id})
            return
        self._studies = remaining
        if self._current_id == study_id:
            self._current_id = remaining[0].id if remaining else None
        logger.info(f"Removed study {study_id}", extra={"study_id": study_id})

    def select(self, study_id: int) -> Study:
        study = self.get(study_id)
        self._current_id = study_id
        return study

    def rename(self, study_id: int, name: str) -> Study:
        if not name or not name.strip():
            raise ValueError("Study name must not be empty")
        study = self.get(study_id)
        renamed = study.model_copy(update={"name": name.strip()})
        self._replace(renamed)
        return renamed

    def update_score(
        self,
        domain: str,
        index: int,
        value: int,
        study_id: Optional[int] = None,
    ) -> Study:
        """Rate one criterion of the current (or given) study.

        The registry is unchanged if the rating is rejected.  On success
        the registry's notifier receives the new score set.
        """
        if study_id is None:
            study_id = self._current_id
        if study_id is None:
            raise NotFound("No study selected")
        study = self.get(study_id)
        try:
            scores = set_score(study.scores, domain, index, value)
        except (IndexError, ValueError) as exc:
            logger.warning(f"Rejected rating: {exc}", extra={"study_id": study_id, "domain": domain})
            raise
        updated = study.model_copy(update={"scores": scores, "scored": True})
        self._replace(updated)
        self.notifier.notify(scores)
        return updated

    def _replace(self, study: Study) -> None:
        self._studies = [study if s.id == study.id else s for s in self._studies]

    # ------------------------------------------------------------------
    # Derived views
    def current_total(self) -> Optional[int]:
        study = self.current()
        return total_score(study.scores) if study else None

    def current_labels(self) -> Optional[Dict[str, RiskLabel]]:
        study = self.current()
        return domain_labels(study.scores) if study else None

    def cross_study_summary(
        self,
        study_type: Union[StudyType, str] = StudyType.CASE_CONTROL,
    ) -> List[DomainSummary]:
        """Weighted‑bar summary over every study in the registry."""
        return summarize_all([study.scores for study in self._studies], study_type)
