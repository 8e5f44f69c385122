"""Creating and updating per‑study star ratings.

Score sets are immutable; :func:`set_score` validates the requested
change against the checklist and returns a fresh :class:`ScoreSet`.
A :class:`ScoreNotifier` can be passed in to push the new score set to
observers (e.g. a view that re‑renders on every change).
"""

from __future__ import annotations

from typing import Callable, List, Optional, Union

from ..core.errors import IndexOutOfRange, ScoreOutOfRange
from ..utils.logging import get_logger
from .catalog import StudyType, criteria_for, max_stars_for, resolve_study_type
from .models import ScoreSet

logger = get_logger(__name__)

ScoreObserver = Callable[[ScoreSet], None]


class ScoreNotifier:
    """Synchronous observer list for score changes."""

    def __init__(self) -> None:
        self._observers: List[ScoreObserver] = []

    def subscribe(self, observer: ScoreObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: ScoreObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, scores: ScoreSet) -> None:
        """Call every observer, in subscription order, with ``scores``."""
        for observer in list(self._observers):
            observer(scores)

    def __len__(self) -> int:
        return len(self._observers)


def init_scores(study_type: Union[StudyType, str]) -> ScoreSet:
    """Return an all‑zero score set shaped like the checklist for ``study_type``."""
    resolved = resolve_study_type(study_type)
    return ScoreSet(
        study_type=resolved,
        domains={domain: (0,) * len(items) for domain, items in criteria_for(resolved).items()},
    )


def set_score(
    score_set: ScoreSet,
    domain: str,
    index: int,
    value: int,
    notifier: Optional[ScoreNotifier] = None,
) -> ScoreSet:
    """Return a copy of ``score_set`` with one criterion's rating replaced.

    Args:
        score_set: The current ratings (left untouched).
        domain: Domain containing the criterion.
        index: Zero‑based criterion position within the domain.
        value: New star count, ``0..max_stars_for(domain)``.
        notifier: Optional notifier told about the new score set.

    Raises:
        IndexOutOfRange: The domain is not on the checklist or the index
            is outside its criteria.
        ScoreOutOfRange: ``value`` is not an integer within range.
    """
    if domain not in score_set:
        raise IndexOutOfRange(
            f"Domain {domain!r} is not part of the {score_set.study_type.value} checklist"
        )
    current = score_set[domain]
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(current):
        raise IndexOutOfRange(f"Criterion {index!r} out of range for {domain!r} ({len(current)} criteria)")
    limit = max_stars_for(domain)
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= limit:
        raise ScoreOutOfRange(f"Rating {value!r} for {domain!r} must be an integer in 0..{limit}")
    domains = dict(score_set.domains)
    domains[domain] = current[:index] + (value,) + current[index + 1:]
    updated = ScoreSet(study_type=score_set.study_type, domains=domains)
    logger.debug(
        f"Set {domain}[{index}] = {value}",
        extra={"domain": domain, "index": index, "value": value},
    )
    if notifier is not None:
        notifier.notify(updated)
    return updated
