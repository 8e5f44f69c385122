"""Error taxonomy for the scoring and aggregation engine.

Every error raised by :mod:`robtool` derives from :class:`RoBError`.
Each subclass also inherits from the closest builtin exception so that
callers which only know about ``ValueError``/``IndexError``/``KeyError``
keep working.
"""

from __future__ import annotations


class RoBError(Exception):
    """Base class for risk‑of‑bias engine errors."""


class InvalidStudyType(RoBError, ValueError):
    """Raised when a study type is not one of the catalogued designs."""


class IndexOutOfRange(RoBError, IndexError):
    """Raised when a criterion index (or domain) does not exist for a study type."""


class ScoreOutOfRange(RoBError, ValueError):
    """Raised when a star rating falls outside ``[0, max_stars]``."""


class NotFound(RoBError, KeyError):
    """Raised when a study id is not present in the registry."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0]) if self.args else ""


class EmptyPool(RoBError, ValueError):
    """Raised when a cross‑study summary has no ratings to aggregate."""
