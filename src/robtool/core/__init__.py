"""Core building blocks shared by every robtool subpackage."""

from .errors import (  # noqa: F401
    EmptyPool,
    IndexOutOfRange,
    InvalidStudyType,
    NotFound,
    RoBError,
    ScoreOutOfRange,
)
