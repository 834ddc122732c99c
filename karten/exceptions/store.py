"""Word store exceptions."""

from .base import KartenException


class PersistenceIOError(KartenException):
    """Raised when the word file cannot be read or written."""

    pass


class RecordError(KartenException):
    """Raised when a stored record is structurally broken (e.g. truncated)."""

    pass
