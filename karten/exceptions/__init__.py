"""Custom exceptions for Karten."""

from .base import KartenException
from .lookup import AnchorMissingError, FetchError, NotFoundError
from .store import PersistenceIOError, RecordError

__all__ = [
    "KartenException",
    "NotFoundError",
    "AnchorMissingError",
    "FetchError",
    "PersistenceIOError",
    "RecordError",
]
