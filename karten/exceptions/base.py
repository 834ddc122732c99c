"""Base exception classes for Karten."""


class KartenException(Exception):
    """Base exception for all Karten errors.

    All custom exceptions in the karten package should inherit
    from this base class for consistent error handling.
    """

    pass
