"""Dictionary lookup exceptions."""

from .base import KartenException


class NotFoundError(KartenException):
    """Raised when no valid card can be built from a dictionary page."""

    pass


class AnchorMissingError(NotFoundError):
    """Raised when a dictionary page has no <section> element at all."""

    pass


class FetchError(KartenException):
    """Raised when the dictionary page cannot be fetched or parsed."""

    pass
