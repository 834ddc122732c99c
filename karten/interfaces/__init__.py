"""Interface protocols for Karten."""

from .card_provider import CardProvider
from .presenter import PresenterProtocol

__all__ = ["CardProvider", "PresenterProtocol"]
