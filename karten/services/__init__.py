"""Business logic services for Karten."""

from .card_extractor import extract_card, parse_document
from .providers import VerbformenProvider
from .session_service import ReviewSession
from .word_store import WordStore

__all__ = [
    "extract_card",
    "parse_document",
    "VerbformenProvider",
    "ReviewSession",
    "WordStore",
]
