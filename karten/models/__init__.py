"""Data models for Karten."""

from .card import Card, ColorClass, Syllable, SyllableFormatter, plain_formatter
from .word import MAX_SCORE, MIN_SCORE, Word, clamp_score
from .word_queue import WordQueue

__all__ = [
    "Card",
    "ColorClass",
    "Syllable",
    "SyllableFormatter",
    "plain_formatter",
    "Word",
    "MIN_SCORE",
    "MAX_SCORE",
    "clamp_score",
    "WordQueue",
]
