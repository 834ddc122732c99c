"""Presenter implementations for output handling."""

from .console_presenter import ConsolePresenter, rich_syllable_formatter, score_stars
from .null_presenter import NullPresenter

__all__ = [
    "ConsolePresenter",
    "NullPresenter",
    "rich_syllable_formatter",
    "score_stars",
]
