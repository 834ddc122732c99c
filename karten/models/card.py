"""Data models for dictionary cards."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class ColorClass(Enum):
    """Semantic highlight of a word-form fragment.

    Values match the integer codes used in stored card metadata.
    """

    NEUTRAL = 0  # Unmarked text
    PRIMARY = 1  # Highlighted stem
    SECONDARY = 2  # Highlighted ending


# Turns one syllable into display text; presenters decide the styling
SyllableFormatter = Callable[[str, ColorClass], str]


def plain_formatter(value: str, color_class: ColorClass) -> str:
    """Formatter that ignores highlighting."""
    return value


@dataclass(frozen=True)
class Syllable:
    """One highlighted fragment of an inflected word form."""

    value: str
    color_class: ColorClass = ColorClass.NEUTRAL

    def __str__(self) -> str:
        return self.value


@dataclass
class Card:
    """Structured result of one dictionary lookup."""

    origin: list[str] = field(default_factory=list)  # Tokens of the looked-up phrase
    translation: list[str] = field(default_factory=list)  # English translation tokens
    forms: list[Syllable] = field(default_factory=list)  # Word-forms line, in display order

    def is_empty(self) -> bool:
        """Check if any part of the card is missing.

        An empty card must never be handed out as a successful lookup.
        """
        return not self.origin or not self.translation or not self.forms

    def forms_text(self) -> str:
        """Get the word-forms line without any highlighting."""
        return "".join(s.value for s in self.forms)

    def render(self, formatter: SyllableFormatter = plain_formatter) -> str:
        """Render the origin line and the highlighted word-forms line.

        Args:
            formatter: Callable styling a single syllable

        Returns:
            Two lines: the origin phrase and the formatted word forms
        """
        forms = "".join(formatter(s.value, s.color_class) for s in self.forms)
        return " ".join(self.origin) + "\n" + forms

    def __str__(self) -> str:
        return f"{' '.join(self.origin)}: {', '.join(self.translation)}"
