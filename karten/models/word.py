"""Data model for a vocabulary word under review."""

from dataclasses import dataclass
from datetime import datetime, timezone

from .card import Card

MIN_SCORE = 0
MAX_SCORE = 5


def clamp_score(score: int) -> int:
    """Clamp a score into the allowed range."""
    return max(MIN_SCORE, min(MAX_SCORE, score))


@dataclass
class Word:
    """A word being learned, with its mastery metadata."""

    origin: str  # Phrase as entered (or normalized by a lookup)
    translation: str = ""
    last_seen_at: datetime | None = None  # None means never reviewed
    score: int = MIN_SCORE
    card: Card | None = None

    def __setattr__(self, name, value):
        # Scores stay within [MIN_SCORE, MAX_SCORE] however they are set
        if name == "score":
            value = clamp_score(value)
        super().__setattr__(name, value)

    @classmethod
    def from_raw(cls, raw: str) -> "Word":
        """Create a fresh word from user input."""
        return cls(origin=raw)

    @property
    def has_card(self) -> bool:
        """Check if a dictionary card is attached."""
        return self.card is not None

    def inc_score(self) -> None:
        """Mark the word as remembered.

        The score grows by one up to MAX_SCORE. The review time is
        refreshed even when the score is already at the ceiling.
        """
        if self.score < MAX_SCORE:
            self.score += 1
        self.last_seen_at = datetime.now(timezone.utc)

    def dec_score(self) -> None:
        """Mark the word as forgotten.

        The score drops by one down to MIN_SCORE. The review time is
        left untouched.
        """
        if self.score > MIN_SCORE:
            self.score -= 1

    def apply_card(self, card: Card) -> None:
        """Take origin and translation from a successful lookup."""
        self.origin = " ".join(card.origin)
        self.translation = ", ".join(card.translation)
        self.card = card

    def __str__(self) -> str:
        return self.origin
