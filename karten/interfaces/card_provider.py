"""Protocol for dictionary card providers."""

from typing import Protocol

from karten.models import Card, Word


class CardProvider(Protocol):
    """Interface for a dictionary backend that can build word cards.

    Any dictionary source implements this protocol to take part in add mode.
    """

    @property
    def name(self) -> str:
        """Human-readable name for this provider (e.g., 'verbformen.com')."""
        ...

    def get_card(self, phrase: str) -> Card:
        """Look up the card for a phrase.

        Raises:
            FetchError: If the dictionary cannot be reached.
            NotFoundError: If the dictionary has no usable entry.
        """
        ...

    def enrich(self, word: Word) -> None:
        """Attach a card to a word, updating its origin and translation.

        Raises:
            FetchError: If the dictionary cannot be reached.
            NotFoundError: If the dictionary has no usable entry.
        """
        ...
