"""verbformen.com dictionary provider."""

import logging

import requests
from bs4 import BeautifulSoup

from karten.exceptions import FetchError
from karten.models import Card, Word
from karten.services.card_extractor import extract_card, parse_document

logger = logging.getLogger(__name__)


class VerbformenProvider:
    """Online card provider scraping verbformen.com.

    Implements CardProvider protocol.
    """

    def __init__(
        self,
        base_url: str = "https://www.verbformen.com/?w=",
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ):
        """Initialize with the query URL.

        Args:
            base_url: Query URL the phrase is appended to.
            timeout: Seconds to wait for the page.
            session: Optional requests session to reuse connections.
        """
        self._base_url = base_url
        self._timeout = timeout
        self._session = session

    @property
    def name(self) -> str:
        return "verbformen.com"

    def build_url(self, phrase: str) -> str:
        """Build the lookup URL; words of the phrase are joined with '+'."""
        return self._base_url + "+".join(phrase.split(" "))

    def fetch(self, phrase: str) -> BeautifulSoup:
        """Download and parse the dictionary page for a phrase.

        Raises:
            FetchError: On transport errors or a non-success status
        """
        url = self.build_url(phrase)
        logger.debug(f"GET {url}")
        get = self._session.get if self._session is not None else requests.get
        try:
            response = get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"Cannot fetch '{phrase}' from {self.name}: {e}") from e

        return parse_document(response.content)

    def get_card(self, phrase: str) -> Card:
        """Look up the card for a phrase.

        Raises:
            FetchError: If the page cannot be fetched
            NotFoundError: If the page has no usable entry
        """
        card = extract_card(self.fetch(phrase))
        logger.info(f"Found card for '{phrase}': {card}")
        return card

    def enrich(self, word: Word) -> None:
        """Attach a card to a word, taking over its origin and translation.

        Raises:
            FetchError: If the page cannot be fetched
            NotFoundError: If the page has no usable entry
        """
        word.apply_card(self.get_card(word.origin))
