"""CSV-backed store for the word collection."""

import csv
import heapq
import logging
from pathlib import Path

from karten.exceptions import PersistenceIOError
from karten.models import Word, WordQueue

from .record_codec import HEADER, word_from_record, word_to_record

logger = logging.getLogger(__name__)

DELIMITER = ";"


class WordStore:
    """Keeps all words in one semicolon-separated CSV file.

    The file is always read and written as a whole: every change loads
    the full collection and rewrites the full file.
    """

    def __init__(self, path: Path):
        """Initialize the store.

        Args:
            path: Location of the CSV file
        """
        self.path = Path(path)

    def ensure_exists(self) -> None:
        """Create the file (and its folder) with just a header if missing.

        Raises:
            PersistenceIOError: If the file cannot be created
        """
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceIOError(f"Cannot create folder {self.path.parent}: {e}") from e
        self.save_all([])
        logger.info(f"Created empty word file at {self.path}")

    def load_all(self) -> list[Word]:
        """Load every word from the file.

        Returns:
            Words in file order

        Raises:
            PersistenceIOError: If the file cannot be read
            RecordError: If a row is truncated or carries broken metadata
        """
        try:
            with self.path.open("r", newline="", encoding="utf-8") as f:
                rows = list(csv.reader(f, delimiter=DELIMITER))
        except OSError as e:
            raise PersistenceIOError(f"Cannot read word file {self.path}: {e}") from e

        # Blank lines come back as empty rows
        words = [word_from_record(row) for row in rows[1:] if row]
        logger.debug(f"Loaded {len(words)} words from {self.path}")
        return words

    def save_all(self, words: list[Word]) -> int:
        """Rewrite the file with the given words.

        Returns:
            Number of words written (excluding header)

        Raises:
            PersistenceIOError: If the file cannot be written
        """
        try:
            with self.path.open("w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f, delimiter=DELIMITER)
                writer.writerow(HEADER)
                for word in words:
                    writer.writerow(word_to_record(word))
        except OSError as e:
            raise PersistenceIOError(f"Cannot write word file {self.path}: {e}") from e

        logger.debug(f"Saved {len(words)} words to {self.path}")
        return len(words)

    def add_word(self, word: Word) -> None:
        """Append a new word to the collection.

        No duplicate check is made; adding an origin twice stores it twice.
        """
        words = self.load_all()
        words.append(word)
        self.save_all(words)
        logger.info(f"Added word '{word.origin}'")

    def save(self, word: Word) -> bool:
        """Write back a changed word, matched by origin.

        Returns:
            True if a stored word was replaced, False if the origin is unknown
        """
        words = self.load_all()
        for i, stored in enumerate(words):
            if stored.origin == word.origin:
                words[i] = word
                break
        else:
            logger.warning(f"Word '{word.origin}' is not in {self.path}, nothing saved")
            return False

        self.save_all(words)
        return True

    def get_words(self, limit: int) -> WordQueue:
        """Build a review queue from the lowest-scoring words.

        Args:
            limit: Maximum number of words in the session

        Returns:
            Queue holding at most ``limit`` words
        """
        words = self.load_all()
        selected = heapq.nsmallest(max(limit, 0), words, key=lambda w: w.score)
        return WordQueue.from_words(selected)
