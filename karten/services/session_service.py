"""Learning session over a queue of words."""

import logging

from karten.models import Word, WordQueue

from .word_store import WordStore

logger = logging.getLogger(__name__)


class ReviewSession:
    """Walks through a word queue, scoring and saving each answer.

    Every answer is written to the store right away, so quitting in the
    middle of a session keeps the answers given so far.
    """

    def __init__(self, queue: WordQueue, store: WordStore):
        """Initialize the session and take the first word.

        Args:
            queue: Words to review, lowest score first
            store: Store the changed words are saved to
        """
        self._queue = queue
        self._store = store
        self.forgotten: list[Word] = []
        self.memorized: list[Word] = []
        self.current: Word | None = queue.next()

    @classmethod
    def start(cls, store: WordStore, size: int) -> "ReviewSession":
        """Load a session of up to ``size`` words from the store."""
        queue = store.get_words(size)
        logger.info(f"Starting session with {len(queue)} words")
        return cls(queue, store)

    @property
    def is_finished(self) -> bool:
        """Check if all words of the session have been answered."""
        return self.current is None

    @property
    def remaining(self) -> int:
        """Number of words still waiting, including the current one."""
        return len(self._queue) + (0 if self.current is None else 1)

    def remember(self) -> Word | None:
        """Record that the current word was remembered.

        Returns:
            The next word, or None when the session is over

        Raises:
            PersistenceIOError: If the word cannot be saved
        """
        word = self._require_current()
        word.inc_score()
        self.memorized.append(word)
        return self._commit(word)

    def forget(self) -> Word | None:
        """Record that the current word was forgotten.

        Returns:
            The next word, or None when the session is over

        Raises:
            PersistenceIOError: If the word cannot be saved
        """
        word = self._require_current()
        word.dec_score()
        self.forgotten.append(word)
        return self._commit(word)

    def _require_current(self) -> Word:
        if self.current is None:
            raise RuntimeError("Session is already finished")
        return self.current

    def _commit(self, word: Word) -> Word | None:
        self._store.save(word)
        logger.debug(f"Saved '{word.origin}' with score {word.score}")
        self.current = self._queue.next()
        return self.current
