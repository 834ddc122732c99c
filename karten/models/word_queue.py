"""Score-ordered queue of words for a review session."""

import heapq
import itertools
from collections.abc import Iterable

from .word import Word


class WordQueue:
    """Min-heap of words keyed by score.

    Lower scores come out first. Each entry keeps the score the word had
    when it was inserted, so changing a word's score after it left the
    queue (or while it waits in it) never breaks the heap. Words with
    equal scores come out in no guaranteed order.
    """

    def __init__(self):
        """Initialize an empty queue."""
        self._heap: list[tuple[int, int, Word]] = []
        self._counter = itertools.count()

    @classmethod
    def from_words(cls, words: Iterable[Word]) -> "WordQueue":
        """Build a queue holding all given words."""
        queue = cls()
        for word in words:
            queue.insert(word)
        return queue

    def insert(self, word: Word) -> None:
        """Add a word to the queue."""
        heapq.heappush(self._heap, (word.score, next(self._counter), word))

    def next(self) -> Word | None:
        """Remove and return the word with the lowest score.

        Returns:
            The next word, or None if the queue is empty
        """
        if self.is_empty():
            return None
        _, _, word = heapq.heappop(self._heap)
        return word

    def is_empty(self) -> bool:
        """Check if no words are left."""
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"WordQueue({len(self)} words)"
