"""Null presenter for testing (no output)."""

from collections.abc import Iterable

from karten.models import Word


class NullPresenter:
    """Present output to nowhere (testing implementation).

    Answers to prompts are taken from ``answers`` in order; once they run
    out every prompt gets an empty answer.
    """

    def __init__(self, answers: Iterable[str] = ()):
        self._answers = iter(answers)

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_word(self, word: Word) -> None:
        """Display a word (no-op)."""
        pass

    def show_translation(self, word: Word) -> None:
        """Display a translation (no-op)."""
        pass

    def show_session_summary(self, forgotten: list[Word], memorized: list[Word]) -> None:
        """Display the outcome of a learning session (no-op)."""
        pass

    def ask(self, prompt: str) -> str:
        """Return the next scripted answer."""
        return next(self._answers, "")
