"""Presenter protocol for output abstraction."""

from typing import Protocol

from karten.models import Word


class PresenterProtocol(Protocol):
    """Interface for presenting output to user.

    Commands print and prompt only through this protocol.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_word(self, word: Word) -> None:
        """Display a word with its score and highlighted word forms.

        Args:
            word: The word to display
        """
        ...

    def show_translation(self, word: Word) -> None:
        """Display the translation of a word.

        Args:
            word: The word whose translation to display
        """
        ...

    def show_session_summary(self, forgotten: list[Word], memorized: list[Word]) -> None:
        """Display the outcome of a learning session.

        Args:
            forgotten: Words the user did not remember
            memorized: Words the user remembered
        """
        ...

    def ask(self, prompt: str) -> str:
        """Read a line of input from the user.

        Args:
            prompt: Text shown before the cursor

        Returns:
            The entered text without surrounding whitespace
        """
        ...
