"""Console presenter for CLI output."""

from rich.console import Console
from rich.markup import escape

from karten.models import MAX_SCORE, ColorClass, Word

SCORE_MARK_ON = "⭐"
SCORE_MARK_OFF = "✖"

SYLLABLE_STYLES = {
    ColorClass.PRIMARY: "color(46)",
    ColorClass.SECONDARY: "color(69)",
}


def rich_syllable_formatter(value: str, color_class: ColorClass) -> str:
    """Format a syllable as rich markup."""
    style = SYLLABLE_STYLES.get(color_class)
    if style is None:
        return escape(value)
    return f"[{style}]{escape(value)}[/]"


def score_stars(score: int) -> str:
    """Render a score as a row of marks."""
    return SCORE_MARK_ON * score + SCORE_MARK_OFF * (MAX_SCORE - score)


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        self.console.print(escape(message))

    def show_success(self, message: str) -> None:
        """Display a success message."""
        self.console.print(f"[green][OK][/green] {escape(message)}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        self.console.print(f"[yellow][WARN][/yellow] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        self.console.print(f"[bold red][ERROR][/bold red] {escape(message)}")

    def show_word(self, word: Word) -> None:
        """Display a word with its score and highlighted word forms."""
        self.console.print(f"\n{score_stars(word.score)}")
        if word.card is not None:
            self.console.print(word.card.render(rich_syllable_formatter))
        else:
            self.console.print(f"[bold]{escape(word.origin)}[/bold]")

    def show_translation(self, word: Word) -> None:
        """Display the translation of a word."""
        self.console.print(f"[color(150)]{escape(word.translation)}[/]")

    def show_session_summary(self, forgotten: list[Word], memorized: list[Word]) -> None:
        """Display the outcome of a learning session."""
        self.console.print("\nSession complete:")
        self.console.print(f"  Forgotten: {len(forgotten)}")
        for word in forgotten:
            self.console.print(f"    {escape(word.origin)}")
        self.console.print(f"  Memorized: {len(memorized)}")
        for word in memorized:
            self.console.print(f"    {escape(word.origin)}")
        if not forgotten and memorized:
            self.console.print("[green]Gut gemacht![/green]")

    def ask(self, prompt: str) -> str:
        """Read a line of input from the user."""
        return self.console.input(escape(prompt)).strip()
