"""Configuration classes for Karten."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class KartenConfig:
    """Immutable configuration for Karten.

    Frozen so that services sharing one config cannot change it under
    each other.
    """

    # Dictionary settings
    verbformen_url: str = "https://www.verbformen.com/?w="
    request_timeout: float = 10.0  # Seconds for the single lookup request

    # Storage settings
    words_path: Path = field(default_factory=lambda: Path.home() / ".karten" / "words.csv")

    # Learning settings
    session_size: int = 20  # Words per learning session

    # Diagnostics
    debug: bool = False

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.words_path, str):
            object.__setattr__(self, "words_path", Path(self.words_path))
