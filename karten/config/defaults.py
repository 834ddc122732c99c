"""Default configuration values for Karten."""

from .config import KartenConfig


def create_default_config(**overrides) -> KartenConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        KartenConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            words_path="/tmp/words.csv",
            session_size=10
        )
    """
    return KartenConfig(**overrides)
