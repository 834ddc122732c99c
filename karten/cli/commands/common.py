"""Helpers shared by the CLI commands."""

from karten.config import KartenConfig, create_default_config


def config_from_args(args) -> KartenConfig:
    """Create a config from parsed arguments, keeping defaults for unset options.

    Args:
        args: Parsed command-line arguments

    Returns:
        Configuration with command-line overrides applied
    """
    overrides = {}
    if getattr(args, "words", None):
        overrides["words_path"] = args.words
    if getattr(args, "session_size", None) is not None:
        overrides["session_size"] = args.session_size
    if getattr(args, "debug", False):
        overrides["debug"] = True
    return create_default_config(**overrides)
