"""Main CLI entry point for karten."""

import argparse
import logging
import os
import sys

from karten import __version__
from karten.cli.commands import add, learn
from karten.cli.commands.common import config_from_args

TRUE_VALUES = {"1", "t", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    """Read a boolean flag from the environment; unset or false-like values are False."""
    return os.environ.get(name, "").strip().lower() in TRUE_VALUES


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="karten",
        description="Learn German words with spaced repetition in the terminal",
        epilog="Use 'karten <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--debug",
        action="store_true",
        default=_env_flag("DEBUG"),
        help="Enable debug logging (also enabled by the DEBUG environment variable)",
    )
    parser.add_argument("--words", help="Path to the word file (default: ~/.karten/words.csv)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # karten add
    subparsers.add_parser(
        "add",
        help="Add new words to your collection",
        description="Look up new words on verbformen.com and add them to your collection",
    )

    # karten learn
    learn_parser = subparsers.add_parser(
        "learn",
        help="Review words (default)",
        description="Review the words with the lowest score first",
    )
    learn_parser.add_argument(
        "--session-size",
        type=int,
        default=None,
        help="Number of words per session (default: 20)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(config_from_args(args).debug)

    # Dispatch to appropriate command
    if args.command == "add":
        return add.add_command(args)
    return learn.learn_command(args)


if __name__ == "__main__":
    sys.exit(main())
