"""CLI command for adding new words to the collection."""

import logging

from karten.exceptions import FetchError, KartenException, NotFoundError
from karten.interfaces import CardProvider, PresenterProtocol
from karten.models import Word
from karten.presenters import ConsolePresenter
from karten.services import VerbformenProvider, WordStore

from .common import config_from_args

logger = logging.getLogger(__name__)


def add_command(
    args,
    presenter: PresenterProtocol | None = None,
    provider: CardProvider | None = None,
) -> int:
    """Execute the add subcommand.

    Asks for words until an empty line is entered. Each word is looked up
    online; when the lookup fails the translation is asked for instead.

    Args:
        args: Parsed command-line arguments
        presenter: Output/input handler (console by default)
        provider: Card provider (verbformen.com by default)

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = config_from_args(args)
    presenter = presenter or ConsolePresenter()
    provider = provider or VerbformenProvider(
        base_url=config.verbformen_url,
        timeout=config.request_timeout,
    )
    store = WordStore(config.words_path)

    try:
        store.ensure_exists()
    except KartenException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    presenter.show_info(">>> Karten")
    presenter.show_info("Empty line to quit\n")

    while True:
        raw = presenter.ask("New word: ")
        if not raw:
            break

        word = Word.from_raw(raw)
        try:
            provider.enrich(word)
        except (FetchError, NotFoundError) as e:
            logger.debug(f"Lookup of '{raw}' failed: {e}")
            presenter.show_warning(f"No card found for '{raw}': {e}")

        if not word.translation:
            translation = presenter.ask(f"{word.origin} – translation: ")
            if not translation:
                presenter.show_info("Skipped")
                continue
            word.translation = translation

        presenter.show_word(word)
        presenter.show_translation(word)

        answer = presenter.ask("Save? [Y/n] ").lower()
        if answer not in ("", "y", "yes"):
            presenter.show_info("Skipped")
            continue

        try:
            store.add_word(word)
        except KartenException as e:
            presenter.show_error(f"Error: {e}")
            return 1
        presenter.show_success(f"Saved '{word.origin}'")

    return 0
