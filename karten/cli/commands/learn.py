"""CLI command for a learning session."""

from karten.exceptions import KartenException
from karten.interfaces import PresenterProtocol
from karten.presenters import ConsolePresenter
from karten.services import ReviewSession, WordStore

from .common import config_from_args


def learn_command(args, presenter: PresenterProtocol | None = None) -> int:
    """Execute the learn subcommand.

    Shows the lowest-scoring words one at a time. After revealing the
    translation the user answers whether the word was remembered; an
    empty answer or 'q' ends the session.

    Args:
        args: Parsed command-line arguments
        presenter: Output/input handler (console by default)

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = config_from_args(args)
    presenter = presenter or ConsolePresenter()
    store = WordStore(config.words_path)

    try:
        store.ensure_exists()
        session = ReviewSession.start(store, config.session_size)
    except KartenException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    if session.is_finished:
        presenter.show_info("No words to learn yet. Add some with 'karten add'.")
        return 0

    while session.current is not None:
        word = session.current
        presenter.show_word(word)
        presenter.ask("Enter: show translation ")
        presenter.show_translation(word)

        answer = presenter.ask("y: remembered • n: forgotten • q: quit ").lower()
        if answer in ("", "q"):
            break

        try:
            if answer == "y":
                session.remember()
            elif answer == "n":
                session.forget()
            else:
                presenter.show_warning(f"Unknown answer '{answer}'")
        except KartenException as e:
            presenter.show_error(f"Error: {e}")
            return 1

    presenter.show_session_summary(session.forgotten, session.memorized)
    return 0
