"""Pytest configuration and shared fixtures."""

import argparse

import pytest

from karten.config import KartenConfig
from karten.models import Card, ColorClass, Syllable, Word
from karten.presenters import NullPresenter
from karten.services import WordStore

# Trimmed copy of a verbformen.com result page for "laufen"
SAMPLE_PAGE = """<!DOCTYPE html>
<html lang="en">
<head><title>Conjugation laufen</title></head>
<body>
<header><p class="rInf">Menu</p></header>
<section class="rBox rBoxWht">
<div class="rAuf">
<p class="rInf r1Zeile rU3px rO0px vGrnd">
<b>laufen</b>
</p>
<p class="vStm rCntr">
läuft · <b>l<i>ie</i>f</b> · ist <b>gel<u>au</u>fen</b><sup>a</sup>
</p>
<p class="r1Zeile rU3px rO0px">
<span lang="en">
<i>run, walk</i><i>to run,
to walk</i>
</span>
</p>
</div>
</section>
<section class="rBox"><p class="vGrnd"><b>other</b></p></section>
</body>
</html>
"""


@pytest.fixture
def sample_page():
    """Provide the markup of a dictionary page with one complete entry."""
    return SAMPLE_PAGE


@pytest.fixture
def test_config(tmp_path):
    """Provide a test configuration with temporary paths."""
    return KartenConfig(
        verbformen_url="https://dict.test/?w=",
        words_path=tmp_path / "karten" / "words.csv",
        session_size=5,
        request_timeout=1.0,
    )


@pytest.fixture
def cli_args(test_config):
    """Provide parsed CLI arguments pointing at the temporary word file."""
    return argparse.Namespace(
        command=None,
        words=str(test_config.words_path),
        debug=False,
        session_size=None,
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def make_card():
    """Factory fixture for creating Card instances with sensible defaults."""

    def _make(
        origin=("laufen",),
        translation=("to run", "to walk"),
        forms=(
            ("l", ColorClass.NEUTRAL),
            ("ie", ColorClass.PRIMARY),
            ("f", ColorClass.NEUTRAL),
        ),
    ):
        return Card(
            origin=list(origin),
            translation=list(translation),
            forms=[Syllable(value, color) for value, color in forms],
        )

    return _make


@pytest.fixture
def make_word():
    """Factory fixture for creating Word instances with sensible defaults."""

    def _make(origin="laufen", translation="to run", score=0, last_seen_at=None, card=None):
        return Word(
            origin=origin,
            translation=translation,
            last_seen_at=last_seen_at,
            score=score,
            card=card,
        )

    return _make


@pytest.fixture
def word_store(test_config):
    """Provide a word store backed by an empty file."""
    store = WordStore(test_config.words_path)
    store.ensure_exists()
    return store
