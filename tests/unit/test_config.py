"""Tests for configuration."""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from karten.config import KartenConfig, create_default_config


def test_defaults():
    config = KartenConfig()
    assert config.verbformen_url == "https://www.verbformen.com/?w="
    assert config.words_path == Path.home() / ".karten" / "words.csv"
    assert config.session_size == 20
    assert config.debug is False


def test_string_path_converted():
    config = KartenConfig(words_path="/tmp/words.csv")
    assert config.words_path == Path("/tmp/words.csv")


def test_create_default_config_overrides():
    config = create_default_config(session_size=3)
    assert config.session_size == 3
    assert config.request_timeout == 10.0


def test_config_is_frozen():
    config = KartenConfig()
    with pytest.raises(FrozenInstanceError):
        config.session_size = 1
