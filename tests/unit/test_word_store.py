"""Tests for WordStore."""

from datetime import datetime, timezone

import pytest

from karten.exceptions import PersistenceIOError, RecordError
from karten.services import WordStore


class TestWordStoreFile:
    """Tests for file handling."""

    def test_ensure_exists_creates_folder_and_header(self, test_config):
        store = WordStore(test_config.words_path)
        store.ensure_exists()

        assert test_config.words_path.exists()
        lines = test_config.words_path.read_text(encoding="utf-8").splitlines()
        assert lines == ["origin;translation;last_seen_at;score;meta"]

    def test_ensure_exists_keeps_existing_file(self, word_store, make_word):
        word_store.add_word(make_word())
        word_store.ensure_exists()
        assert len(word_store.load_all()) == 1

    def test_load_missing_file_raises(self, tmp_path):
        store = WordStore(tmp_path / "missing.csv")
        with pytest.raises(PersistenceIOError):
            store.load_all()

    def test_save_into_missing_folder_raises(self, tmp_path):
        store = WordStore(tmp_path / "no" / "such" / "words.csv")
        with pytest.raises(PersistenceIOError):
            store.save_all([])

    def test_empty_file_loads_nothing(self, word_store):
        assert word_store.load_all() == []

    def test_truncated_row_aborts_load(self, word_store):
        with word_store.path.open("a", encoding="utf-8") as f:
            f.write("laufen;to run;2024-01-02T03:04:05Z\n")

        with pytest.raises(RecordError):
            word_store.load_all()

    def test_blank_lines_are_skipped(self, word_store, make_word):
        word_store.add_word(make_word(origin="laufen", translation="to run"))
        with word_store.path.open("a", encoding="utf-8") as f:
            f.write("\n")

        [word] = word_store.load_all()
        assert word.origin == "laufen"

    def test_lenient_row_loads(self, word_store):
        with word_store.path.open("a", encoding="utf-8") as f:
            f.write("laufen;to run;whenever;lots;\n")

        [word] = word_store.load_all()
        assert word.origin == "laufen"
        assert word.last_seen_at is None
        assert word.score == 0

    def test_accepts_string_path(self, test_config):
        store = WordStore(str(test_config.words_path))
        assert store.path == test_config.words_path


class TestWordStoreWords:
    """Tests for adding, saving and selecting words."""

    def test_save_all_and_load_all(self, word_store, make_word, make_card):
        words = [
            make_word(origin="laufen", score=2, card=make_card()),
            make_word(
                origin="gehen",
                translation="to go; to walk",
                score=5,
                last_seen_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
            ),
        ]

        assert word_store.save_all(words) == 2
        assert word_store.load_all() == words

    def test_add_word_appends(self, word_store, make_word):
        word_store.add_word(make_word(origin="laufen"))
        word_store.add_word(make_word(origin="gehen"))

        assert [w.origin for w in word_store.load_all()] == ["laufen", "gehen"]

    def test_add_word_allows_duplicates(self, word_store, make_word):
        word_store.add_word(make_word(origin="laufen"))
        word_store.add_word(make_word(origin="laufen"))
        assert len(word_store.load_all()) == 2

    def test_save_replaces_by_origin(self, word_store, make_word):
        word_store.save_all([make_word(origin="laufen", score=1), make_word(origin="gehen", score=1)])

        assert word_store.save(make_word(origin="gehen", score=4)) is True

        scores = {w.origin: w.score for w in word_store.load_all()}
        assert scores == {"laufen": 1, "gehen": 4}

    def test_save_unknown_word(self, word_store, make_word):
        word_store.add_word(make_word(origin="laufen"))

        assert word_store.save(make_word(origin="gehen", score=3)) is False
        assert [w.origin for w in word_store.load_all()] == ["laufen"]

    def test_get_words_lowest_scores(self, word_store, make_word):
        word_store.save_all(
            [
                make_word(origin="a", score=4),
                make_word(origin="b", score=0),
                make_word(origin="c", score=2),
                make_word(origin="d", score=5),
            ]
        )

        queue = word_store.get_words(2)

        assert len(queue) == 2
        assert [queue.next().origin, queue.next().origin] == ["b", "c"]

    def test_get_words_more_than_available(self, word_store, make_word):
        word_store.add_word(make_word())
        assert len(word_store.get_words(20)) == 1

    def test_get_words_zero(self, word_store, make_word):
        word_store.add_word(make_word())
        assert word_store.get_words(0).is_empty() is True
