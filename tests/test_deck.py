"""Tests for CSV deck loading and starting bucket maps."""

import pandas as pd
import pytest

from flashcards.deck import cards_from_frame, initial_buckets, load_deck
from flashcards.leitner import Flashcard


def _write_csv(tmp_path, text):
    path = tmp_path / "deck.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_deck_reads_cards(tmp_path):
    path = _write_csv(
        tmp_path,
        "front,back,hint,tags\n"
        "Hola,Hello,greeting,spanish;basics\n"
        "Adiós,Goodbye,,spanish\n",
    )
    cards = load_deck(path)
    assert cards == [
        Flashcard("Hola", "Hello", "greeting", ("spanish", "basics")),
        Flashcard("Adiós", "Goodbye", "", ("spanish",)),
    ]


def test_load_deck_without_optional_columns(tmp_path):
    path = _write_csv(tmp_path, "front,back\nsun,sol\n")
    assert load_deck(path) == [Flashcard("sun", "sol")]


def test_load_deck_uses_configured_path(tmp_path, monkeypatch):
    path = _write_csv(tmp_path, "front,back\nsun,sol\n")
    monkeypatch.setenv("LEITNER_DECK_PATH", str(path))
    assert load_deck() == [Flashcard("sun", "sol")]


def test_load_deck_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_deck(tmp_path / "nope.csv")


def test_load_deck_missing_columns(tmp_path):
    path = _write_csv(tmp_path, "question,answer\nsun,sol\n")
    with pytest.raises(ValueError, match="front"):
        load_deck(path)


def test_cards_from_frame_normalizes_and_dedupes():
    df = pd.DataFrame(
        {
            "front": ["  big   cat ", "big cat", "", None],
            "back": ["lion", " lion", "empty", "none"],
        }
    )
    assert cards_from_frame(df) == [Flashcard("big cat", "lion")]


def test_initial_buckets_puts_all_cards_in_bucket_zero(card_a, card_b):
    buckets = initial_buckets([card_a, card_b], bucket_count=3)
    assert buckets == {0: {card_a, card_b}, 1: set(), 2: set()}
    assert buckets[1] is not buckets[2]


def test_initial_buckets_uses_configured_count(card_a, monkeypatch):
    monkeypatch.setenv("LEITNER_BUCKET_COUNT", "2")
    assert initial_buckets([card_a]) == {0: {card_a}, 1: set()}


def test_initial_buckets_rejects_zero(card_a):
    with pytest.raises(ValueError):
        initial_buckets([card_a], bucket_count=0)
