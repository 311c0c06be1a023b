"""Shared fixtures for the Leitner scheduler tests."""

import pytest

from flashcards.leitner import Flashcard


@pytest.fixture(autouse=True)
def _default_env(monkeypatch):
    """Keep tests independent of any local .env values."""
    monkeypatch.delenv("LEITNER_STRICT_INVARIANTS", raising=False)
    monkeypatch.delenv("LEITNER_BUCKET_COUNT", raising=False)
    monkeypatch.delenv("LEITNER_DECK_PATH", raising=False)


@pytest.fixture
def card_a():
    return Flashcard("What is the capital of France?", "Paris", "City of light", ("geo",))


@pytest.fixture
def card_b():
    return Flashcard("2 + 2", "4", "", ("math",))


@pytest.fixture
def card_c():
    return Flashcard("H2O", "Water", "   ", ("chem",))
