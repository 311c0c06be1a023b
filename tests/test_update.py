"""Tests for update(): moving cards between buckets."""

import pytest

from flashcards.leitner import (
    AnswerDifficulty,
    CardNotFoundError,
    DuplicateCardError,
    InvalidDataError,
    InvalidInputError,
    find_bucket,
    next_bucket,
    update,
)


def test_update_returns_same_map(card_a):
    buckets = {0: {card_a}, 1: set()}
    assert update(buckets, card_a, AnswerDifficulty.MEDIUM) is buckets


def test_easy_moves_up_one_bucket(card_a):
    buckets = {0: {card_a}, 1: set(), 2: set()}
    update(buckets, card_a, AnswerDifficulty.EASY)
    assert buckets == {0: set(), 1: {card_a}, 2: set()}


def test_easy_on_last_bucket_is_noop(card_a, card_b):
    buckets = {0: {card_b}, 1: {card_a}}
    update(buckets, card_a, AnswerDifficulty.EASY)
    assert buckets == {0: {card_b}, 1: {card_a}}


def test_easy_with_single_bucket_stays_in_bucket_zero(card_a):
    buckets = {0: {card_a}}
    update(buckets, card_a, AnswerDifficulty.EASY)
    assert buckets == {0: {card_a}}


def test_easy_cap_uses_map_size_not_max_key(card_a):
    # Two keys, so the cap is bucket 1 even though the card sits in bucket 5.
    buckets = {0: set(), 5: {card_a}}
    update(buckets, card_a, AnswerDifficulty.EASY)
    assert find_bucket(buckets, card_a) == 1
    assert buckets[5] == set()


def test_hard_moves_down_one_bucket(card_a):
    buckets = {0: set(), 1: set(), 2: {card_a}}
    update(buckets, card_a, AnswerDifficulty.HARD)
    assert buckets == {0: set(), 1: {card_a}, 2: set()}


def test_hard_on_bucket_zero_is_noop(card_a):
    buckets = {0: {card_a}, 1: set()}
    update(buckets, card_a, AnswerDifficulty.HARD)
    assert buckets == {0: {card_a}, 1: set()}


def test_hard_creates_missing_destination(card_a):
    buckets = {0: set(), 3: {card_a}}
    update(buckets, card_a, AnswerDifficulty.HARD)
    assert buckets[2] == {card_a}
    assert buckets[3] == set()


@pytest.mark.parametrize("bucket", [0, 1, 2])
def test_medium_is_noop(card_a, bucket):
    buckets = {0: set(), 1: set(), 2: set()}
    buckets[bucket].add(card_a)
    update(buckets, card_a, AnswerDifficulty.MEDIUM)
    assert find_bucket(buckets, card_a) == bucket
    assert sum(len(cards) for cards in buckets.values()) == 1


def test_missing_card_raises_without_mutation(card_a, card_b):
    buckets = {0: {card_a}, 1: set()}
    with pytest.raises(CardNotFoundError) as excinfo:
        update(buckets, card_b, AnswerDifficulty.EASY)
    assert excinfo.value.card == card_b
    assert buckets == {0: {card_a}, 1: set()}


def test_not_found_is_a_lookup_error(card_a):
    with pytest.raises(LookupError):
        update({}, card_a, AnswerDifficulty.HARD)


def test_other_cards_untouched(card_a, card_b, card_c):
    buckets = {0: {card_a, card_b}, 1: {card_c}}
    update(buckets, card_a, AnswerDifficulty.EASY)
    assert buckets == {0: {card_b}, 1: {card_c, card_a}}


def test_duplicates_tolerated_by_default(card_a):
    buckets = {0: {card_a}, 1: {card_a}, 2: set()}
    update(buckets, card_a, AnswerDifficulty.MEDIUM)
    assert card_a in buckets[0]


def test_strict_mode_rejects_duplicates(monkeypatch, card_a):
    monkeypatch.setenv("LEITNER_STRICT_INVARIANTS", "true")
    buckets = {0: {card_a}, 1: {card_a}, 2: set()}
    with pytest.raises(DuplicateCardError) as excinfo:
        update(buckets, card_a, AnswerDifficulty.EASY)
    assert isinstance(excinfo.value, InvalidDataError)
    assert excinfo.value.duplicates == [card_a]
    assert buckets == {0: {card_a}, 1: {card_a}, 2: set()}


def test_strict_mode_allows_valid_map(monkeypatch, card_a):
    monkeypatch.setenv("LEITNER_STRICT_INVARIANTS", "true")
    buckets = {0: {card_a}, 1: set()}
    update(buckets, card_a, AnswerDifficulty.EASY)
    assert buckets == {0: set(), 1: {card_a}}


def test_next_bucket():
    assert next_bucket(2, AnswerDifficulty.EASY, 5) == 3
    assert next_bucket(4, AnswerDifficulty.EASY, 5) == 4
    assert next_bucket(0, AnswerDifficulty.HARD, 5) == 0
    assert next_bucket(3, AnswerDifficulty.HARD, 5) == 2
    assert next_bucket(3, AnswerDifficulty.MEDIUM, 5) == 3


def test_plain_int_rating_is_accepted(card_a):
    buckets = {0: {card_a}, 1: set()}
    update(buckets, card_a, 2)
    assert buckets == {0: set(), 1: {card_a}}


@pytest.mark.parametrize("difficulty", [7, -1, None, "EASY"])
def test_unknown_rating_raises_without_mutation(card_a, difficulty):
    buckets = {0: {card_a}, 1: set()}
    with pytest.raises(InvalidInputError):
        update(buckets, card_a, difficulty)
    assert buckets == {0: {card_a}, 1: set()}
