"""Tests for practice(): which buckets are due on a given day."""

import pytest

from flashcards.leitner import InvalidInputError, is_bucket_due, practice, to_bucket_sets


def test_practice_negative_day_raises(card_a):
    with pytest.raises(InvalidInputError):
        practice([{card_a}], -1)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        practice([], -3)


def test_practice_empty_buckets_gives_empty_set():
    assert practice([], 0) == set()


def test_practice_bucket_zero_every_day(card_a, card_b):
    bucket_sets = to_bucket_sets({0: {card_a, card_b}})
    for day in range(10):
        assert practice(bucket_sets, day) == {card_a, card_b}


def test_practice_day_four_with_only_bucket_zero(card_a, card_b):
    assert practice(to_bucket_sets({0: {card_a, card_b}}), 4) == {card_a, card_b}


def test_practice_day_one_excludes_bucket_one(card_a, card_b):
    assert practice(to_bucket_sets({0: {card_a}, 1: {card_b}}), 1) == {card_a}


def test_practice_day_zero_includes_every_bucket(card_a, card_b, card_c):
    bucket_sets = to_bucket_sets({0: {card_a}, 3: {card_b}, 6: {card_c}})
    assert practice(bucket_sets, 0) == {card_a, card_b, card_c}


@pytest.mark.parametrize("bucket", [0, 1, 2, 3])
def test_practice_bucket_due_exactly_on_multiples(card_a, bucket):
    bucket_sets = to_bucket_sets({bucket: {card_a}})
    due_days = [day for day in range(33) if practice(bucket_sets, day)]
    assert due_days == list(range(0, 33, 2 ** bucket))


def test_practice_mixed_buckets(card_a, card_b, card_c):
    bucket_sets = to_bucket_sets({0: {card_a}, 1: {card_b}, 2: {card_c}})
    assert practice(bucket_sets, 2) == {card_a, card_b}
    assert practice(bucket_sets, 4) == {card_a, card_b, card_c}
    assert practice(bucket_sets, 6) == {card_a, card_b}


def test_practice_skips_none_slots(card_a):
    assert practice([None, {card_a}], 2) == {card_a}


def test_practice_deduplicates_across_buckets(card_a):
    assert practice([{card_a}, {card_a}], 0) == {card_a}


def test_practice_returns_new_set(card_a):
    bucket_sets = [{card_a}]
    selected = practice(bucket_sets, 0)
    selected.clear()
    assert bucket_sets[0] == {card_a}


def test_is_bucket_due():
    assert is_bucket_due(0, 7)
    assert is_bucket_due(2, 8)
    assert not is_bucket_due(2, 6)
