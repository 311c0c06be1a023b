"""
Scheduler - Modified-Leitner Practice and Update Rules

Pure scheduling logic (no I/O):
- practice(): which cards are due on a given day
- update(): move a card between buckets after a review

Bucket i is due on day d iff d % 2**i == 0, so bucket 0 is practiced daily,
bucket 1 every second day, bucket 2 every fourth day and so on.
"""

from __future__ import annotations

from typing import Set

import structlog

from flashcards import config
from flashcards.leitner.buckets import find_bucket, find_duplicate_cards
from flashcards.leitner.constants import LOWEST_BUCKET, AnswerDifficulty
from flashcards.leitner.errors import CardNotFoundError, DuplicateCardError, InvalidInputError
from flashcards.leitner.models import BucketMap, BucketSets, Flashcard

logger = structlog.get_logger(__name__)


def is_bucket_due(bucket: int, day: int) -> bool:
    """True if bucket `bucket` is practiced on day `day`."""
    return day % (1 << bucket) == 0


def practice(bucket_sets: BucketSets, day: int) -> Set[Flashcard]:
    """
    Select the cards to practice on a particular day.

    Args:
        bucket_sets: Dense list of bucket sets (see to_bucket_sets)
        day: Day number, starting from 0

    Returns:
        New set with every card from each due bucket

    Raises:
        InvalidInputError: if day is negative
    """
    if day < 0:
        raise InvalidInputError(f"Day number must be non-negative, got {day}")

    selected: Set[Flashcard] = set()
    for bucket, cards in enumerate(bucket_sets):
        if cards is not None and is_bucket_due(bucket, day):
            selected.update(cards)

    logger.debug("practice_selected", day=day, due_count=len(selected))
    return selected


def next_bucket(current: int, difficulty: AnswerDifficulty, bucket_count: int) -> int:
    """
    Compute the destination bucket for a review outcome.

    EASY moves up one bucket but never past bucket_count - 1, HARD moves down
    one bucket but never below 0, MEDIUM stays put.
    """
    if difficulty == AnswerDifficulty.EASY:
        return min(current + 1, bucket_count - 1)
    if difficulty == AnswerDifficulty.HARD:
        return max(current - 1, LOWEST_BUCKET)
    return current


def update(buckets: BucketMap, card: Flashcard, difficulty: AnswerDifficulty) -> BucketMap:
    """
    Move a card to its new bucket after a practice trial (modifies in place).

    Precondition: the card is in exactly one bucket. With strict invariant
    checking enabled (LEITNER_STRICT_INVARIANTS=true) a map holding any card
    in several buckets is rejected; otherwise the first bucket found wins.

    Args:
        buckets: Sparse bucket map owned by the caller
        card: Card that was practiced
        difficulty: How well the learner did

    Returns:
        The same bucket map, for chaining

    Raises:
        CardNotFoundError: if the card is in no bucket
        InvalidInputError: if difficulty is not an AnswerDifficulty value
        DuplicateCardError: in strict mode, if any card is in several buckets
    """
    try:
        difficulty = AnswerDifficulty(difficulty)
    except ValueError:
        raise InvalidInputError(f"Unknown answer difficulty: {difficulty!r}") from None

    if config.is_strict_mode():
        duplicates = find_duplicate_cards(buckets)
        if duplicates:
            raise DuplicateCardError(duplicates)

    current = find_bucket(buckets, card)
    if current is None:
        raise CardNotFoundError(card)

    new = next_bucket(current, difficulty, len(buckets))

    buckets[current].discard(card)
    if new not in buckets:
        buckets[new] = set()
    buckets[new].add(card)

    logger.debug(
        "card_moved",
        front=card.front,
        difficulty=difficulty.name,
        from_bucket=current,
        to_bucket=new,
    )
    return buckets
