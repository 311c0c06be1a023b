"""
Leitner - Modified-Leitner Spaced Repetition

Main API for the flashcard scheduler.

Cards are grouped into numbered buckets (0 = least mastered). Bucket i is
practiced on every day d with d % 2**i == 0, and each review moves a card
one bucket up (EASY), one bucket down (HARD) or leaves it (MEDIUM).

Quick start:
    from flashcards import leitner

    buckets = {0: {card_a, card_b}, 1: set()}

    # Cards due today
    due = leitner.practice(leitner.to_bucket_sets(buckets), day)

    # Record an answer (mutates buckets)
    leitner.update(buckets, card_a, leitner.AnswerDifficulty.EASY)

    # Progress summary
    report = leitner.compute_progress(buckets, history)
"""

# Representation conversion and range queries
from flashcards.leitner.buckets import (
    to_bucket_sets,
    get_bucket_range,
    find_bucket,
    find_duplicate_cards,
)

# Scheduling rules
from flashcards.leitner.scheduler import (
    practice,
    update,
    next_bucket,
    is_bucket_due,
)

from flashcards.leitner.hints import get_hint
from flashcards.leitner.progress import compute_progress

# Types
from flashcards.leitner.constants import AnswerDifficulty, HINT_FALLBACK_PREFIX
from flashcards.leitner.models import (
    Flashcard,
    BucketMap,
    BucketSets,
    BucketRange,
    ReviewRecord,
    ProgressReport,
)

# Errors
from flashcards.leitner.errors import (
    LeitnerError,
    InvalidInputError,
    CardNotFoundError,
    InvalidDataError,
    InvalidBucketsError,
    InvalidHistoryError,
    DuplicateCardError,
)


__all__ = [
    # Core algorithm
    "to_bucket_sets",
    "get_bucket_range",
    "practice",
    "update",
    "get_hint",
    "compute_progress",

    # Helpers
    "find_bucket",
    "find_duplicate_cards",
    "next_bucket",
    "is_bucket_due",

    # Types
    "AnswerDifficulty",
    "HINT_FALLBACK_PREFIX",
    "Flashcard",
    "BucketMap",
    "BucketSets",
    "BucketRange",
    "ReviewRecord",
    "ProgressReport",

    # Errors
    "LeitnerError",
    "InvalidInputError",
    "CardNotFoundError",
    "InvalidDataError",
    "InvalidBucketsError",
    "InvalidHistoryError",
    "DuplicateCardError",
]
