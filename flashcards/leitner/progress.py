"""
Progress - Learning Statistics

Aggregates a bucket map and review history into a ProgressReport.
Inputs are validated up front; nothing is computed from malformed data.
"""

from __future__ import annotations

from numbers import Real
from typing import Sequence

from flashcards.leitner.constants import AnswerDifficulty
from flashcards.leitner.errors import InvalidBucketsError, InvalidHistoryError
from flashcards.leitner.models import BucketMap, ProgressReport, ReviewRecord


def _is_valid_bucket_key(key) -> bool:
    return isinstance(key, int) and not isinstance(key, bool) and key >= 0


def _is_valid_record(record) -> bool:
    card = getattr(record, "card", None)
    difficulty = getattr(record, "difficulty", None)
    timestamp = getattr(record, "timestamp", None)
    return (
        card is not None
        and isinstance(difficulty, AnswerDifficulty)
        and isinstance(timestamp, Real)
        and not isinstance(timestamp, bool)
    )


def validate_buckets(buckets: BucketMap) -> None:
    """Raise InvalidBucketsError unless every key is a non-negative int."""
    bad_keys = [key for key in buckets if not _is_valid_bucket_key(key)]
    if bad_keys:
        raise InvalidBucketsError(
            f"Invalid bucket keys {bad_keys!r}: must be non-negative integers"
        )


def validate_history(history: Sequence[ReviewRecord]) -> None:
    """Raise InvalidHistoryError for a non-sequence or any malformed record."""
    if not isinstance(history, (list, tuple)):
        raise InvalidHistoryError(
            f"History must be a list or tuple of review records, got {type(history).__name__}"
        )
    for position, record in enumerate(history):
        if not _is_valid_record(record):
            raise InvalidHistoryError(f"Invalid review record at position {position}: {record!r}")


def compute_progress(buckets: BucketMap, history: Sequence[ReviewRecord]) -> ProgressReport:
    """
    Compute accuracy, bucket distribution and mean difficulty.

    Args:
        buckets: Sparse bucket map
        history: Past review records, oldest first

    Returns:
        ProgressReport where
        - accuracy_rate is the share of EASY answers (0.0 with no history)
        - bucket_distribution maps each key in the map to its card count
        - average_difficulty is the mean ordinal (None with no history)

    Raises:
        InvalidBucketsError: for a negative or non-integer bucket key
        InvalidHistoryError: for a malformed history
    """
    validate_buckets(buckets)
    validate_history(history)

    total = len(history)
    easy = sum(1 for record in history if record.difficulty == AnswerDifficulty.EASY)
    accuracy_rate = easy / total if total > 0 else 0.0

    bucket_distribution = {bucket: len(cards) for bucket, cards in buckets.items()}

    if total > 0:
        average_difficulty = sum(int(record.difficulty) for record in history) / total
    else:
        average_difficulty = None

    return ProgressReport(
        accuracy_rate=accuracy_rate,
        bucket_distribution=bucket_distribution,
        average_difficulty=average_difficulty,
    )
