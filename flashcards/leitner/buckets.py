"""
Buckets - Conversion and Range Queries

Converts the sparse BucketMap into the dense BucketSets view and answers
read-only questions about bucket occupancy. Nothing here mutates its input.
"""

from __future__ import annotations

from typing import List, Optional

from flashcards.leitner.errors import InvalidBucketsError
from flashcards.leitner.models import BucketMap, BucketRange, BucketSets, Flashcard


def to_bucket_sets(buckets: BucketMap) -> BucketSets:
    """
    Convert a BucketMap into a list of sets indexed by bucket number.

    Buckets missing from the map become empty sets, each its own object.
    Buckets present in the map keep the map's set.
    Negative keys are rejected rather than indexed from the end of the list.

    Args:
        buckets: Sparse map of bucket number -> cards

    Returns:
        List of length max(bucket) + 1, or an empty list for an empty map

    Raises:
        InvalidBucketsError: if a bucket key is negative
    """
    negative = [bucket for bucket in buckets if bucket < 0]
    if negative:
        raise InvalidBucketsError(f"Invalid bucket keys {negative!r}: must be non-negative")

    max_bucket = max(buckets.keys(), default=-1)
    bucket_sets: BucketSets = [set() for _ in range(max_bucket + 1)]
    for bucket, cards in buckets.items():
        bucket_sets[bucket] = cards
    return bucket_sets


def get_bucket_range(bucket_sets: BucketSets) -> Optional[BucketRange]:
    """
    Find the lowest and highest buckets that contain cards.

    Args:
        bucket_sets: Dense list of bucket sets

    Returns:
        BucketRange, or None when every bucket is empty
    """
    occupied = [index for index, cards in enumerate(bucket_sets) if cards]
    if not occupied:
        return None
    return BucketRange(min_bucket=occupied[0], max_bucket=occupied[-1])


def find_bucket(buckets: BucketMap, card: Flashcard) -> Optional[int]:
    """Return the first bucket (in map order) holding the card, or None."""
    for bucket, cards in buckets.items():
        if card in cards:
            return bucket
    return None


def find_duplicate_cards(buckets: BucketMap) -> List[Flashcard]:
    """
    List cards that appear in more than one bucket.

    A valid BucketMap never has any; update() relies on that.
    """
    seen = set()
    duplicates = []
    for cards in buckets.values():
        for card in cards:
            if card in seen and card not in duplicates:
                duplicates.append(card)
            seen.add(card)
    return duplicates
