"""
Leitner Models

Immutable value types shared by the scheduler, hint and progress modules.

Two bucket representations are used:
- BucketMap (sparse): bucket number -> set of cards. The caller owns it and
  it is the source of truth; update() mutates it in place.
- BucketSets (dense): list indexed by bucket number, derived on demand with
  to_bucket_sets() for range and practice queries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from flashcards.leitner.constants import AnswerDifficulty


@dataclass(frozen=True)
class Flashcard:
    """
    A single learning item.

    Cards are compared and hashed by value, so two cards with the same
    front, back, hint and tags are the same card.
    """
    front: str
    back: str
    hint: str = ""
    tags: tuple = field(default_factory=tuple)

    def __post_init__(self):
        """Normalise tags to a tuple so the card stays hashable."""
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags))


BucketMap = Dict[int, Set[Flashcard]]
BucketSets = List[Optional[Set[Flashcard]]]


@dataclass(frozen=True)
class BucketRange:
    """Lowest and highest occupied bucket."""
    min_bucket: int
    max_bucket: int


@dataclass(frozen=True)
class ReviewRecord:
    """
    One past answer.

    timestamp is Unix epoch seconds.
    """
    card: Flashcard
    difficulty: AnswerDifficulty
    timestamp: float


@dataclass(frozen=True)
class ProgressReport:
    """Summary of learning progress over a bucket map and review history."""
    accuracy_rate: float
    bucket_distribution: Dict[int, int]
    average_difficulty: Optional[float]
