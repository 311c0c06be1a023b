"""
Study Session - one learner working through a deck day by day.

Holds the caller-side state around the Leitner core:
- buckets: the sparse bucket map (source of truth, mutated by grade())
- day: current day number, starting at 0
- queue: cards due today that have not been graded yet
- history: every ReviewRecord so far

No Streamlit or file I/O here; the app stores a StudySession in
st.session_state.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Optional

import structlog

from flashcards import leitner
from flashcards.leitner import (
    AnswerDifficulty,
    BucketMap,
    BucketRange,
    Flashcard,
    ProgressReport,
    ReviewRecord,
)

logger = structlog.get_logger(__name__)


@dataclass
class StudySession:
    buckets: BucketMap
    day: int = 0
    queue: List[Flashcard] = field(default_factory=list)
    history: List[ReviewRecord] = field(default_factory=list)
    reviewed_today: int = 0
    easy_today: int = 0

    def start_day(self) -> List[Flashcard]:
        """
        Fill the queue with today's due cards.

        Cards are ordered by front text so a day always replays the same way.
        """
        due = leitner.practice(leitner.to_bucket_sets(self.buckets), self.day)
        self.queue = sorted(due, key=lambda card: (card.front, card.back))
        self.reviewed_today = 0
        self.easy_today = 0
        logger.info("day_started", day=self.day, due=len(self.queue))
        return list(self.queue)

    @property
    def current_card(self) -> Optional[Flashcard]:
        return self.queue[0] if self.queue else None

    @property
    def is_day_complete(self) -> bool:
        return not self.queue

    def grade(self, difficulty: AnswerDifficulty, timestamp: Optional[float] = None) -> ReviewRecord:
        """
        Record an answer for the current card and move it between buckets.

        Raises:
            LookupError: if there is no card left to grade today
            CardNotFoundError: if the card was removed from the bucket map
        """
        card = self.current_card
        if card is None:
            raise LookupError(f"No cards left to grade on day {self.day}")
        if timestamp is None:
            timestamp = time.time()

        leitner.update(self.buckets, card, difficulty)

        record = ReviewRecord(card=card, difficulty=difficulty, timestamp=timestamp)
        self.history.append(record)
        self.queue.pop(0)
        self.reviewed_today += 1
        if difficulty == AnswerDifficulty.EASY:
            self.easy_today += 1
        return record

    def next_day(self) -> List[Flashcard]:
        """Advance to the following day and load its queue."""
        if self.queue:
            logger.info("day_skipped_cards", day=self.day, remaining=len(self.queue))
        self.day += 1
        return self.start_day()

    def hint(self) -> Optional[str]:
        card = self.current_card
        return leitner.get_hint(card) if card is not None else None

    def bucket_of(self, card: Flashcard) -> Optional[int]:
        return leitner.find_bucket(self.buckets, card)

    def bucket_range(self) -> Optional[BucketRange]:
        return leitner.get_bucket_range(leitner.to_bucket_sets(self.buckets))

    def progress(self) -> ProgressReport:
        return leitner.compute_progress(self.buckets, self.history)
