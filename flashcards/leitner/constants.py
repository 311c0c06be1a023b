"""
Leitner Constants

Difficulty ratings and fixed values used by the Modified-Leitner scheduler.
"""

from enum import IntEnum


# ---- Answer Difficulty ----

class AnswerDifficulty(IntEnum):
    """How well the learner answered a card. Values are ordinals used in means."""
    HARD = 0    # Answer was wrong or took a lot of effort
    MEDIUM = 1  # Answer was correct, nothing notable
    EASY = 2    # Answer came immediately


# ---- Bucket Cadence ----

LOWEST_BUCKET = 0  # Least mastered, practiced every day


# ---- Hints ----

HINT_FALLBACK_PREFIX = "Think about the key concepts related to "
