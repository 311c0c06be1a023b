"""
Service layer to assemble the progress dashboard.
"""

from __future__ import annotations

from typing import Sequence

from flashcards import leitner
from flashcards.analytics.metrics import (
    build_day_index,
    compute_accuracy_daily,
    compute_card_accuracy,
    compute_difficulty_counts,
    compute_reviews_daily,
    history_to_frame,
)
from flashcards.analytics.types import ProgressDashboardData
from flashcards.leitner import BucketMap, ReviewRecord


def build_progress_dashboard(buckets: BucketMap, history: Sequence[ReviewRecord]) -> ProgressDashboardData:
    """
    Build all KPI values and series needed by the progress page.

    compute_progress runs first, so malformed input raises InvalidDataError
    before any frame is built.
    """
    report = leitner.compute_progress(buckets, history)
    bucket_range = leitner.get_bucket_range(leitner.to_bucket_sets(buckets))

    events_df = history_to_frame(history)
    day_index = build_day_index(events_df)

    return ProgressDashboardData(
        report=report,
        bucket_range=bucket_range,
        reviews_daily=compute_reviews_daily(events_df, day_index),
        accuracy_daily=compute_accuracy_daily(events_df, day_index),
        difficulty_counts=compute_difficulty_counts(events_df),
        card_accuracy=compute_card_accuracy(events_df),
    )
