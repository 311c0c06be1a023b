"""
Types for progress dashboards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from flashcards.leitner import BucketRange, ProgressReport


@dataclass(frozen=True)
class ProgressDashboardData:
    """
    Precomputed metrics and series for the progress page.
    """
    report: ProgressReport
    bucket_range: Optional[BucketRange]
    reviews_daily: pd.Series
    accuracy_daily: pd.Series
    difficulty_counts: pd.Series
    card_accuracy: pd.DataFrame
