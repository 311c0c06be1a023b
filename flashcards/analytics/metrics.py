"""
Metric computations over review history.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from flashcards.leitner import AnswerDifficulty, ReviewRecord

HISTORY_COLUMNS = ["front", "back", "difficulty", "difficulty_name", "timestamp", "day_utc"]


def history_to_frame(history: Sequence[ReviewRecord]) -> pd.DataFrame:
    """
    One row per review record, timestamps converted to UTC datetimes.
    """
    if not history:
        return pd.DataFrame(columns=HISTORY_COLUMNS)

    df = pd.DataFrame(
        {
            "front": [record.card.front for record in history],
            "back": [record.card.back for record in history],
            "difficulty": [int(record.difficulty) for record in history],
            "difficulty_name": [record.difficulty.name for record in history],
            "timestamp": pd.to_datetime([record.timestamp for record in history], unit="s", utc=True),
        }
    )
    df["day_utc"] = df["timestamp"].dt.floor("D")
    return df


def build_day_index(events_df: pd.DataFrame) -> pd.DatetimeIndex:
    """
    Build a dense UTC day index spanning the review range.
    """
    if events_df.empty:
        return pd.DatetimeIndex([], tz="UTC")
    start = events_df["day_utc"].min()
    end = events_df["day_utc"].max()
    return pd.date_range(start=start, end=end, freq="D")


def compute_reviews_daily(events_df: pd.DataFrame, day_index: pd.DatetimeIndex) -> pd.Series:
    """
    Number of reviews per day, zero on days without any.
    """
    if events_df.empty or len(day_index) == 0:
        return pd.Series(dtype="int64")
    counts = events_df.groupby("day_utc").size()
    return counts.reindex(day_index, fill_value=0).astype("int64")


def compute_accuracy_daily(events_df: pd.DataFrame, day_index: pd.DatetimeIndex) -> pd.Series:
    """
    Share of EASY answers per day, 0.0 on days without reviews.
    """
    if events_df.empty or len(day_index) == 0:
        return pd.Series(dtype="float64")
    is_easy = events_df["difficulty"] == int(AnswerDifficulty.EASY)
    easy = is_easy.groupby(events_df["day_utc"]).sum().reindex(day_index, fill_value=0)
    total = events_df.groupby("day_utc").size().reindex(day_index, fill_value=0)
    accuracy = (easy / total.where(total > 0)).fillna(0.0)
    return accuracy.astype("float64")


def compute_difficulty_counts(events_df: pd.DataFrame) -> pd.Series:
    """
    Count of answers per difficulty, every difficulty present (HARD, MEDIUM, EASY).
    """
    names = [difficulty.name for difficulty in AnswerDifficulty]
    if events_df.empty:
        return pd.Series(0, index=names, dtype="int64")
    return events_df["difficulty_name"].value_counts().reindex(names, fill_value=0).astype("int64")


def compute_card_accuracy(events_df: pd.DataFrame) -> pd.DataFrame:
    """
    Per-card review count and EASY share, weakest cards first.
    """
    if events_df.empty:
        return pd.DataFrame(columns=["front", "reviews", "accuracy"])

    scoped = events_df.assign(is_easy=events_df["difficulty"] == int(AnswerDifficulty.EASY))
    per_card = scoped.groupby(["front", "back"]).agg(
        reviews=("is_easy", "size"),
        accuracy=("is_easy", "mean"),
    )
    per_card = per_card.reset_index().sort_values(
        ["accuracy", "reviews", "front"], ascending=[True, False, True]
    )
    return per_card[["front", "reviews", "accuracy"]].reset_index(drop=True)
