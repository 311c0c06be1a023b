"""
Deck loading.

Reads a CSV of cards into Flashcard objects and builds the starting bucket
map for a new learner.

CSV columns:
- front, back   required
- hint          optional, empty when missing
- tags          optional, ';'-separated

Rows are deduplicated on (front, back) after whitespace normalisation, since
a card may only live in one bucket.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

import pandas as pd
import structlog

from flashcards import config
from flashcards.leitner import BucketMap, Flashcard

logger = structlog.get_logger(__name__)

# Column names
FRONT_COL = "front"
BACK_COL = "back"
HINT_COL = "hint"
TAGS_COL = "tags"
TAG_SEPARATOR = ";"


def normalize(s: pd.Series) -> pd.Series:
    """Strip and collapse internal runs of whitespace."""
    return s.astype(str).str.strip().str.replace(r"\s+", " ", regex=True)


def _split_tags(raw: str) -> tuple:
    return tuple(tag.strip() for tag in raw.split(TAG_SEPARATOR) if tag.strip())


def cards_from_frame(df: pd.DataFrame) -> List[Flashcard]:
    """
    Convert a deck DataFrame into cards.

    Raises:
        ValueError: if the front or back column is missing
    """
    if FRONT_COL not in df.columns or BACK_COL not in df.columns:
        raise ValueError(
            f"Deck must contain columns '{FRONT_COL}' and '{BACK_COL}'. "
            f"Found: {list(df.columns)}"
        )

    df = df.copy()
    df = df.dropna(subset=[FRONT_COL, BACK_COL])
    df[FRONT_COL] = normalize(df[FRONT_COL])
    df[BACK_COL] = normalize(df[BACK_COL])
    df = df[(df[FRONT_COL] != "") & (df[BACK_COL] != "")].copy()

    df[HINT_COL] = df[HINT_COL].fillna("").astype(str) if HINT_COL in df.columns else ""
    df[TAGS_COL] = df[TAGS_COL].fillna("").astype(str) if TAGS_COL in df.columns else ""

    before = len(df)
    df = df.drop_duplicates(subset=[FRONT_COL, BACK_COL], keep="first")
    if len(df) < before:
        logger.info("deck_duplicates_dropped", count=before - len(df))

    return [
        Flashcard(
            front=row[FRONT_COL],
            back=row[BACK_COL],
            hint=row[HINT_COL],
            tags=_split_tags(row[TAGS_COL]),
        )
        for row in df.to_dict("records")
    ]


def load_deck(path: Union[str, Path, None] = None) -> List[Flashcard]:
    """
    Load cards from a CSV file.

    Args:
        path: CSV path (default: LEITNER_DECK_PATH)

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if required columns are missing
    """
    deck_path = Path(path or config.get_deck_path())
    if not deck_path.exists():
        raise FileNotFoundError(f"Missing deck file: {deck_path}")

    df = pd.read_csv(deck_path, dtype=str, keep_default_na=False, na_values=[])
    cards = cards_from_frame(df)
    logger.info("deck_loaded", path=str(deck_path), cards=len(cards))
    return cards


def initial_buckets(cards: Iterable[Flashcard], bucket_count: int | None = None) -> BucketMap:
    """
    Build the starting bucket map: every card in bucket 0.

    Buckets 1..bucket_count-1 are created empty so EASY answers can promote
    cards (update() never moves past the highest existing bucket).
    """
    if bucket_count is None:
        bucket_count = config.get_bucket_count()
    if bucket_count < 1:
        raise ValueError(f"bucket_count must be at least 1, got {bucket_count}")

    buckets: BucketMap = {bucket: set() for bucket in range(bucket_count)}
    buckets[0].update(cards)
    return buckets
