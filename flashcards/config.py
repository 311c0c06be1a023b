"""
Environment configuration.

Values are read from the process environment, with a local .env file loaded
first if present. Getters read the environment on every call so tests can
override values with monkeypatch.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


DEFAULT_DECK_PATH = "data/sample_deck.csv"
DEFAULT_BUCKET_COUNT = 5


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def get_log_level() -> str:
    """Log level name for configure_logging (default INFO)."""
    return os.getenv("LEITNER_LOG_LEVEL", "INFO").strip().upper()


def is_json_logging() -> bool:
    """Render log lines as JSON instead of key=value console output."""
    return _env_flag("LEITNER_LOG_JSON")


def is_strict_mode() -> bool:
    """Check bucket maps for cards stored in several buckets before updating."""
    return _env_flag("LEITNER_STRICT_INVARIANTS")


def get_deck_path() -> str:
    """Path of the CSV deck the app loads at startup."""
    return os.getenv("LEITNER_DECK_PATH", DEFAULT_DECK_PATH)


def get_bucket_count() -> int:
    """
    Number of buckets a freshly loaded deck starts with.

    Raises:
        ValueError: if LEITNER_BUCKET_COUNT is not a positive integer
    """
    raw = os.getenv("LEITNER_BUCKET_COUNT", str(DEFAULT_BUCKET_COUNT))
    try:
        count = int(raw)
    except ValueError:
        raise ValueError(f"LEITNER_BUCKET_COUNT must be an integer, got {raw!r}") from None
    if count < 1:
        raise ValueError(f"LEITNER_BUCKET_COUNT must be at least 1, got {count}")
    return count
