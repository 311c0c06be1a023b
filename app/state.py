"""
Streamlit session state and startup helpers.
"""

from __future__ import annotations

import streamlit as st

from flashcards import config, deck
from flashcards.log import configure_logging
from flashcards.session import StudySession


def init_logging() -> None:
    """
    Configure logging (cached per Streamlit server process).
    """
    @st.cache_resource
    def _init_logging() -> None:
        configure_logging()

    _init_logging()


def new_study_session() -> StudySession:
    """
    Build a fresh StudySession from the configured deck, starting on day 0.
    """
    cards = deck.load_deck(config.get_deck_path())
    session = StudySession(buckets=deck.initial_buckets(cards, config.get_bucket_count()))
    session.start_day()
    return session


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "study" not in st.session_state:
        st.session_state.study = new_study_session()
    if "show_answer" not in st.session_state:
        st.session_state.show_answer = False
    if "show_hint" not in st.session_state:
        st.session_state.show_hint = False
