"""
Session lifecycle helpers for Streamlit app.
"""

from __future__ import annotations

import streamlit as st

from app.state import new_study_session
from flashcards.leitner import AnswerDifficulty


def _reset_card_view() -> None:
    st.session_state.show_answer = False
    st.session_state.show_hint = False
    st.session_state.pop("answer_choice", None)


def process_feedback(difficulty: AnswerDifficulty) -> None:
    """
    Grade the current card and move on to the next one.
    """
    st.session_state.study.grade(difficulty)
    _reset_card_view()


def advance_day() -> None:
    """
    Move the session to the next day and load its due cards.
    """
    st.session_state.study.next_day()
    _reset_card_view()


def restart_deck() -> None:
    """
    Drop all progress and start the deck again from day 0.
    """
    st.session_state.study = new_study_session()
    _reset_card_view()
