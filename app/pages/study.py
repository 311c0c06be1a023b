"""
Study page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import advance_day, process_feedback, restart_deck
from app.ui import (
    render_day_complete,
    render_feedback_buttons,
    render_flashcard,
    render_session_stats,
)
from app.ui.flashcard_style import CARD_BACK_STYLE, CARD_FRONT_STYLE
from flashcards import config


def render_study_page() -> None:
    """
    Render the study flow (active card or end-of-day screen).
    """
    study = st.session_state.study
    if config.is_strict_mode():
        st.caption("Strict invariant checks are on (LEITNER_STRICT_INVARIANTS=true)")

    render_session_stats(study)

    if study.is_day_complete:
        _render_day_complete(study)
    else:
        _render_active_card(study)


def _render_day_complete(study) -> None:
    render_day_complete(study)

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Next Day", type="primary", use_container_width=True):
            advance_day()
            st.rerun()
    with col2:
        if st.button("Restart Deck", use_container_width=True, help="Forget all progress"):
            restart_deck()
            st.rerun()


def _render_active_card(study) -> None:
    card = study.current_card
    bucket = study.bucket_of(card)
    corner = f"Bucket {bucket}" if bucket is not None else ""

    if not st.session_state.show_answer:
        render_flashcard(card.front, corner_text=corner, style=CARD_FRONT_STYLE)
        if st.session_state.show_hint:
            st.info(study.hint())

        col1, col2 = st.columns(2)
        with col1:
            if st.button("Show Hint", use_container_width=True, disabled=st.session_state.show_hint):
                st.session_state.show_hint = True
                st.rerun()
        with col2:
            if st.button("Show Answer", type="primary", use_container_width=True):
                st.session_state.show_answer = True
                st.rerun()
        return

    subtitle = ", ".join(card.tags)
    render_flashcard(card.back, subtitle=subtitle, corner_text=corner, style=CARD_BACK_STYLE)

    difficulty = render_feedback_buttons()
    if difficulty is not None:
        process_feedback(difficulty)
        st.rerun()
