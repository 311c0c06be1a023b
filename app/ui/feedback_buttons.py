"""
Feedback Button UI

Renders grading choices for the revealed card.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

from flashcards.leitner import AnswerDifficulty


CHOICES = {
    "😰 Hard": AnswerDifficulty.HARD,
    "👍 Medium": AnswerDifficulty.MEDIUM,
    "✨ Easy": AnswerDifficulty.EASY,
}


def render_feedback_buttons() -> Optional[AnswerDifficulty]:
    """
    Render difficulty choices.

    Returns:
        AnswerDifficulty selected by user, or None if nothing chosen yet
    """
    st.markdown("**How well did you know this card?**")

    choice = st.radio(
        "Answer",
        list(CHOICES),
        index=None,
        key="answer_choice",
        horizontal=True,
        label_visibility="collapsed"
    )
    if choice is None:
        return None
    return CHOICES[choice]
