"""UI components for the Streamlit app."""

from app.ui.flashcard import render_flashcard
from app.ui.session_stats import render_session_stats, render_day_complete
from app.ui.feedback_buttons import render_feedback_buttons

__all__ = [
    "render_flashcard",
    "render_session_stats",
    "render_day_complete",
    "render_feedback_buttons",
]
