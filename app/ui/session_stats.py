"""
Session Statistics UI

Renders today's progress metrics.
"""

import streamlit as st


def render_session_stats(study) -> None:
    """
    Render day number, queue size and today's accuracy.
    """
    col1, col2, col3 = st.columns(3)

    with col1:
        st.metric("Day", study.day)

    with col2:
        st.metric("Left Today", len(study.queue))

    with col3:
        if study.reviewed_today > 0:
            accuracy = study.easy_today / study.reviewed_today * 100
            st.metric("Easy Today", f"{accuracy:.0f}%")

    st.divider()


def render_day_complete(study) -> None:
    """Render end-of-day message."""
    if study.reviewed_today > 0:
        st.success(f"🎉 Day {study.day} complete! You reviewed {study.reviewed_today} cards.")
    else:
        st.info(f"No cards are due on day {study.day}.")
