"""
Progress page rendering.
"""

from __future__ import annotations

import streamlit as st

from flashcards.analytics import build_progress_dashboard


def render_progress_page() -> None:
    study = st.session_state.study
    dashboard = build_progress_dashboard(study.buckets, study.history)
    report = dashboard.report

    st.subheader("Learning Progress")
    st.caption(f"Day {study.day}")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Accuracy", f"{report.accuracy_rate * 100:.0f}%", help="Share of answers rated Easy")
    with col2:
        average = report.average_difficulty
        st.metric(
            "Average Difficulty",
            "-" if average is None else f"{average:.2f}",
            help="0 = Hard, 1 = Medium, 2 = Easy",
        )
    with col3:
        bucket_range = dashboard.bucket_range
        label = "-" if bucket_range is None else f"{bucket_range.min_bucket}–{bucket_range.max_bucket}"
        st.metric("Bucket Range", label)

    st.markdown("### Cards per Bucket")
    distribution = dict(sorted(report.bucket_distribution.items()))
    st.bar_chart({"cards": {f"Bucket {bucket}": count for bucket, count in distribution.items()}})

    if not study.history:
        st.info("No reviews yet. Grade a few cards on the Study tab.")
        return

    st.markdown("### Answers")
    st.bar_chart(dashboard.difficulty_counts.rename("answers").to_frame())

    st.markdown("### Daily Accuracy")
    st.line_chart(dashboard.accuracy_daily.rename("accuracy").to_frame())

    st.markdown("### Weakest Cards")
    st.dataframe(dashboard.card_accuracy.head(10), hide_index=True, use_container_width=True)
