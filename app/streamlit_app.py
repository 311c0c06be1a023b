"""
Leitner Flashcards - Main App

Streamlit front end for the Modified-Leitner flashcard scheduler.
"""

import streamlit as st

from app.router import PAGES
from app.state import ensure_session_state, init_logging


# ---- Page Setup ----

st.set_page_config(
    page_title="Leitner Flashcards",
    page_icon="🗂️",
    layout="centered"
)


# ---- Main App ----

def main():
    """Main app entry point."""
    init_logging()
    ensure_session_state()

    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()


if __name__ == "__main__":
    main()
