"""
Flashcard UI Component

Renders one face of a card.
"""

from __future__ import annotations

from html import escape

import streamlit as st
from app.ui.flashcard_style import CARD_MIN_HEIGHT, CARD_PADDING, CARD_FRONT_STYLE, FlashcardStyle


def render_flashcard(
    main_text: str,
    subtitle: str = "",
    corner_text: str = "",
    style: FlashcardStyle = CARD_FRONT_STYLE,
) -> None:
    """
    Render a card face.

    Args:
        main_text: Front or back text (center, large)
        subtitle: Optional secondary text, e.g. the card's tags
        corner_text: Optional text in the top-right corner, e.g. the bucket
        style: Colors and font sizes for this face
    """
    corner_html = ""
    if corner_text:
        corner_html = (
            f'<div style="position: absolute; top: 15px; right: 20px; '
            f'font-size: {style.corner_font_size}; color: {style.corner_color}; '
            f'font-style: italic;">{escape(corner_text)}</div>'
        )

    main_html = (
        f'<h1 style="font-size: {style.main_font_size}; color: {style.main_color}; '
        'font-weight: normal; margin: 0; text-align: center; line-height: 1.4; '
        'max-width: 100%; overflow-wrap: anywhere;">'
        f"{escape(main_text)}</h1>"
    )

    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p style="font-size: {style.subtitle_font_size}; color: {style.subtitle_color}; '
            'font-style: italic; margin: 15px 0 0 0; text-align: center;">'
            f"{escape(subtitle)}</p>"
        )

    html = (
        f'<div style="background-color: {style.bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {CARD_MIN_HEIGHT}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        f'position: relative;">{corner_html}{main_html}{subtitle_html}</div>'
    )

    st.markdown(html, unsafe_allow_html=True)
