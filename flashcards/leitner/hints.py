"""
Hints for the front of a card.
"""

from __future__ import annotations

from flashcards.leitner.constants import HINT_FALLBACK_PREFIX
from flashcards.leitner.models import Flashcard


def get_hint(card: Flashcard) -> str:
    """
    Return the card's own hint, or a generic one built from its front.

    The authored hint is stripped; if nothing is left the fallback
    "Think about the key concepts related to <front>" is returned with the
    front untouched.
    """
    hint = card.hint.strip()
    if hint:
        return hint
    return HINT_FALLBACK_PREFIX + card.front
