"""
Flashcards - Leitner spaced repetition trainer.

Subpackages:
- flashcards.leitner: scheduling algorithm (pure, no I/O)
- flashcards.analytics: pandas metrics over review history
"""

from flashcards.log import configure_defaults

configure_defaults()
