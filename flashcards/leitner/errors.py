"""
Leitner Errors

Every failure raised by the scheduler core derives from LeitnerError.
"""

from __future__ import annotations


class LeitnerError(Exception):
    """Base class for scheduler errors."""


class InvalidInputError(LeitnerError, ValueError):
    """An argument is outside its allowed range (e.g. a negative day)."""


class CardNotFoundError(LeitnerError, LookupError):
    """The card is not present in any bucket."""

    def __init__(self, card):
        super().__init__(f"Card not found in any bucket: {card.front!r}")
        self.card = card


class InvalidDataError(LeitnerError, ValueError):
    """Bucket map or review history is malformed."""


class InvalidBucketsError(InvalidDataError):
    """A bucket key is not a non-negative integer."""


class InvalidHistoryError(InvalidDataError):
    """A review record is missing its card, difficulty or numeric timestamp."""


class DuplicateCardError(InvalidDataError):
    """A card sits in more than one bucket."""

    def __init__(self, duplicates):
        fronts = ", ".join(repr(card.front) for card in duplicates)
        super().__init__(f"Cards found in more than one bucket: {fronts}")
        self.duplicates = duplicates
