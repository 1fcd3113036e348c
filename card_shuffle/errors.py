"""Error taxonomy shared by the deck, shuffle and round calculation modules."""
from __future__ import annotations


class DeckError(Exception):
    """Base class for every failure raised while computing shuffle rounds."""

    category = "Deck error"


class InvalidArgumentError(DeckError):
    """Raised when a deck reference, size or position violates a contract."""

    category = "Parameter Error"


class AllocationFailureError(DeckError):
    """Raised when storage for a deck or the cycle count table is unavailable."""

    category = "Memory allocation error"


class DeckUnderflowError(DeckError):
    """Raised when removing a card from an empty deck."""

    category = "Queue Empty"


class InconsistentDeckError(DeckError):
    """Raised when a cycle trace fails to close within the deck size."""

    category = "Internal consistency error"


__all__ = [
    "DeckError",
    "InvalidArgumentError",
    "AllocationFailureError",
    "DeckUnderflowError",
    "InconsistentDeckError",
]
