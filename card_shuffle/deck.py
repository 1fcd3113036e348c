"""FIFO deck container used by the shuffle engine and round calculator."""
from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from card_shuffle.errors import (
    AllocationFailureError,
    DeckUnderflowError,
    InvalidArgumentError,
)


class Deck:
    """Ordered sequence of cards, front to back.

    Cards are appended to the tail and removed from the front.  Positional
    reads walk from the front, so ``peek_at`` costs O(position); everything
    else is O(1).
    """

    def __init__(self, values: Iterable[int] | None = None) -> None:
        self._cards: deque[int] = deque()
        if values is not None:
            for value in values:
                self.append(value)

    # ------------------------------------------------------------------
    # FIFO operations
    # ------------------------------------------------------------------
    def append(self, value: int) -> None:
        """Push *value* onto the tail of the deck."""

        try:
            self._cards.append(int(value))
        except MemoryError as exc:  # pragma: no cover - depends on the host
            raise AllocationFailureError("Could not store another card") from exc

    def remove_front(self) -> int:
        """Remove and return the card at the front of the deck."""

        if not self._cards:
            raise DeckUnderflowError("Cannot remove a card from an empty deck")
        return self._cards.popleft()

    def peek_at(self, position: int) -> int:
        """Return the card *position* places from the front without removing it."""

        if position < 0 or position >= len(self._cards):
            raise InvalidArgumentError(
                f"Position {position} is outside a deck of {len(self._cards)} cards"
            )
        return self._cards[position]

    def is_empty(self) -> bool:
        return not self._cards

    def clear(self) -> None:
        self._cards.clear()

    # ------------------------------------------------------------------
    # Python protocol helpers
    # ------------------------------------------------------------------
    def copy(self) -> "Deck":
        return Deck(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[int]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return list(self._cards) == list(other._cards)

    def __repr__(self) -> str:
        return f"Deck([{format_deck(self)}])"


def format_deck(deck: Iterable[int]) -> str:
    """Render *deck* as a comma separated list of card values."""

    return ", ".join(str(value) for value in deck)


__all__ = ["Deck", "format_deck"]
