"""One round of the lay-down / move-under shuffle."""
from __future__ import annotations

import logging

from card_shuffle.deck import Deck
from card_shuffle.errors import InvalidArgumentError

LOGGER = logging.getLogger("shuffle")


def do_a_round(deck: Deck, table: Deck) -> Deck:
    """Deal *deck* onto *table* and return *table*.

    The front card is faced and laid on the table; if any cards remain, the
    next one moves to the bottom of the deck.  This repeats until *deck* is
    empty.  *table* is cleared first and ends up holding the cards in the
    order they were laid down.
    """

    if deck is None or table is None:
        raise InvalidArgumentError("Both the deck and the table must be provided")
    if deck is table:
        raise InvalidArgumentError("The deck and the table must be different decks")

    table.clear()
    size = len(deck)
    while not deck.is_empty():
        table.append(deck.remove_front())
        if not deck.is_empty():
            deck.append(deck.remove_front())

    LOGGER.debug("Laid %d cards on the table", size)
    return table


def pick_up(table: Deck) -> Deck:
    """Return the deck that starts the next round.

    The last card laid down sits on top of the pile, so the next deck is the
    table read back to front: table index ``j`` becomes position
    ``len(table) - 1 - j``.
    """

    if table is None:
        raise InvalidArgumentError("A table deck is required")
    return Deck(reversed(list(table)))


def play_rounds(deck: Deck, count: int) -> Deck:
    """Apply *count* full rounds to a copy of *deck* and return the result."""

    if count < 0:
        raise InvalidArgumentError(f"Round count must be non-negative, got {count}")

    current = deck.copy()
    table = Deck()
    for _ in range(count):
        do_a_round(current, table)
        current = pick_up(table)
    return current


__all__ = ["do_a_round", "pick_up", "play_rounds"]
