"""Number of shuffle rounds needed to restore a deck to its original order.

One round maps every original position to a new position.  The table deck
lists cards in the order they were laid down, and picking the pile up reverses
it, so the card found at table index ``j`` starts the next round at position
``size - 1 - j``.  Following that mapping from each position until it returns
to its starting card gives the cycle length of that position; the period of
the whole deck is the least common multiple of those lengths.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Iterable

import numpy as np

from card_shuffle.deck import Deck
from card_shuffle.errors import (
    AllocationFailureError,
    InconsistentDeckError,
    InvalidArgumentError,
)

LOGGER = logging.getLogger("rounds")

LOOKUP_MODES = ("scan", "indexed")


def _validate_decks(table: Deck | None, original: Deck | None, size: int) -> None:
    if table is None or original is None:
        raise InvalidArgumentError("Both the table deck and the original deck are required")
    if table.is_empty() or original.is_empty():
        raise InvalidArgumentError("Cannot calculate rounds for an empty deck")
    if size < 1:
        raise InvalidArgumentError(f"Deck size must be positive, got {size}")
    if len(table) != size or len(original) != size:
        raise InvalidArgumentError(
            f"Deck size {size} does not match table ({len(table)}) "
            f"and original ({len(original)}) lengths"
        )


def _scan_table(table: Deck, value: int) -> int:
    for index, card in enumerate(table):
        if card == value:
            return index
    raise InvalidArgumentError(f"Card {value} is missing from the table deck")


def _index_values(deck: Deck, label: str) -> dict[int, int]:
    index: dict[int, int] = {}
    for position, card in enumerate(deck):
        if card in index:
            raise InvalidArgumentError(f"Card {card} appears twice in the {label} deck")
        index[card] = position
    return index


def _lookups(
    table: Deck, original: Deck, lookup: str
) -> tuple[Callable[[int], int], Callable[[int], int]]:
    """Return ``(locate_in_table, card_at_original_position)`` for *lookup*."""

    table_index = _index_values(table, "table")
    _index_values(original, "original")

    if lookup == "scan":
        return (lambda value: _scan_table(table, value)), original.peek_at

    if lookup == "indexed":
        original_cards = list(original)

        def locate(value: int) -> int:
            try:
                return table_index[value]
            except KeyError:
                raise InvalidArgumentError(
                    f"Card {value} is missing from the table deck"
                ) from None

        return locate, original_cards.__getitem__

    raise InvalidArgumentError(
        f"Unknown lookup mode {lookup!r}; expected one of {', '.join(LOOKUP_MODES)}"
    )


def _trace_cycle(
    root_value: int,
    size: int,
    locate: Callable[[int], int],
    card_at: Callable[[int], int],
) -> int:
    data = root_value
    for steps in range(1, size + 2):
        position = size - 1 - locate(data)
        data = card_at(position)
        if data == root_value:
            return steps
    raise InconsistentDeckError(
        f"Cycle starting at card {root_value} did not close within {size + 1} rounds"
    )


def cycle_lengths(
    table: Deck, original: Deck, size: int, *, lookup: str = "scan"
) -> np.ndarray:
    """Return the cycle length of every original position.

    Neither deck is modified and both must hold distinct cards.  ``lookup="scan"`` searches the table for each
    step of a trace; ``"indexed"`` builds value-to-position maps up front and
    produces the same lengths in linear time.
    """

    _validate_decks(table, original, size)
    locate, card_at = _lookups(table, original, lookup)

    try:
        counts = np.zeros(size, dtype=np.int64)
    except MemoryError as exc:
        raise AllocationFailureError(
            f"Could not allocate a cycle count table for {size} positions"
        ) from exc

    for position in range(size):
        root_value = card_at(position)
        counts[position] = _trace_cycle(root_value, size, locate, card_at)
        LOGGER.debug(
            "Position %d (card %d) returns after %d rounds",
            position,
            root_value,
            counts[position],
        )
    return counts


def combine_periods(lengths: Iterable[int]) -> int:
    """Return the least common multiple of *lengths*.

    The accumulation uses Python integers so the running product never
    overflows, whatever the dtype of the incoming counts.
    """

    period = 1
    seen = False
    for raw in lengths:
        length = int(raw)
        if length < 1:
            raise InvalidArgumentError(f"Cycle lengths must be positive, got {length}")
        period = period * length // math.gcd(period, length)
        seen = True
    if not seen:
        raise InvalidArgumentError("At least one cycle length is required")
    return period


def rounds_calculate(
    table: Deck, original: Deck, size: int, *, lookup: str = "scan"
) -> int:
    """Return how many rounds bring *original* back to its starting order.

    *table* must be the result of one ``do_a_round`` applied to a copy of
    *original*.
    """

    counts = cycle_lengths(table, original, size, lookup=lookup)
    rounds = combine_periods(counts)
    LOGGER.info("Deck of %d cards restores after %d rounds", size, rounds)
    return rounds


__all__ = ["LOOKUP_MODES", "cycle_lengths", "combine_periods", "rounds_calculate"]
