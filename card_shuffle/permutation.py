"""Seeded generation of the initial deck ordering."""
from __future__ import annotations

import random

from card_shuffle.deck import Deck
from card_shuffle.errors import InvalidArgumentError

DEFAULT_SEED = 2


def build_rng(seed: int | None = DEFAULT_SEED) -> random.Random:
    """Return a dedicated generator so repeated runs never share RNG state."""

    return random.Random(seed)


def random_permutation(size: int, rng: random.Random) -> list[int]:
    """Return the integers ``1..size`` in a Fisher-Yates shuffled order.

    The sequence starts ascending and, walking from the last index down to 1,
    swaps each element with one picked uniformly from ``[0, index]``.
    """

    if size < 1:
        raise InvalidArgumentError(f"Deck size must be positive, got {size}")

    values = list(range(1, size + 1))
    for index in range(size - 1, 0, -1):
        other = rng.randrange(index + 1)
        values[index], values[other] = values[other], values[index]
    return values


def create_deck(size: int, rng: random.Random | None = None) -> Deck:
    """Build a deck of *size* cards in a reproducible random order."""

    if rng is None:
        rng = build_rng()
    return Deck(random_permutation(size, rng))


__all__ = ["DEFAULT_SEED", "build_rng", "random_permutation", "create_deck"]
