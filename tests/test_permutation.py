import pytest

from card_shuffle.deck import Deck
from card_shuffle.errors import InvalidArgumentError
from card_shuffle.permutation import (
    DEFAULT_SEED,
    build_rng,
    create_deck,
    random_permutation,
)


class FixedPick:
    """Stand-in generator that always picks the same end of the range."""

    def __init__(self, highest: bool) -> None:
        self.highest = highest

    def randrange(self, stop: int) -> int:
        return stop - 1 if self.highest else 0


@pytest.mark.parametrize("size", [1, 2, 4, 13, 52, 200])
def test_permutation_is_a_bijection_onto_one_to_n(size):
    values = random_permutation(size, build_rng(DEFAULT_SEED))

    assert len(values) == size
    assert sorted(values) == list(range(1, size + 1))


def test_same_seed_reproduces_the_permutation():
    first = random_permutation(30, build_rng(7))
    second = random_permutation(30, build_rng(7))

    assert first == second


def test_generators_do_not_share_state():
    rng_a = build_rng(11)
    rng_b = build_rng(11)

    first_a = random_permutation(20, rng_a)
    first_b = random_permutation(20, rng_b)
    # Advancing one generator must not disturb the other.
    random_permutation(20, rng_a)

    assert first_a == first_b
    assert random_permutation(20, build_rng(11)) == first_a


def test_fisher_yates_swaps_from_the_last_index_down():
    assert random_permutation(4, FixedPick(highest=True)) == [1, 2, 3, 4]
    assert random_permutation(4, FixedPick(highest=False)) == [2, 3, 4, 1]


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_size_is_invalid(size):
    with pytest.raises(InvalidArgumentError):
        random_permutation(size, build_rng())


def test_create_deck_wraps_permutation():
    deck = create_deck(10, build_rng(5))

    assert isinstance(deck, Deck)
    assert list(deck) == random_permutation(10, build_rng(5))


def test_create_deck_defaults_to_fixed_seed():
    assert create_deck(12) == create_deck(12)
