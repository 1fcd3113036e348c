#!/usr/bin/env python3
"""Count the shuffle rounds needed to bring a random deck back to its order.

Each round lays the front card on the table and moves the next one to the
bottom of the deck until the deck is empty; the table pile is then picked up
and becomes the next deck.
"""
from __future__ import annotations

import argparse
import logging
import re
from dataclasses import dataclass
from typing import Sequence

from card_shuffle.deck import Deck, format_deck
from card_shuffle.errors import DeckError
from card_shuffle.permutation import DEFAULT_SEED, build_rng, create_deck
from card_shuffle.rounds import LOOKUP_MODES, rounds_calculate
from card_shuffle.shuffle import do_a_round
from shuffle_settings import RunSettings

LOGGER = logging.getLogger("calculate_round")

LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def parse_deck_size(token: str) -> int:
    """Read the leading integer of *token*, or 0 when there is none.

    Trailing text is ignored, so ``"12abc"`` reads as 12 and ``"abc"`` as 0.
    """

    match = LEADING_INTEGER.match(token)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class RoundReport:
    """Outcome of one round calculation."""

    deck_size: int
    seed: int
    original: tuple[int, ...]
    table: tuple[int, ...]
    rounds: int


def run(settings: RunSettings) -> RoundReport:
    """Generate the deck, deal one round and count the rounds to restore it."""

    rng = build_rng(settings.seed)
    original = create_deck(settings.deck_size, rng)
    LOGGER.debug("Original deck: %s", format_deck(original))

    table = do_a_round(original.copy(), Deck())
    LOGGER.debug("Table deck: %s", format_deck(table))

    rounds = rounds_calculate(table, original, settings.deck_size, lookup=settings.lookup)
    return RoundReport(
        deck_size=settings.deck_size,
        seed=settings.seed,
        original=tuple(original),
        table=tuple(table),
        rounds=rounds,
    )


def format_report(report: RoundReport, *, show_decks: bool = False) -> str:
    lines: list[str] = []
    if show_decks:
        lines.append(f"Original deck: {format_deck(report.original)}")
        lines.append(f"Table deck: {format_deck(report.table)}")
    lines.append(str(report.rounds))
    return "\n".join(lines)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "deck_size",
        nargs="?",
        type=parse_deck_size,
        help="Number of cards in the deck.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"Seed for the initial shuffle (default: {DEFAULT_SEED}).",
    )
    parser.add_argument(
        "--lookup",
        choices=LOOKUP_MODES,
        default="scan",
        help="Search the table on every step (scan) or index it once (indexed).",
    )
    parser.add_argument(
        "--show-decks",
        action="store_true",
        help="Print the original and table decks before the round count.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.deck_size is None:
        print(f"Format is <{parser.prog}> <number>")
        return 0
    if args.deck_size <= 0:
        print("Invalid Deck Size. Exiting.")
        return 0

    settings = RunSettings(
        deck_size=args.deck_size,
        seed=args.seed,
        lookup=args.lookup,
        show_decks=args.show_decks,
    )
    LOGGER.info("The deck size = %d", settings.deck_size)

    try:
        report = run(settings)
    except DeckError as exc:
        LOGGER.error("%s: %s", exc.category, exc)
        return 1

    print(format_report(report, show_decks=settings.show_decks))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
