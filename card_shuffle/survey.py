"""Tabulate shuffle periods across a range of deck sizes."""
from __future__ import annotations

import argparse
import json
import logging
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from card_shuffle.deck import Deck
from card_shuffle.errors import DeckError
from card_shuffle.permutation import DEFAULT_SEED, build_rng, create_deck
from card_shuffle.rounds import LOOKUP_MODES, combine_periods, cycle_lengths
from card_shuffle.shuffle import do_a_round
from shuffle_settings import RunSettings

LOGGER = logging.getLogger("survey")

SURVEY_COLUMNS = ["deck_size", "rounds", "cycle_count", "longest_cycle", "fixed_points"]


def _describe_cycles(counts: np.ndarray) -> dict[str, int]:
    # Every member of a cycle of length L reports L, so each distinct length
    # accounts for (positions with that length) / L cycles.
    lengths, frequency = np.unique(counts, return_counts=True)
    return {
        "rounds": combine_periods(counts),
        "cycle_count": int((frequency // lengths).sum()),
        "longest_cycle": int(counts.max()),
        "fixed_points": int((counts == 1).sum()),
    }


def survey_deck(settings: RunSettings) -> dict[str, int]:
    """Return the period and cycle structure for one deck size."""

    original = create_deck(settings.deck_size, build_rng(settings.seed))
    table = do_a_round(original.copy(), Deck())
    counts = cycle_lengths(table, original, settings.deck_size, lookup=settings.lookup)
    row = {"deck_size": settings.deck_size}
    row.update(_describe_cycles(counts))
    return row


def survey_periods(
    sizes: Iterable[int],
    *,
    seed: int = DEFAULT_SEED,
    lookup: str = "scan",
) -> pd.DataFrame:
    """Return one row per deck size in *sizes*.

    Every size gets its own generator, decks and count table, so a row is
    identical to what a standalone run for that size reports.
    """

    base = RunSettings(deck_size=1, seed=seed, lookup=lookup)
    rows = []
    for size in sizes:
        rows.append(survey_deck(base.with_deck_size(size)))
        LOGGER.debug("Surveyed deck size %d: %s", size, rows[-1])

    frame = pd.DataFrame(rows, columns=SURVEY_COLUMNS)
    return frame.astype("int64")


def format_survey(frame: pd.DataFrame) -> str:
    """Return a human-readable table for *frame*."""

    if frame.empty:
        return "No deck sizes surveyed"
    lines = [frame.to_string(index=False)]
    longest = frame.loc[frame["rounds"].idxmax()]
    lines.append(
        f"Largest period: {int(longest['rounds'])} rounds "
        f"(deck size {int(longest['deck_size'])})"
    )
    return "\n".join(lines)


def survey_to_records(frame: pd.DataFrame) -> list[dict[str, int]]:
    """Return JSON-serialisable rows for *frame*."""

    return [
        {column: int(value) for column, value in row.items()}
        for row in frame.to_dict(orient="records")
    ]


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Report how many shuffle rounds restore decks of several sizes.",
    )
    parser.add_argument(
        "--start",
        type=int,
        default=1,
        help="Smallest deck size to survey (default: 1).",
    )
    parser.add_argument(
        "--stop",
        type=int,
        default=20,
        help="Largest deck size to survey, inclusive (default: 20).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"Seed for each initial shuffle (default: {DEFAULT_SEED}).",
    )
    parser.add_argument(
        "--lookup",
        choices=LOOKUP_MODES,
        default="scan",
        help="Table search strategy used while tracing cycles.",
    )
    parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Emit the survey as JSON instead of a formatted table.",
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

    if args.start < 1:
        parser.error("--start must be at least 1")
    if args.stop < args.start:
        parser.error("--stop must not be smaller than --start")

    try:
        frame = survey_periods(
            range(args.start, args.stop + 1), seed=args.seed, lookup=args.lookup
        )
    except DeckError as exc:
        LOGGER.error("%s: %s", exc.category, exc)
        return 1

    LOGGER.info("Surveyed %d deck sizes", len(frame))
    if args.as_json:
        print(json.dumps(survey_to_records(frame), indent=2))
    else:
        print(format_survey(frame))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
