"""Run settings for the shuffle round calculator."""
from __future__ import annotations

import json
import math
import numbers
from dataclasses import asdict, dataclass
from typing import Any, Mapping, MutableMapping

from card_shuffle.permutation import DEFAULT_SEED

LOOKUP_ALIASES = {
    "scan": "scan",
    "linear": "scan",
    "canonical": "scan",
    "indexed": "indexed",
    "index": "indexed",
    "map": "indexed",
}


def _coerce_positive_int(value: Any, name: str) -> int:
    """Convert *value* into an integer of at least 1 or raise ``ValueError``."""

    if isinstance(value, bool):
        raise TypeError(f"Boolean values are not valid for {name}")
    if isinstance(value, numbers.Integral):
        value = int(value)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value) or not value.is_integer():
            raise ValueError(f"{name} must be a whole number, got {value!r}")
        value = int(value)
    if isinstance(value, str):
        token = value.strip()
        try:
            value = int(token, 10)
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer, got {token!r}") from exc
    if not isinstance(value, int):
        raise TypeError(f"Unsupported {name} type: {type(value).__name__}")
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _normalise_lookup(value: Any) -> str:
    """Convert *value* into one of the supported lookup strategies.

    ``None`` and empty strings select the canonical ``"scan"`` strategy.
    Unknown names raise ``ValueError`` while non-string values raise
    ``TypeError``.
    """

    if value is None:
        return "scan"
    if not isinstance(value, str):
        raise TypeError(f"Unsupported lookup type: {type(value).__name__}")
    token = value.strip().lower()
    if not token:
        return "scan"
    try:
        return LOOKUP_ALIASES[token]
    except KeyError:
        raise ValueError(f"Unknown lookup mode: {value!r}") from None


@dataclass(frozen=True)
class RunSettings:
    """Everything a single round calculation needs besides the decks."""

    deck_size: int
    seed: int = DEFAULT_SEED
    lookup: str = "scan"
    show_decks: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "deck_size", _coerce_positive_int(self.deck_size, "deck_size"))
        if isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise TypeError(f"seed must be an integer, got {type(self.seed).__name__}")
        object.__setattr__(self, "lookup", _normalise_lookup(self.lookup))
        object.__setattr__(self, "show_decks", bool(self.show_decks))

    def with_deck_size(self, deck_size: int) -> "RunSettings":
        """Return a copy of these settings for another deck size."""

        return RunSettings(
            deck_size=deck_size,
            seed=self.seed,
            lookup=self.lookup,
            show_decks=self.show_decks,
        )

    def to_dict(self) -> MutableMapping[str, Any]:
        """Return the settings as a JSON-serialisable mapping."""
        return dict(asdict(self))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RunSettings":
        """Create settings from *data* produced by :meth:`to_dict`."""
        fields = {field.name for field in cls.__dataclass_fields__.values()}
        filtered = {k: data[k] for k in data if k in fields}
        return cls(**filtered)  # type: ignore[arg-type]

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, payload: str) -> "RunSettings":
        return cls.from_dict(json.loads(payload))


CANONICAL = RunSettings(deck_size=1)

DIAGNOSTIC = RunSettings(deck_size=1, show_decks=True)

__all__ = [
    "DEFAULT_SEED",
    "RunSettings",
    "CANONICAL",
    "DIAGNOSTIC",
]
