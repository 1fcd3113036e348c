import json

import numpy as np
import pytest

from shuffle_settings import CANONICAL, DEFAULT_SEED, DIAGNOSTIC, RunSettings


def test_defaults_use_fixed_seed_and_scan_lookup():
    settings = RunSettings(deck_size=10)

    assert settings.seed == DEFAULT_SEED == 2
    assert settings.lookup == "scan"
    assert settings.show_decks is False


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, "scan"),
        ("", "scan"),
        ("linear", "scan"),
        (" Scan ", "scan"),
        ("INDEXED", "indexed"),
        ("map", "indexed"),
    ],
)
def test_lookup_aliases_are_normalised(value, expected):
    assert RunSettings(deck_size=3, lookup=value).lookup == expected


def test_unknown_lookup_is_rejected():
    with pytest.raises(ValueError):
        RunSettings(deck_size=3, lookup="binary")
    with pytest.raises(TypeError):
        RunSettings(deck_size=3, lookup=1)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "value,expected",
    [
        (12, 12),
        ("12", 12),
        (7.0, 7),
        (np.int64(5), 5),
    ],
)
def test_deck_size_is_coerced(value, expected):
    assert RunSettings(deck_size=value).deck_size == expected


@pytest.mark.parametrize("value", [0, -4, "0", "twelve", 2.5])
def test_invalid_deck_sizes_raise_value_error(value):
    with pytest.raises(ValueError):
        RunSettings(deck_size=value)


@pytest.mark.parametrize("value", [True, None, [3]])
def test_unsupported_deck_size_types_raise_type_error(value):
    with pytest.raises(TypeError):
        RunSettings(deck_size=value)


def test_seed_must_be_an_integer():
    with pytest.raises(TypeError):
        RunSettings(deck_size=3, seed="2")  # type: ignore[arg-type]


def test_round_trip_through_json():
    settings = RunSettings(deck_size=8, seed=5, lookup="indexed", show_decks=True)

    payload = settings.to_json()

    assert json.loads(payload)["lookup"] == "indexed"
    assert RunSettings.from_json(payload) == settings


def test_from_dict_ignores_unknown_keys():
    settings = RunSettings.from_dict({"deck_size": 4, "colour": "red"})

    assert settings == RunSettings(deck_size=4)


def test_with_deck_size_keeps_other_fields():
    resized = DIAGNOSTIC.with_deck_size(9)

    assert resized.deck_size == 9
    assert resized.show_decks is True
    assert resized.seed == DIAGNOSTIC.seed


def test_presets():
    assert CANONICAL.lookup == "scan"
    assert CANONICAL.show_decks is False
    assert DIAGNOSTIC.show_decks is True
