import pytest
from fx.options import INPUT_FX, INPUT_TRACK_FX, TRACK_FX
from model.recording import (
    ALL_32, FX4, INPUT_16, RECORDING_TYPES, TRACK_16,
    available_banks, available_slots, is_slot_enabled, preset_type_for,
)
from model.effect import BANKS, FX_GROUPS, SLOTS


def _enabled_count(recording_type):
    return sum(
        is_slot_enabled(recording_type, g, b, s)
        for g in FX_GROUPS for b in BANKS for s in SLOTS
    )


@pytest.mark.parametrize("recording_type, expected", [
    (ALL_32, 32), (INPUT_16, 16), (TRACK_16, 16), (FX4, 8),
])
def test_enabled_cell_counts(recording_type, expected):
    assert _enabled_count(recording_type) == expected


def test_unknown_recording_type_enables_nothing():
    assert _enabled_count("BOGUS") == 0
    assert available_slots("BOGUS") == []
    assert available_banks("BOGUS", "input") == []


def test_input_16_disables_track():
    assert is_slot_enabled(INPUT_16, "input", "D", "D")
    assert not is_slot_enabled(INPUT_16, "track", "A", "A")


def test_fx4_is_bank_a_only():
    assert available_banks(FX4, "track") == ["A"]
    assert is_slot_enabled(FX4, "track", "A", "D")
    assert not is_slot_enabled(FX4, "input", "B", "A")


@pytest.mark.parametrize("recording_type, preset_type", [
    (ALL_32, INPUT_TRACK_FX), (INPUT_16, INPUT_FX),
    (TRACK_16, TRACK_FX), (FX4, INPUT_TRACK_FX),
])
def test_preset_type_for(recording_type, preset_type):
    assert preset_type_for(recording_type) == preset_type


def test_recording_types_order():
    assert RECORDING_TYPES == (ALL_32, INPUT_16, TRACK_16, FX4)
