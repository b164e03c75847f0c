"""Tests for the effect grid and its legacy array form (model/grid.py)."""
import pytest
from core.config import AppConfig
from model.effect import EffectConfig, empty_effect
from model.grid import (
    DuplicateAddressError, create_empty_grid, filter_enabled_effects,
    get_effect, grid_to_legacy_array, grids_equal, iter_cells,
    legacy_array_to_grid, set_effect,
)
from model.recording import ALL_32, FX4, INPUT_16, TRACK_16


def _reverb(fx_group, bank, slot):
    return EffectConfig(fx_group, bank, slot, "REVERB", parameters={"REVERB_TIME": 4})


def test_empty_grid_has_32_default_cells():
    cells = list(iter_cells(create_empty_grid()))
    assert len(cells) == 32
    for fx_group, bank, slot, effect in cells:
        assert effect == empty_effect(fx_group, bank, slot)


def test_get_effect_missing_cell_is_none():
    assert get_effect(create_empty_grid(), "track", "Z", "A") is None


def test_set_effect_is_copy_on_write():
    grid = create_empty_grid()
    new = set_effect(grid, "input", "B", "C", _reverb("input", "B", "C"))
    assert new is not grid
    assert get_effect(grid, "input", "B", "C").effect_type == "LPF"
    assert get_effect(new, "input", "B", "C").effect_type == "REVERB"
    assert new["track"] is grid["track"]
    assert new["input"]["A"] is grid["input"]["A"]
    assert new["input"]["B"] is not grid["input"]["B"]


def test_set_effect_is_idempotent():
    grid = create_empty_grid()
    effect = _reverb("track", "A", "A")
    once = set_effect(grid, "track", "A", "A", effect)
    twice = set_effect(once, "track", "A", "A", effect)
    assert grids_equal(once, twice)


def test_set_effect_can_clear_a_cell():
    grid = set_effect(create_empty_grid(), "input", "A", "A", None)
    assert get_effect(grid, "input", "A", "A") is None
    assert len(filter_enabled_effects(grid, ALL_32)) == 31


@pytest.mark.parametrize("address", [
    ("side", "A", "A"), ("input", "E", "A"), ("input", "A", "1"),
])
def test_set_effect_rejects_bad_address(address):
    with pytest.raises(ValueError):
        set_effect(create_empty_grid(), *address, None)


@pytest.mark.parametrize("recording_type, expected", [
    (ALL_32, 32), (INPUT_16, 16), (TRACK_16, 16), (FX4, 8), ("BOGUS", 0),
])
def test_filter_enabled_counts(recording_type, expected):
    assert len(filter_enabled_effects(create_empty_grid(), recording_type)) == expected


def test_filter_order_is_group_bank_slot():
    effects = filter_enabled_effects(create_empty_grid(), ALL_32)
    assert effects[0].address == ("input", "A", "A")
    assert effects[1].address == ("input", "A", "B")
    assert effects[4].address == ("input", "B", "A")
    assert effects[16].address == ("track", "A", "A")


def test_filter_with_injected_predicate():
    only_cd = lambda rt, g, b, s: b == "C" and s == "D"
    effects = filter_enabled_effects(create_empty_grid(), ALL_32, slot_enabled=only_cd)
    assert [e.address for e in effects] == [("input", "C", "D"), ("track", "C", "D")]


def test_legacy_array_has_no_address_by_default():
    records = grid_to_legacy_array(create_empty_grid(), FX4)
    assert len(records) == 8
    assert "fxGroup" not in records[0]
    with_address = grid_to_legacy_array(create_empty_grid(), FX4, include_address=True)
    assert with_address[0]["fxGroup"] == "input"


@pytest.mark.parametrize("address", [("input", "A", "A"), ("track", "B", "C")])
def test_round_trip_under_all_32(address):
    grid = set_effect(create_empty_grid(), *address, _reverb(*address))
    records = grid_to_legacy_array(grid, ALL_32, include_address=True)
    assert grids_equal(legacy_array_to_grid(records), grid)


def test_round_trip_keeps_both_cells_of_one_grid():
    grid = set_effect(create_empty_grid(), "input", "A", "A", _reverb("input", "A", "A"))
    grid = set_effect(grid, "track", "B", "C",
                      EffectConfig("track", "B", "C", "DELAY", sw=False, sw_mode="MOMENT",
                                   insert="TRACK2", parameters={"DELAY_TIME": "notes4"}))
    records = grid_to_legacy_array(grid, ALL_32, include_address=True)
    restored = legacy_array_to_grid(records)
    assert get_effect(restored, "input", "A", "A") == get_effect(grid, "input", "A", "A")
    assert get_effect(restored, "track", "B", "C") == get_effect(grid, "track", "B", "C")
    assert grids_equal(restored, grid)


def test_round_trip_without_addresses_collapses_into_input_a_a():
    grid = set_effect(create_empty_grid(), "input", "B", "B", _reverb("input", "B", "B"))
    grid = set_effect(grid, "track", "D", "D", EffectConfig("track", "D", "D", "CHORUS"))
    records = grid_to_legacy_array(grid, ALL_32)
    assert all("fxGroup" not in r for r in records)
    restored = legacy_array_to_grid(records)
    assert get_effect(restored, "input", "A", "A") == EffectConfig("input", "A", "A", "CHORUS")
    assert get_effect(restored, "input", "B", "B") == empty_effect("input", "B", "B")
    assert get_effect(restored, "track", "D", "D") == empty_effect("track", "D", "D")

def test_round_trip_is_lossy_for_disabled_cells():
    grid = set_effect(create_empty_grid(), "track", "B", "C", _reverb("track", "B", "C"))
    records = grid_to_legacy_array(grid, INPUT_16, include_address=True)
    restored = legacy_array_to_grid(records)
    assert get_effect(restored, "track", "B", "C") == empty_effect("track", "B", "C")
    assert not grids_equal(restored, grid)


def test_legacy_records_without_address_land_in_input_a_a():
    grid = legacy_array_to_grid([{"effectType": "CHORUS", "parameters": "not json"}])
    effect = get_effect(grid, "input", "A", "A")
    assert effect.effect_type == "CHORUS"
    assert effect.parameters == {}


def test_duplicate_address_last_write_wins():
    records = [
        {"fxGroup": "track", "bank": "D", "slot": "A", "effectType": "DELAY"},
        {"fxGroup": "track", "bank": "D", "slot": "A", "effectType": "REVERB"},
    ]
    grid = legacy_array_to_grid(records)
    assert get_effect(grid, "track", "D", "A").effect_type == "REVERB"


def test_duplicate_address_strict_raises(tmp_path):
    records = [{"effectType": "DELAY"}, {"effectType": "REVERB"}]
    with pytest.raises(DuplicateAddressError):
        legacy_array_to_grid(records, strict=True)
    config = AppConfig(path=tmp_path / "config.json")
    config.strict_legacy_addresses = True
    with pytest.raises(ValueError):
        legacy_array_to_grid(records, config=config)


def test_unknown_cells_are_skipped():
    records = [{"fxGroup": "side", "bank": "A", "slot": "A", "effectType": "REVERB"}]
    grid = legacy_array_to_grid(records)
    assert grids_equal(grid, create_empty_grid())
