"""Three-dimensional effect grid: fx_group -> bank -> slot -> EffectConfig | None.

Grids are treated as immutable; set_effect() copies only the path to the
changed cell, so sibling cells keep their identity.  The flat legacy array
(the persisted/wire form) is produced by walking groups, banks and slots in
catalog order and keeping the cells the recording type enables.
"""
from __future__ import annotations
from typing import Iterable, Iterator

from core.config import AppConfig
from core.logger import AppLogger, default_logger
from model.effect import BANKS, FX_GROUPS, SLOTS, EffectConfig, empty_effect
from model.recording import SlotPredicate, is_slot_enabled

EffectGrid = dict[str, dict[str, dict[str, "EffectConfig | None"]]]


class DuplicateAddressError(ValueError):
    pass


def create_empty_grid() -> EffectGrid:
    return {
        fx_group: {
            bank: {slot: empty_effect(fx_group, bank, slot) for slot in SLOTS}
            for bank in BANKS
        }
        for fx_group in FX_GROUPS
    }


def is_grid_address(fx_group: str, bank: str, slot: str) -> bool:
    return fx_group in FX_GROUPS and bank in BANKS and slot in SLOTS


def _check_address(fx_group: str, bank: str, slot: str) -> None:
    if not is_grid_address(fx_group, bank, slot):
        raise ValueError(f"No grid cell at ({fx_group!r}, {bank!r}, {slot!r})")


def get_effect(grid: EffectGrid, fx_group: str, bank: str, slot: str) -> EffectConfig | None:
    return grid.get(fx_group, {}).get(bank, {}).get(slot)


def set_effect(grid: EffectGrid, fx_group: str, bank: str, slot: str,
               effect: EffectConfig | None) -> EffectGrid:
    """Return a new grid with one cell replaced; *grid* is left untouched."""
    _check_address(fx_group, bank, slot)
    group = dict(grid[fx_group])
    group[bank] = {**grid[fx_group][bank], slot: effect}
    return {**grid, fx_group: group}


def iter_cells(grid: EffectGrid) -> Iterator[tuple[str, str, str, EffectConfig | None]]:
    for fx_group in FX_GROUPS:
        for bank in BANKS:
            for slot in SLOTS:
                yield fx_group, bank, slot, get_effect(grid, fx_group, bank, slot)


def grids_equal(a: EffectGrid, b: EffectGrid) -> bool:
    return all(
        get_effect(b, f, bk, s) == effect for f, bk, s, effect in iter_cells(a)
    )


def filter_enabled_effects(grid: EffectGrid, recording_type: str,
                           slot_enabled: SlotPredicate | None = None) -> list[EffectConfig]:
    enabled = slot_enabled or is_slot_enabled
    return [
        effect for fx_group, bank, slot, effect in iter_cells(grid)
        if enabled(recording_type, fx_group, bank, slot) and effect is not None
    ]


def grid_to_legacy_array(grid: EffectGrid, recording_type: str,
                         slot_enabled: SlotPredicate | None = None,
                         include_address: bool = False) -> list[dict]:
    return [
        effect.to_record(include_address=include_address)
        for effect in filter_enabled_effects(grid, recording_type, slot_enabled)
    ]


def legacy_array_to_grid(records: Iterable[dict], strict: bool = False,
                         logger: AppLogger | None = None,
                         config: AppConfig | None = None) -> EffectGrid:
    """Rebuild a grid from flat records.

    Missing bank/slot default to "A".  Two records for one cell: the later
    one wins, unless *strict* (or config.strict_legacy_addresses) is set.
    """
    logger = logger or default_logger()
    if config is not None:
        strict = strict or config.strict_legacy_addresses
    grid = create_empty_grid()
    seen: set[tuple[str, str, str]] = set()
    for index, record in enumerate(records):
        effect = EffectConfig.from_record(record, logger=logger)
        fx_group, bank, slot = effect.address
        if not is_grid_address(fx_group, bank, slot):
            logger.grid(f"record {index}: skipping unknown cell ({fx_group}, {bank}, {slot})")
            continue
        if effect.address in seen:
            if strict:
                raise DuplicateAddressError(
                    f"record {index}: cell ({fx_group}, {bank}, {slot}) already set"
                )
            logger.grid(f"record {index}: overwriting cell ({fx_group}, {bank}, {slot})")
        seen.add(effect.address)
        grid = set_effect(grid, fx_group, bank, slot, effect)
    return grid
