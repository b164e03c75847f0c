#!/usr/bin/env python3
"""Check a saved preset's effect records against a recording type.

Reads a JSON file holding either a flat list of effect records or an object
with an "effects" list, rebuilds the grid and reports which cells the
recording type keeps, which records fall outside it, and any parameter names
the effect type does not declare.

Usage:
    python tools/preset_check.py preset.json
    python tools/preset_check.py preset.json --recording-type FX4 --strict
"""

from __future__ import annotations
import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))
from core.config import AppConfig
from core.logger import AppLogger
from fx.effects import EffectCatalog, default_catalog
from model.effect import EffectConfig
from model.grid import (
    DuplicateAddressError, is_grid_address, iter_cells, legacy_array_to_grid,
)
from model.recording import RECORDING_TYPES, is_slot_enabled


def load_records(path: Path) -> list[dict]:
    data = json.loads(path.read_text())
    if isinstance(data, dict):
        data = data.get("effects", [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of effect records")
    return [r for r in data if isinstance(r, dict)]


def check_records(records: list[dict], recording_type: str, strict: bool = False,
                  catalog: EffectCatalog | None = None,
                  logger: AppLogger | None = None) -> list[str]:
    """Return report lines; raises DuplicateAddressError in strict mode."""
    catalog = catalog or default_catalog()
    grid = legacy_array_to_grid(records, strict=strict, logger=logger)
    addressed = set()
    for record in records:
        address = EffectConfig.from_record(record, logger=logger).address
        if is_grid_address(*address):
            addressed.add(address)
    lines = []
    kept = 0
    for fx_group, bank, slot, effect in iter_cells(grid):
        if (fx_group, bank, slot) not in addressed or effect is None:
            continue
        where = f"{fx_group.upper()} {bank}/{slot}"
        if not is_slot_enabled(recording_type, fx_group, bank, slot):
            lines.append(f"{where}: {effect.effect_type} dropped by {recording_type}")
            continue
        kept += 1
        if effect.effect_type not in catalog:
            lines.append(f"{where}: unknown effect type {effect.effect_type!r}")
            continue
        known = {p.name for p in catalog.effect_parameters(effect.effect_type)}
        extra = sorted(set(effect.parameters) - known)
        if extra:
            lines.append(f"{where}: {effect.effect_type} has undeclared "
                         f"parameters {', '.join(extra)}")
    lines.append(f"{kept} effect(s) kept under {recording_type}")
    return lines


def main(argv: list[str] | None = None) -> int:
    config = AppConfig()
    parser = argparse.ArgumentParser(description="Check preset effect records")
    parser.add_argument("path", type=Path, help="Preset JSON file")
    parser.add_argument("--recording-type", "-r", choices=RECORDING_TYPES,
                        default=config.default_recording_type)
    parser.add_argument("--strict", action="store_true",
                        default=config.strict_legacy_addresses,
                        help="Fail on two records for the same cell")
    args = parser.parse_args(argv)

    try:
        records = load_records(args.path)
    except (OSError, ValueError) as e:
        print(f"Cannot read {args.path}: {e}")
        return 1

    logger = AppLogger(echo=config.log_to_stdout)
    try:
        lines = check_records(records, args.recording_type, args.strict, logger=logger)
    except DuplicateAddressError as e:
        print(f"Duplicate cell: {e}")
        return 2
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
