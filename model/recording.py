"""Effect recording types: which FX cells a preset records.

ALL_32 records both groups (4 banks x 4 slots each), INPUT_16 and TRACK_16
one group, FX4 bank A of each group.  Any callable with the signature of
is_slot_enabled() can stand in for it wherever the grid asks.
"""
from __future__ import annotations
from typing import Callable

from fx.options import INPUT_FX, TRACK_FX, INPUT_TRACK_FX
from model.effect import BANKS, SLOTS

ALL_32 = "ALL_32"
INPUT_16 = "INPUT_16"
TRACK_16 = "TRACK_16"
FX4 = "FX4"
RECORDING_TYPES = (ALL_32, INPUT_16, TRACK_16, FX4)

RECORDING_TYPE_LABELS = {
    ALL_32: "ALL (INPUT 16 + TRACK 16)",
    INPUT_16: "INPUT FX 16",
    TRACK_16: "TRACK FX 16",
    FX4: "4 FX (BANK A)",
}

SlotPredicate = Callable[[str, str, str, str], bool]

_GROUPS = {
    ALL_32: ("input", "track"),
    INPUT_16: ("input",),
    TRACK_16: ("track",),
    FX4: ("input", "track"),
}


def available_banks(recording_type: str, fx_group: str) -> list[str]:
    if fx_group not in _GROUPS.get(recording_type, ()):
        return []
    if recording_type == FX4:
        return [BANKS[0]]
    return list(BANKS)


def available_slots(recording_type: str) -> list[str]:
    if recording_type not in _GROUPS:
        return []
    return list(SLOTS)


def is_slot_enabled(recording_type: str, fx_group: str, bank: str, slot: str) -> bool:
    return (bank in available_banks(recording_type, fx_group)
            and slot in available_slots(recording_type))


def preset_type_for(recording_type: str) -> str:
    if recording_type == INPUT_16:
        return INPUT_FX
    if recording_type == TRACK_16:
        return TRACK_FX
    return INPUT_TRACK_FX
