from __future__ import annotations
import json
from dataclasses import dataclass, field, replace

from core.logger import AppLogger, default_logger

FX_GROUPS = ("input", "track")
BANKS = ("A", "B", "C", "D")
SLOTS = ("A", "B", "C", "D")
SWITCH_MODES = ("TOGGLE", "MOMENT")
INSERTS = ("ALL", "MIC1", "MIC2", "INST1", "INST2",
           "TRACK1", "TRACK2", "TRACK3", "TRACK4", "TRACK5")

DEFAULT_EFFECT_TYPE = "LPF"


def parse_parameters(raw, logger: AppLogger | None = None) -> dict:
    """Decode the wire ``parameters`` field; anything unusable becomes {}."""
    if isinstance(raw, dict):
        return dict(raw)
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            (logger or default_logger()).general(f"malformed parameters JSON: {raw[:40]!r}")
            return {}
        if isinstance(parsed, dict):
            return parsed
        (logger or default_logger()).general("parameters JSON is not an object")
        return {}
    return {}


@dataclass(frozen=True)
class EffectConfig:
    fx_group: str
    bank: str
    slot: str
    effect_type: str = DEFAULT_EFFECT_TYPE
    sw: bool = True
    sw_mode: str = "TOGGLE"
    insert: str = "ALL"
    parameters: dict = field(default_factory=dict)

    # parameters is a dict, so instances compare by value but are unhashable.
    __hash__ = None

    @property
    def address(self) -> tuple[str, str, str]:
        return (self.fx_group, self.bank, self.slot)

    def with_changes(self, **changes) -> EffectConfig:
        return replace(self, **changes)

    def to_record(self, include_address: bool = True) -> dict:
        """Wire/storage shape: camelCase keys, parameters as a JSON string."""
        record = {}
        if include_address:
            record.update(fxGroup=self.fx_group, bank=self.bank, slot=self.slot)
        record.update(
            effectType=self.effect_type,
            sw=self.sw,
            swMode=self.sw_mode,
            insert=self.insert,
            parameters=json.dumps(self.parameters, ensure_ascii=False),
        )
        return record

    @classmethod
    def from_record(cls, record: dict, fx_group: str | None = None,
                    bank: str | None = None, slot: str | None = None,
                    logger: AppLogger | None = None) -> EffectConfig:
        return cls(
            fx_group=fx_group or record.get("fxGroup") or FX_GROUPS[0],
            bank=bank or record.get("bank") or BANKS[0],
            slot=slot or record.get("slot") or SLOTS[0],
            effect_type=record.get("effectType") or DEFAULT_EFFECT_TYPE,
            sw=True if record.get("sw") is None else record["sw"],
            sw_mode=record.get("swMode") or "TOGGLE",
            insert=record.get("insert") or "ALL",
            parameters=parse_parameters(record.get("parameters"), logger),
        )


def empty_effect(fx_group: str, bank: str, slot: str) -> EffectConfig:
    return EffectConfig(fx_group, bank, slot)
