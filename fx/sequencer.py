"""Step-sequencer parameter block appended to sequencer-capable effects.

The block is SEQ_SW, SEQ_SYNC, SEQ_RETRIG, an optional SEQ_TARGET, SEQ_RATE,
SEQ_MAX and sixteen SEQ_VALn steps.  The step value type depends on the
effect: semitones for TRANSPOSE, pan positions for MANUAL PAN, notes for
OSC BOT and 0-100 for everything else.
"""
from __future__ import annotations
from types import MappingProxyType
from typing import Iterable, Mapping

from fx.params import (
    ParameterConfig, create_combined_parameter, range_parameter, select_parameter,
)
from fx.values import MUSICAL_NOTES, PAN_POSITIONS

SEQ_STEPS = 16

SEQUENCER_EFFECTS = (
    "LPF", "BPF", "HPF", "PHASER", "FLANGER", "SYNTH", "RINGMOD", "PITCH BEND",
    "ISOLATOR", "OCTAVE", "TREMOLO", "VIBRATO", "MANUAL PAN", "OSC BOT",
)

TARGET_OPTIONS: dict[str, tuple[str, ...]] = {
    "LPF": ("CUTOFF", "DEPTH"),
    "BPF": ("CUTOFF", "DEPTH"),
    "HPF": ("CUTOFF", "DEPTH"),
    "PHASER": ("DEPTH", "RESONANCE", "MANUAL", "D.LEVEL", "E.LEVEL"),
    "FLANGER": ("DEPTH", "RESONANCE", "MANUAL", "SEPARATION", "D.LEVEL", "E.LEVEL"),
    "SYNTH": ("FREQUENCY", "RESONANCE", "DECAY"),
    "RINGMOD": ("FREQUENCY",),
    "TRANSPOSE": ("TRANS",),
    "PITCH BEND": ("BEND",),
    "OSC BOT": ("NOTE",),
    "ISOLATOR": ("DEPTH",),
    "OCTAVE": ("OCTAVE LEVEL",),
    "MANUAL PAN": ("POSITION",),
    "TREMOLO": ("DEPTH", "LEVEL"),
    "VIBRATO": ("DEPTH", "D.LEVEL", "E.LEVEL"),
}

# PITCH BEND's stored default "PITCH" is not one of its options; the
# generator falls back to the first option in that case.
TARGET_DEFAULTS: dict[str, str] = {
    "LPF": "DEPTH",
    "BPF": "DEPTH",
    "HPF": "DEPTH",
    "PHASER": "DEPTH",
    "FLANGER": "DEPTH",
    "SYNTH": "FREQUENCY",
    "RINGMOD": "FREQUENCY",
    "TRANSPOSE": "TRANS",
    "PITCH BEND": "PITCH",
    "OSC BOT": "NOTE",
    "ISOLATOR": "DEPTH",
    "OCTAVE": "OCTAVE LEVEL",
    "MANUAL PAN": "POSITION",
    "TREMOLO": "DEPTH",
    "VIBRATO": "DEPTH",
}


def _step_value(effect_type: str, index: int) -> ParameterConfig:
    name = f"SEQ_VAL{index}"
    if effect_type == "TRANSPOSE":
        return range_parameter(name, -12, 12, 0)
    if effect_type == "MANUAL PAN":
        return select_parameter(name, PAN_POSITIONS, "L50")
    if effect_type == "OSC BOT":
        return select_parameter(name, MUSICAL_NOTES, "C1")
    return range_parameter(name, 0, 100, 0)


class SequencerGenerator:
    def __init__(
        self,
        effects: Iterable[str] = SEQUENCER_EFFECTS,
        target_options: Mapping[str, Iterable[str]] = TARGET_OPTIONS,
        target_defaults: Mapping[str, str] = TARGET_DEFAULTS,
    ) -> None:
        self._effects = frozenset(effects)
        self._target_options = MappingProxyType(
            {k: tuple(v) for k, v in target_options.items()}
        )
        self._target_defaults = MappingProxyType(dict(target_defaults))

    def supports(self, effect_type: str) -> bool:
        return effect_type in self._effects

    def target_parameter(self, effect_type: str) -> ParameterConfig | None:
        options = self._target_options.get(effect_type)
        if not options:
            return None
        default = self._target_defaults.get(effect_type)
        if default not in options:
            default = options[0]
        return select_parameter("SEQ_TARGET", options, default)

    def parameters_for(self, effect_type: str) -> list[ParameterConfig]:
        """Return the sequencer block for *effect_type* (empty if unsupported)."""
        if not self.supports(effect_type):
            return []
        params = [
            select_parameter("SEQ_SW", ("OFF", "ON"), "OFF"),
            select_parameter("SEQ_SYNC", ("OFF", "ON"), "OFF"),
            select_parameter("SEQ_RETRIG", ("OFF", "ON"), "OFF"),
        ]
        target = self.target_parameter(effect_type)
        if target is not None:
            params.append(target)
        params.append(create_combined_parameter("SEQ_RATE", "notes1", True))
        params.append(range_parameter("SEQ_MAX", 1, 16, 16))
        params.extend(_step_value(effect_type, i) for i in range(1, SEQ_STEPS + 1))
        return params
