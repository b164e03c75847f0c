"""Parameter type registry for the loop station's effect parameters.

Every parameter name used in an effect's parameter list resolves to a
ParameterConfig describing how it is edited: a numeric range, a fixed
select list, a display-only text header, or a ``combined`` parameter that
takes either a musical-note token or a raw number.  Names with no entry
fall back to a generic 0-100 range.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable

from fx.values import (
    MUSICAL_NOTE_OPTIONS, MUSICAL_NOTE_VALUES, MUSICAL_NOTES, OSC_TYPES,
    PAN_POSITIONS, PITCH_NAMES, KEY_NAMES, NoteOption, NoteToken, Numeric,
)

RANGE = "range"
SELECT = "select"
TEXT = "text"
COMBINED = "combined"
KINDS = (RANGE, SELECT, TEXT, COMBINED)

_UNIT_MS = ("TIME", "PRE_DELAY")
_UNIT_HZ = ("FREQ", "LOW_CUT", "HIGH_CUT")


@dataclass(frozen=True)
class ParameterConfig:
    name: str
    kind: str
    min_val: float | None = None
    max_val: float | None = None
    step: float | None = None
    options: tuple[str | NoteOption, ...] = ()
    default: str | float | None = None
    use_image_notes: bool = False

    @property
    def display_name(self) -> str:
        if self.kind == TEXT:
            return str(self.default)
        m = re.fullmatch(r"SEQ_VAL(\d+)", self.name)
        if m:
            return f"VAL {m.group(1)}"
        m = re.search(r"STEP_(LEN|LVL)(\d+)$", self.name)
        if m:
            return f"{m.group(1)} {m.group(2)}"
        parts = self.name.split("_")
        if len(parts) > 1 and parts[0].isupper():
            return " ".join(parts[1:])
        return self.name.replace("_", " ")

    def option_values(self) -> list[str]:
        return [o.value if isinstance(o, NoteOption) else o for o in self.options]

    def clamp(self, value: float) -> float:
        if self.min_val is not None:
            value = max(self.min_val, value)
        if self.max_val is not None:
            value = min(self.max_val, value)
        if isinstance(value, float) and value.is_integer() and float(self.step or 1).is_integer():
            return int(value)
        return value

    def decode(self, raw):
        """Turn a stored value into a typed one, falling back to the default.

        Combined parameters yield NoteToken or Numeric; range parameters a
        clamped number; select parameters one of their options.
        """
        if self.kind == TEXT:
            return self.default
        if self.kind == RANGE:
            number = _as_number(raw)
            return self.default if number is None else self.clamp(number)
        if self.kind == SELECT:
            values = self.option_values()
            if isinstance(raw, str) and raw in values:
                return raw
            if _as_number(raw) is not None and str(raw) in values:
                return str(raw)
            return self.default
        # combined
        if isinstance(raw, NoteToken) and raw.token in self.option_values():
            return raw
        if isinstance(raw, Numeric):
            return Numeric(self.clamp(raw.value))
        if isinstance(raw, str) and raw in self.option_values():
            return NoteToken(raw)
        number = _as_number(raw)
        if number is not None:
            return Numeric(self.clamp(number))
        return NoteToken(str(self.default))

    def encode(self, value):
        """Inverse of decode(): the JSON-friendly value stored on the wire."""
        if isinstance(value, NoteToken):
            return value.token
        if isinstance(value, Numeric):
            return value.value
        return value

    def format_value(self, raw) -> str:
        value = self.decode(raw)
        if isinstance(value, Numeric):
            value = value.value
        elif isinstance(value, NoteToken):
            return value.token
        if self.kind in (RANGE, COMBINED) and not isinstance(value, str):
            if any(u in self.name for u in _UNIT_MS):
                return f"{value}ms"
            if any(u in self.name for u in _UNIT_HZ):
                return f"{value}Hz"
        return str(value)


def _as_number(raw) -> float | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return raw
    if isinstance(raw, str):
        try:
            number = float(raw)
        except ValueError:
            return None
        return int(number) if number.is_integer() else number
    return None


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def range_parameter(name: str, min_val: float, max_val: float, default: float,
                    step: float = 1) -> ParameterConfig:
    return ParameterConfig(name, RANGE, min_val, max_val, step, default=default)


def select_parameter(name: str, options: Iterable[str], default: str) -> ParameterConfig:
    return ParameterConfig(name, SELECT, options=tuple(options), default=default)


def text_parameter(name: str, label: str) -> ParameterConfig:
    return ParameterConfig(name, TEXT, default=label)


def create_combined_parameter(name: str, default: str = "notes1",
                              use_image_notes: bool = True) -> ParameterConfig:
    """RATE-style parameter: musical-note token or raw 0-100 value."""
    options = MUSICAL_NOTE_OPTIONS if use_image_notes else MUSICAL_NOTE_VALUES
    return ParameterConfig(name, COMBINED, 0, 100, 1, tuple(options), default,
                           use_image_notes)


def _step_rate(name: str) -> ParameterConfig:
    return ParameterConfig(name, COMBINED, 0, 100, 1,
                           ("OFF",) + MUSICAL_NOTE_OPTIONS, "OFF", True)


def generic_parameter(name: str) -> ParameterConfig:
    return range_parameter(name, 0, 100, 50)


# ---------------------------------------------------------------------------
# Common option lists
# ---------------------------------------------------------------------------
_MODE_1_2 = ("1", "2")
_OFF_ON = ("OFF", "ON")
_VOICES = ("OCT-", "-6TH", "-5TH", "-4TH", "-3RD", "UNISON",
           "+3RD", "+4TH", "+5TH", "+6TH", "OCT+")
_HRM_PAN = ("L100", "L50", "CENTER", "R50", "R100")
_BEAT_LENGTHS = ("1MEAS", "1/2", "1/4", "1/8", "1/16")
_DELAY_LOW_CUT = ("FLAT", "20Hz", "25Hz", "31.5Hz", "40Hz", "50Hz", "63Hz",
                  "80Hz", "100Hz", "125Hz", "160Hz", "200Hz", "250Hz",
                  "315Hz", "400Hz", "500Hz", "630Hz", "800Hz")
_DELAY_HIGH_CUT = ("630Hz", "800Hz", "1kHz", "1.25kHz", "1.6kHz", "2kHz",
                   "2.5kHz", "3.15kHz", "4kHz", "5kHz", "6.3kHz", "8kHz",
                   "10kHz", "12.5kHz", "FLAT")


def _filter_params(prefix: str) -> list[ParameterConfig]:
    return [
        create_combined_parameter(f"{prefix}_RATE"),
        range_parameter(f"{prefix}_DEPTH", 0, 100, 50),
        range_parameter(f"{prefix}_RESONANCE", 0, 100, 50),
        range_parameter(f"{prefix}_CUTOFF", 0, 100, 50),
        _step_rate(f"{prefix}_STEP_RATE"),
    ]


# ---------------------------------------------------------------------------
# STEP SLICER (specialised block, assembled by the effect catalog)
# ---------------------------------------------------------------------------
STEP_SLICER_BASE: tuple[ParameterConfig, ...] = (
    create_combined_parameter("STEPSLICER_RATE"),
    range_parameter("STEPSLICER_DEPTH", 0, 100, 100),
    range_parameter("STEPSLICER_THRESHOLD", 0, 100, 50),
    range_parameter("STEPSLICER_GAIN", -60, 60, 0),
    range_parameter("STEPSLICER_STEP_MAX", 1, 16, 16),
)
STEP_SLICER_LENGTHS: tuple[ParameterConfig, ...] = tuple(
    range_parameter(f"STEPSLICER_STEP_LEN{i}", 0, 100, 50) for i in range(1, 17)
)
STEP_SLICER_LEVELS: tuple[ParameterConfig, ...] = tuple(
    range_parameter(f"STEPSLICER_STEP_LVL{i}", 0, 100, 100) for i in range(1, 17)
)
STEP_LENGTH_HEADER = text_parameter("STEP_LENGTH_HEADER", "STEP LENGTH (1-16)")
STEP_LEVEL_HEADER = text_parameter("STEP_LEVEL_HEADER", "STEP LEVEL (1-16)")


# ---------------------------------------------------------------------------
# Parameter definitions
# ---------------------------------------------------------------------------

PARAMETER_CONFIGS: list[ParameterConfig] = [
    *_filter_params("LPF"),
    *_filter_params("BPF"),
    *_filter_params("HPF"),

    # PHASER
    create_combined_parameter("PHASER_RATE"),
    range_parameter("PHASER_DEPTH", 0, 100, 50),
    range_parameter("PHASER_RESONANCE", 0, 100, 50),
    range_parameter("PHASER_MANUAL", 0, 100, 50),
    _step_rate("PHASER_STEP_RATE"),
    range_parameter("PHASER_D_LEVEL", 0, 100, 100),
    range_parameter("PHASER_E_LEVEL", 0, 100, 100),
    select_parameter("PHASER_STAGE", ("4", "8", "12", "BI-PHASE"), "8"),

    # FLANGER
    create_combined_parameter("FLANGER_RATE", "1MEAS"),
    range_parameter("FLANGER_DEPTH", 0, 100, 50),
    range_parameter("FLANGER_RESONANCE", 0, 100, 50),
    range_parameter("FLANGER_MANUAL", 0, 100, 50),
    _step_rate("FLANGER_STEP_RATE"),
    range_parameter("FLANGER_D_LEVEL", 0, 100, 100),
    range_parameter("FLANGER_E_LEVEL", 0, 100, 100),
    range_parameter("FLANGER_SEPARATION", 0, 100, 0),

    # SYNTH
    range_parameter("SYNTH_FREQUENCY", 0, 100, 50),
    range_parameter("SYNTH_RESONANCE", 0, 100, 50),
    range_parameter("SYNTH_DECAY", 0, 100, 50),
    range_parameter("SYNTH_BALANCE", 0, 100, 50),

    # LO-FI
    select_parameter("LOFI_BITDEPTH", ["OFF"] + [str(31 - i) for i in range(31)], "8"),
    select_parameter("LOFI_SAMPLERATE", ["OFF"] + [f"1/{i + 2}" for i in range(31)], "1/4"),
    range_parameter("LOFI_BALANCE", 0, 100, 50),

    # RADIO
    range_parameter("RADIO_LOFI", 1, 10, 5),
    range_parameter("RADIO_LEVEL", 0, 100, 50),

    # RINGMOD / G2B
    range_parameter("RINGMOD_FREQUENCY", 0, 100, 50),
    range_parameter("RINGMOD_BALANCE", 0, 100, 50),
    select_parameter("RINGMOD_MODE", _MODE_1_2, "2"),
    range_parameter("G2B_BALANCE", 0, 100, 50),
    select_parameter("G2B_MODE", _MODE_1_2, "2"),

    # SUSTAINER
    range_parameter("SUSTAINER_ATTACK", 0, 100, 50),
    range_parameter("SUSTAINER_RELEASE", 0, 100, 50),
    range_parameter("SUSTAINER_LEVEL", 0, 100, 50),
    range_parameter("SUSTAINER_LOW_GAIN", -20, 20, 0),
    range_parameter("SUSTAINER_HI_GAIN", -20, 20, 0),
    range_parameter("SUSTAINER_SUSTAIN", 0, 100, 50),

    # AUTO RIFF ("PHARASE" is the stored key, keep the spelling)
    select_parameter("AUTORIFF_PHARASE", [f"P{i:02d}" for i in range(1, 31)], "P01"),
    create_combined_parameter("AUTORIFF_TEMPO", "notes4"),
    select_parameter("AUTORIFF_HOLD", _OFF_ON, "OFF"),
    range_parameter("AUTORIFF_ATTACK", 0, 100, 50),
    select_parameter("AUTORIFF_LOOP", _OFF_ON, "ON"),
    select_parameter("AUTORIFF_KEY", KEY_NAMES, "C(Am)"),
    range_parameter("AUTORIFF_BALANCE", 0, 100, 50),

    # SLOW GEAR
    range_parameter("SLOWGEAR_SENS", 0, 100, 50),
    range_parameter("SLOWGEAR_RISE_TIME", 0, 100, 50),
    range_parameter("SLOWGEAR_LEVEL", 0, 100, 50),
    select_parameter("SLOWGEAR_MODE", _MODE_1_2, "2"),

    # TRANSPOSE / PITCH BEND
    range_parameter("TRANSPOSE_TRANS", -12, 12, 0),
    select_parameter("TRANSPOSE_MODE", _MODE_1_2, "2"),
    range_parameter("PITCHBEND_PITCH", -30, 40, 40),
    range_parameter("PITCHBEND_BEND", 0, 100, 50),
    select_parameter("PITCHBEND_MODE", _MODE_1_2, "2"),

    # ROBOT / ELECTRIC
    select_parameter("ROBOT_ROBOT_NOTE", PITCH_NAMES, "C"),
    range_parameter("ROBOT_FORMANT", -50, 50, 0),
    select_parameter("ROBOT_MODE", _MODE_1_2, "2"),
    range_parameter("ELECTRIC_SHIFT", -12, 12, 0),
    range_parameter("ELECTRIC_FORMANT", -50, 50, 0),
    range_parameter("ELECTRIC_SPEED", 0, 10, 5),
    range_parameter("ELECTRIC_STABILITY", -10, 10, 0),
    select_parameter("ELECTRIC_SCALE", ("CHROMATIC",) + KEY_NAMES, "CHROMATIC"),

    # HRM MANUAL / HRM AUTO(M)
    select_parameter("HRMMANUAL_VOICE", _VOICES, "+3RD"),
    range_parameter("HRMMANUAL_FORMANT", -50, 50, 0),
    select_parameter("HRMMANUAL_PAN", _HRM_PAN, "R50"),
    select_parameter("HRMMANUAL_KEY", PITCH_NAMES, "C"),
    range_parameter("HRMMANUAL_D_LEVEL", 0, 100, 100),
    range_parameter("HRMMANUAL_HRM_LEVEL", 0, 100, 80),
    select_parameter("HRMAUTO_VOICE", _VOICES, "+3RD"),
    range_parameter("HRMAUTO_FORMANT", -50, 50, 0),
    select_parameter("HRMAUTO_PAN", _HRM_PAN, "R50"),
    select_parameter("HRMAUTO_HRM_MODE", ("MAJOR", "MINOR"), "MAJOR"),
    select_parameter("HRMAUTO_KEY", PITCH_NAMES, "C"),
    range_parameter("HRMAUTO_D_LEVEL", 0, 100, 100),
    range_parameter("HRMAUTO_E_LEVEL", 0, 100, 80),

    # OSC BOT
    select_parameter("OSCBOT_OSC", OSC_TYPES, "SAW"),
    range_parameter("OSCBOT_TONE", -50, 50, 0),
    range_parameter("OSCBOT_ATTACK", 0, 100, 50),
    select_parameter("OSCBOT_NOTE", MUSICAL_NOTES, "C2"),
    range_parameter("OSCBOT_MOD_SENS", -50, 50, 0),
    range_parameter("OSCBOT_BALANCE", 0, 100, 50),

    # REVERB
    range_parameter("REVERB_TIME", 0.1, 10, 3.2, step=0.1),
    range_parameter("REVERB_PRE_DELAY", 0, 500, 50, step=10),
    range_parameter("REVERB_DENSITY", 0, 100, 70),
    select_parameter("REVERB_LOW_CUT", ("FLAT", "20Hz", "50Hz", "100Hz", "200Hz", "400Hz"), "FLAT"),
    select_parameter("REVERB_HIGH_CUT", ("FLAT", "4.0kHz", "6.0kHz", "8.0kHz", "10.0kHz",
                                         "12.0kHz", "14.0kHz"), "8.0kHz"),
    range_parameter("REVERB_D_LEVEL", 0, 100, 100),
    range_parameter("REVERB_E_LEVEL", 0, 100, 70),

    # DELAY (TIME takes a note or 1-2000 ms)
    ParameterConfig("DELAY_TIME", COMBINED, 1, 2000, 1, MUSICAL_NOTE_OPTIONS, "notes4", True),
    range_parameter("DELAY_FEEDBACK", 0, 100, 30),
    range_parameter("DELAY_D_LEVEL", 0, 100, 100),
    select_parameter("DELAY_LOW_CUT", _DELAY_LOW_CUT, "FLAT"),
    select_parameter("DELAY_HIGH_CUT", _DELAY_HIGH_CUT, "4kHz"),
    range_parameter("DELAY_E_LEVEL", 0, 100, 60),

    # Track FX A only
    select_parameter("BEATSCATTER_TYPE", ("SCATTER1", "SCATTER2"), "SCATTER1"),
    select_parameter("BEATSCATTER_LENGTH", _BEAT_LENGTHS, "1/4"),
    select_parameter("BEATREPEAT_TYPE", ("REPEAT1", "REPEAT2"), "REPEAT1"),
    select_parameter("BEATREPEAT_LENGTH", _BEAT_LENGTHS, "1/4"),
    select_parameter("BEATSHIFT_TYPE", ("SHIFT1", "SHIFT2"), "SHIFT1"),
    select_parameter("BEATSHIFT_SHIFT", ("-3/4", "-1/2", "-1/4", "-1/8",
                                         "1/8", "1/4", "1/2", "3/4"), "1/4"),
    select_parameter("VINYLFLICK_FLICK", (">>", "<<"), ">>"),

    # MANUAL PAN
    select_parameter("MANUALPAN_POSITION", PAN_POSITIONS, "CENTER"),

    *STEP_SLICER_BASE,
    *STEP_SLICER_LENGTHS,
    *STEP_SLICER_LEVELS,
]


class ParameterRegistry:
    """Immutable name -> ParameterConfig lookup with a generic fallback."""

    def __init__(self, configs: Iterable[ParameterConfig] = PARAMETER_CONFIGS) -> None:
        self._configs = MappingProxyType({c.name: c for c in configs})

    def resolve(self, name: str) -> ParameterConfig:
        config = self._configs.get(name)
        if config is None:
            return generic_parameter(name)
        return config

    def get(self, name: str) -> ParameterConfig | None:
        return self._configs.get(name)

    def names(self) -> list[str]:
        return list(self._configs.keys())

    def list_all(self) -> list[ParameterConfig]:
        return list(self._configs.values())

    def __contains__(self, name: object) -> bool:
        return name in self._configs

    def __len__(self) -> int:
        return len(self._configs)
