"""Value vocabularies shared by the effect parameter schema.

Musical-note tokens (bar lengths and note glyphs), the note-with-octave
scale used by OSC BOT, MANUAL PAN positions, and the tagged value type
carried by ``combined`` parameters.
"""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class NoteOption:
    """One entry of the musical-note vocabulary."""
    value: str                    # e.g. "1MEAS", "notes4"
    kind: str = "text"            # "text" or "image"
    image_key: str | None = None  # asset key for image glyphs; the UI owns the path


# ---------------------------------------------------------------------------
# Musical notes (RATE, SEQ_RATE, DELAY_TIME ...)
# ---------------------------------------------------------------------------
BAR_TOKENS = ("4MEAS", "2MEAS", "1MEAS")
NOTE_GLYPH_TOKENS = tuple(f"notes{i}" for i in range(1, 12))

MUSICAL_NOTE_OPTIONS: tuple[NoteOption, ...] = (
    tuple(NoteOption(token) for token in BAR_TOKENS)
    + tuple(NoteOption(token, "image", token) for token in NOTE_GLYPH_TOKENS)
)
MUSICAL_NOTE_VALUES: tuple[str, ...] = BAR_TOKENS + NOTE_GLYPH_TOKENS


def note_image_key(token: str) -> str | None:
    """Return the glyph asset key for *token*, or None for text/unknown tokens."""
    for opt in MUSICAL_NOTE_OPTIONS:
        if opt.value == token:
            return opt.image_key
    return None


# ---------------------------------------------------------------------------
# Pitch vocabularies
# ---------------------------------------------------------------------------
PITCH_NAMES = ("C", "D♭", "D", "E♭", "E", "F", "F♯", "G", "A♭", "A", "B♭", "B")
KEY_NAMES = (
    "C(Am)", "D♭(B♭m)", "D(Bm)", "E♭(Cm)", "E(C♯m)", "F(Dm)",
    "F♯(D♯m)", "G(Em)", "A♭(Fm)", "A(F♯m)", "B♭(Gm)", "B(G♯m)",
)


def generate_musical_notes() -> list[str]:
    """C1 .. G9, twelve pitches per octave, stopping at G9."""
    notes = []
    for octave in range(1, 10):
        for pitch in PITCH_NAMES:
            note = f"{pitch}{octave}"
            notes.append(note)
            if note == "G9":
                return notes
    return notes


MUSICAL_NOTES: tuple[str, ...] = tuple(generate_musical_notes())

OSC_TYPES = ("SAW", "VINTAGE SAW", "DETUNE SAW", "SQUARE", "RECT")


def generate_pan_positions() -> list[str]:
    """L50 .. L1, CENTER, R1 .. R50."""
    positions = []
    for i in range(-50, 51):
        if i < 0:
            positions.append(f"L{-i}")
        elif i > 0:
            positions.append(f"R{i}")
        else:
            positions.append("CENTER")
    return positions


PAN_POSITIONS: tuple[str, ...] = tuple(generate_pan_positions())


# ---------------------------------------------------------------------------
# Combined parameter values: either a note token or a raw number
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NoteToken:
    token: str


@dataclass(frozen=True)
class Numeric:
    value: float


CombinedValue = NoteToken | Numeric
