"""Effect-type choices legal at a given placement.

TRACK FX A offers only the four track-exclusive effects; every other track
position (and every position of a combined INPUT+TRACK preset) offers the
catalog minus those four; INPUT FX offers everything.
"""
from __future__ import annotations

from fx.effects import EffectCatalog, default_catalog

INPUT_FX = "INPUT_FX"
TRACK_FX = "TRACK_FX"
INPUT_TRACK_FX = "INPUT_TRACK_FX"
PRESET_TYPES = (INPUT_FX, TRACK_FX, INPUT_TRACK_FX)

FIRST_POSITION = "A"

_SCOPES = {
    "input": INPUT_FX,
    "track": TRACK_FX,
    INPUT_FX: INPUT_FX,
    TRACK_FX: TRACK_FX,
    INPUT_TRACK_FX: INPUT_TRACK_FX,
}


def legal_effect_types(
    scope: str | None = None,
    position: str | None = None,
    catalog: EffectCatalog | None = None,
) -> list[str]:
    """Return the effect types selectable at *position* within *scope*.

    *scope* is an FX group ("input"/"track") or a preset type
    (INPUT_FX/TRACK_FX/INPUT_TRACK_FX); *position* is the bank or FX letter.
    """
    catalog = catalog or default_catalog()
    all_effects = catalog.effect_types()
    kind = _SCOPES.get(scope)
    if kind == TRACK_FX and position == FIRST_POSITION:
        return list(catalog.track_a_effects)
    if kind == TRACK_FX or (kind == INPUT_TRACK_FX and position is not None):
        return [e for e in all_effects if not catalog.is_track_a_only(e)]
    return all_effects


def effect_options(scope: str | None = None, position: str | None = None,
                   catalog: EffectCatalog | None = None) -> list[dict]:
    """legal_effect_types() as value/label pairs for a select control."""
    return [{"value": e, "label": e} for e in legal_effect_types(scope, position, catalog)]
