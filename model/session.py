"""Edit-time state for a preset being created or edited.

Holds the current grid, recording type and selected cell.  Every edit goes
through set_effect(), so listeners on grid_changed receive a fresh grid and
can still compare it against the previous one.
"""
from __future__ import annotations
from PyQt6.QtCore import QObject, pyqtSignal

from core.config import AppConfig
from core.logger import AppLogger
from fx.effects import EffectCatalog, default_catalog
from fx.options import legal_effect_types
from model.effect import BANKS, FX_GROUPS, SLOTS, EffectConfig
from model.grid import (
    EffectGrid, create_empty_grid, get_effect, grid_to_legacy_array,
    legacy_array_to_grid, set_effect,
)
from model.recording import (
    available_banks, available_slots, preset_type_for,
)


class GridSession(QObject):
    grid_changed = pyqtSignal(object)
    selection_changed = pyqtSignal(str, str, str)  # fx_group, bank, slot

    def __init__(
        self,
        config: AppConfig | None = None,
        catalog: EffectCatalog | None = None,
        logger: AppLogger | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._config = config or AppConfig()
        self._catalog = catalog or default_catalog()
        self._logger = logger or AppLogger(echo=self._config.log_to_stdout)
        self._grid = create_empty_grid()
        self._recording_type = self._config.default_recording_type
        self._fx_group, self._bank, self._slot = FX_GROUPS[0], BANKS[0], SLOTS[0]
        self._clamp_selection()

    # -- state --

    @property
    def grid(self) -> EffectGrid:
        return self._grid

    @property
    def recording_type(self) -> str:
        return self._recording_type

    @property
    def preset_type(self) -> str:
        return preset_type_for(self._recording_type)

    @property
    def selection(self) -> tuple[str, str, str]:
        return (self._fx_group, self._bank, self._slot)

    def current_effect(self) -> EffectConfig | None:
        return get_effect(self._grid, *self.selection)

    # -- selection --

    def select(self, fx_group: str | None = None, bank: str | None = None,
               slot: str | None = None) -> None:
        self._fx_group = fx_group or self._fx_group
        self._bank = bank or self._bank
        self._slot = slot or self._slot
        self._clamp_selection()
        self.selection_changed.emit(*self.selection)

    def set_recording_type(self, recording_type: str) -> None:
        self._recording_type = recording_type
        before = self.selection
        self._clamp_selection()
        if self.selection != before:
            self._logger.grid(
                f"{recording_type}: selection moved to {'/'.join(self.selection)}"
            )
            self.selection_changed.emit(*self.selection)

    def _clamp_selection(self) -> None:
        groups = [g for g in FX_GROUPS if available_banks(self._recording_type, g)]
        if groups and self._fx_group not in groups:
            self._fx_group = groups[0]
        banks = available_banks(self._recording_type, self._fx_group)
        if banks and self._bank not in banks:
            self._bank = banks[0]
        slots = available_slots(self._recording_type)
        if slots and self._slot not in slots:
            self._slot = slots[0]

    def legal_effect_types(self) -> list[str]:
        # FX A-D on the unit are the slots within a bank.
        return legal_effect_types(self._fx_group, self._slot, self._catalog)

    # -- edits --

    def _commit(self, grid: EffectGrid) -> None:
        self._grid = grid
        self.grid_changed.emit(grid)

    def set_current(self, effect: EffectConfig | None) -> None:
        self._commit(set_effect(self._grid, *self.selection, effect))

    def update_current(self, **changes) -> None:
        effect = self.current_effect()
        if effect is None:
            return
        self.set_current(effect.with_changes(**changes))

    def set_parameter(self, name: str, value) -> None:
        effect = self.current_effect()
        if effect is None:
            return
        self.update_current(parameters={**effect.parameters, name: value})

    def change_effect_type(self, effect_type: str) -> None:
        self.update_current(
            effect_type=effect_type,
            parameters=self._catalog.default_parameters(effect_type),
        )

    def clear_current(self) -> None:
        self.set_current(None)

    # -- persistence boundary --

    def load_records(self, records: list[dict]) -> None:
        self._commit(legacy_array_to_grid(records, logger=self._logger, config=self._config))

    def to_payload(self) -> list[dict]:
        return grid_to_legacy_array(self._grid, self._recording_type, include_address=True)
