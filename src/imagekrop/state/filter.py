"""Observable filter preset selection."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from PySide6.QtCore import QObject, Signal

from ..core.color_matrix import ColorMatrix
from ..core.filter_presets import FilterPreset, PresetFilter, get_preset, list_presets, resolve_preset

_LOGGER = logging.getLogger(__name__)


class ImageFilterState(QObject):
    """Track which filter preset is applied to the preview."""

    filterChanged = Signal(str)

    def __init__(self, selected: FilterPreset | str = FilterPreset.ORIGINAL, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._selected = resolve_preset(selected)

    @property
    def selected(self) -> FilterPreset:
        return self._selected

    def presets(self) -> list[PresetFilter]:
        return list_presets()

    def select(self, name: FilterPreset | str) -> bool:
        preset = resolve_preset(name)
        if preset is self._selected:
            return False
        self._selected = preset
        _LOGGER.debug("Selected filter %s", preset.value)
        self.filterChanged.emit(preset.value)
        return True

    def reset(self) -> bool:
        return self.select(FilterPreset.ORIGINAL)

    def color_matrix(self) -> ColorMatrix:
        return get_preset(self._selected).matrix

    def to_dict(self) -> dict[str, str]:
        return {"preset": self._selected.value}

    def load_dict(self, data: Mapping[str, object]) -> None:
        raw = data.get("preset")
        if isinstance(raw, str):
            self.select(raw)
