"""Observable colour adjustment state."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from PySide6.QtCore import QObject, Signal

from ..core.adjustments import (
    ADJUSTMENT_ORDER,
    AdjustmentConfig,
    AdjustmentParams,
    clamp_adjustment,
    compile_adjustments,
)
from ..core.color_matrix import ColorMatrix

_LOGGER = logging.getLogger(__name__)


class ImageKolorState(QObject):
    """Hold the slider values of one colour editing session."""

    valueChanged = Signal(str, float)
    """Emitted when a single adjustment changes."""

    matrixChanged = Signal(object)
    """Emitted with the recompiled :class:`ColorMatrix` after any change."""

    def __init__(
        self,
        config: AdjustmentConfig | None = None,
        params: AdjustmentParams | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._config = config or AdjustmentConfig()
        self._params = params.copy() if params is not None else AdjustmentParams()

    @property
    def config(self) -> AdjustmentConfig:
        return self._config

    def params(self) -> AdjustmentParams:
        """Return a copy of the current values."""
        return self._params.copy()

    def value(self, name: str) -> float:
        return self._params.get(name)

    def set_value(self, name: str, value: float) -> bool:
        """Clamp and store *value*; disabled adjustments ignore input."""
        if not self._config.is_enabled(name):
            _LOGGER.debug("Ignoring %s update, adjustment disabled", name)
            return False
        normalised = clamp_adjustment(name, value)
        if normalised == self._params.get(name):
            return False
        self._params.set(name, normalised)
        self.valueChanged.emit(name, normalised)
        self.matrixChanged.emit(self.color_matrix())
        return True

    def set_values(self, updates: Mapping[str, float]) -> bool:
        """Apply several updates and emit a single ``matrixChanged``."""
        changed: list[tuple[str, float]] = []
        for name, value in updates.items():
            if not self._config.is_enabled(name):
                continue
            normalised = clamp_adjustment(name, value)
            if normalised == self._params.get(name):
                continue
            self._params.set(name, normalised)
            changed.append((name, normalised))
        for name, value in changed:
            self.valueChanged.emit(name, value)
        if changed:
            self.matrixChanged.emit(self.color_matrix())
        return bool(changed)

    def reset_all(self) -> bool:
        """Restore every adjustment to its default value at once."""
        if self._params.is_identity():
            return False
        before = self._params.copy()
        self._params.reset()
        for name in ADJUSTMENT_ORDER:
            if before.get(name) != self._params.get(name):
                self.valueChanged.emit(name, self._params.get(name))
        self.matrixChanged.emit(self.color_matrix())
        return True

    def color_matrix(self) -> ColorMatrix:
        return compile_adjustments(self._params)

    def to_dict(self) -> dict[str, float]:
        return self._params.to_dict()

    def load_dict(self, data: Mapping[str, object]) -> None:
        self._params = AdjustmentParams.from_dict(data)
        self.matrixChanged.emit(self.color_matrix())
