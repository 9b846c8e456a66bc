"""Pan, zoom and rotation state of an image preview."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

from ..config import DEFAULT_ZOOM_RANGE, ROTATION_RANGE
from .crop.geometry import Point2D


@dataclass(frozen=True)
class TransformConfig:
    """Which gestures the preview responds to."""

    enable_zoom: bool = True
    enable_rotation: bool = True
    enable_pan: bool = True
    enable_swipe: bool = False


@dataclass(frozen=True)
class TransformData:
    """Serialisable snapshot of an :class:`ImageTransformState`."""

    zoom: float = 1.0
    rotation: int = 0
    position: Point2D = Point2D()

    def to_dict(self) -> dict[str, object]:
        return {
            "zoom": float(self.zoom),
            "rotation": int(self.rotation),
            "position": [float(self.position.x), float(self.position.y)],
        }

    @staticmethod
    def from_dict(data: Mapping[str, object]) -> "TransformData":
        zoom = data.get("zoom", 1.0)
        rotation = data.get("rotation", 0)
        raw_position = data.get("position")
        position = Point2D()
        if isinstance(raw_position, (list, tuple)) and len(raw_position) == 2:
            position = Point2D(float(raw_position[0]), float(raw_position[1]))
        return TransformData(
            zoom=float(zoom) if isinstance(zoom, (int, float)) else 1.0,
            rotation=int(rotation) if isinstance(rotation, (int, float)) else 0,
            position=position,
        )


class ImageTransformState:
    """Mutable transform applied to a preview image.

    Every mutating call returns ``True`` when the state actually changed.
    """

    def __init__(
        self,
        zoom_range: tuple[float, float] = DEFAULT_ZOOM_RANGE,
        config: TransformConfig | None = None,
    ) -> None:
        low, high = zoom_range
        if low <= 0 or high < low:
            raise ValueError(f"Invalid zoom range: {zoom_range}")
        self._zoom_range = (float(low), float(high))
        self._config = config or TransformConfig()
        self.zoom = 1.0
        self.rotation = 0
        self.position = Point2D()

    @property
    def zoom_range(self) -> tuple[float, float]:
        return self._zoom_range

    @property
    def config(self) -> TransformConfig:
        return self._config

    def zoom_by(self, change: float) -> bool:
        """Multiply the zoom by *change*, clamped into :attr:`zoom_range`."""
        if not self._config.enable_zoom:
            return False
        low, high = self._zoom_range
        new_zoom = max(low, min(self.zoom * float(change), high))
        if new_zoom == self.zoom:
            return False
        self.zoom = new_zoom
        return True

    def rotate_by(self, change: float) -> bool:
        """Add *change* degrees, truncated to whole degrees within 0..360."""
        if not self._config.enable_rotation:
            return False
        low, high = ROTATION_RANGE
        new_rotation = max(low, min(int(self.rotation + change), high))
        if new_rotation == self.rotation:
            return False
        self.rotation = new_rotation
        return True

    def pan_by(self, dx: float, dy: float) -> bool:
        if not self._config.enable_pan or (dx == 0 and dy == 0):
            return False
        self.position = self.position.translated(dx, dy)
        return True

    def reset_all(self) -> None:
        self.reset_zoom()
        self.reset_rotation()
        self.reset_position()

    def reset_zoom(self) -> None:
        self.zoom = 1.0

    def reset_rotation(self) -> None:
        self.rotation = 0

    def reset_position(self) -> None:
        self.position = Point2D()

    def is_zoomed(self) -> bool:
        return self.zoom != 1.0

    def can_swipe(self) -> bool:
        """Swiping between images is only allowed at the unzoomed scale."""
        return self._config.enable_swipe and not self.is_zoomed()

    def snapshot(self) -> TransformData:
        return TransformData(zoom=self.zoom, rotation=self.rotation, position=self.position)

    def restore(self, data: TransformData) -> None:
        low, high = self._zoom_range
        self.zoom = max(low, min(float(data.zoom), high))
        self.rotation = max(ROTATION_RANGE[0], min(int(data.rotation), ROTATION_RANGE[1]))
        self.position = Point2D(*data.position)

    def to_matrix(self, center: Point2D | tuple[float, float] = (0.0, 0.0)) -> np.ndarray:
        """Return the 3x3 affine matrix mapping image to view coordinates.

        Zoom and rotation pivot around *center*; the pan offset is applied last.
        """
        cx, cy = center
        theta = math.radians(self.rotation)
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)

        to_origin = np.array(
            [
                [1.0, 0.0, -cx],
                [0.0, 1.0, -cy],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )
        scale = np.diag([self.zoom, self.zoom, 1.0])
        rotate = np.array(
            [
                [cos_t, -sin_t, 0.0],
                [sin_t, cos_t, 0.0],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )
        back = np.array(
            [
                [1.0, 0.0, cx + self.position.x],
                [0.0, 1.0, cy + self.position.y],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )
        return back @ rotate @ scale @ to_origin
