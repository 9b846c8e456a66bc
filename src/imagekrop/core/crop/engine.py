"""
Crop rectangle engine.

This module keeps the four corners of the crop rectangle consistent while the
user drags handles, without any direct UI interaction.  Every mutating method
returns whether the rectangle changed so callers can decide when to repaint.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from ...config import (
    CHANGE_EPSILON,
    DEFAULT_HANDLE_HEIGHT,
    DEFAULT_HANDLE_WIDTH,
    DEFAULT_MINIMUM_CROP_SIZE,
    INITIAL_CROP_FRACTION,
)
from .aspect import AspectRatio, LockMode
from .geometry import CanvasSize, CropCorners, Point2D, initial_crop_corners
from .hit_tester import CropHandle, HitTester
from .strategies import DragBounds, InteractionStrategy, PanStrategy, ResizeStrategy

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CropConfig:
    """Interaction sizes of the crop overlay, in display pixels."""

    handle_width: float = DEFAULT_HANDLE_WIDTH
    handle_height: float = DEFAULT_HANDLE_HEIGHT
    minimum_crop_size: float = DEFAULT_MINIMUM_CROP_SIZE
    initial_fraction: float = INITIAL_CROP_FRACTION

    @property
    def handle_threshold(self) -> float:
        return max(self.handle_width, self.handle_height)


class CropRectEngine:
    """Owns the crop rectangle and applies drag gestures to it."""

    def __init__(
        self,
        config: CropConfig | None = None,
        *,
        aspect_ratio: AspectRatio = AspectRatio.SQUARE,
        aspect_locked: bool = False,
    ) -> None:
        self._config = config or CropConfig()
        self._hit_tester = HitTester(self._config.handle_threshold)
        self._corners = CropCorners()
        self._canvas = CanvasSize()
        self._aspect_ratio = aspect_ratio
        self._aspect_locked = bool(aspect_locked)
        self._active_handle: CropHandle | None = None
        self._is_moving_whole = False
        self._strategy: InteractionStrategy | None = None

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def config(self) -> CropConfig:
        return self._config

    @property
    def corners(self) -> CropCorners:
        return self._corners

    @property
    def top_left(self) -> Point2D:
        return self._corners.top_left

    @property
    def top_right(self) -> Point2D:
        return self._corners.top_right

    @property
    def bottom_left(self) -> Point2D:
        return self._corners.bottom_left

    @property
    def bottom_right(self) -> Point2D:
        return self._corners.bottom_right

    @property
    def canvas_size(self) -> CanvasSize:
        return self._canvas

    @property
    def minimum_crop_size(self) -> float:
        return self._config.minimum_crop_size

    @property
    def aspect_ratio(self) -> AspectRatio:
        return self._aspect_ratio

    @property
    def aspect_locked(self) -> bool:
        return self._aspect_locked

    @property
    def lock_mode(self) -> LockMode:
        if self._aspect_locked:
            return LockMode.locked(self._aspect_ratio)
        return LockMode.free()

    @property
    def active_handle(self) -> CropHandle | None:
        return self._active_handle

    @property
    def is_moving_whole(self) -> bool:
        return self._is_moving_whole

    @property
    def is_dragging(self) -> bool:
        return self._strategy is not None

    @property
    def rect_size(self) -> tuple[float, float]:
        return (self._corners.width, self._corners.height)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------
    def create_snapshot(self) -> CropCorners:
        """Return the current corners."""
        return self._corners

    def restore_snapshot(self, snapshot: CropCorners) -> None:
        """Restore the corners from *snapshot*."""
        self._corners = snapshot

    def has_changed(self, snapshot: CropCorners) -> bool:
        """Return True when the current corners differ from *snapshot*."""
        current = self._corners.bounds()
        return any(abs(a - b) > CHANGE_EPSILON for a, b in zip(snapshot.bounds(), current))

    # ------------------------------------------------------------------
    # Layout changes
    # ------------------------------------------------------------------
    def set_canvas_size(self, width: float, height: float) -> bool:
        """Record the display size and re-centre the rectangle.

        Returns
        -------
        bool:
            True if the corners changed.
        """
        canvas = CanvasSize(float(width), float(height))
        if canvas == self._canvas:
            return False
        self._canvas = canvas
        return self.reset()

    def set_aspect_ratio(self, aspect_ratio: AspectRatio) -> bool:
        """Select *aspect_ratio* and re-centre the rectangle."""
        if aspect_ratio is self._aspect_ratio:
            return False
        self._aspect_ratio = aspect_ratio
        _LOGGER.debug("Aspect ratio set to %s", aspect_ratio.label)
        return self.reset()

    def set_aspect_locked(self, locked: bool) -> bool:
        """Toggle the aspect lock and re-centre the rectangle."""
        locked = bool(locked)
        if locked == self._aspect_locked:
            return False
        self._aspect_locked = locked
        _LOGGER.debug("Aspect lock %s", "enabled" if locked else "disabled")
        return self.reset()

    def reset(self) -> bool:
        """Place the rectangle at the centre of the canvas.

        Any drag in progress is abandoned.
        """
        snapshot = self.create_snapshot()
        self.drag_end()
        self._corners = initial_crop_corners(
            self._canvas,
            self.lock_mode.ratio,
            self._config.minimum_crop_size,
            self._config.initial_fraction,
        )
        return self.has_changed(snapshot)

    # ------------------------------------------------------------------
    # Drag gestures
    # ------------------------------------------------------------------
    def hit_test(self, point: Point2D) -> CropHandle | None:
        return self._hit_tester.test(Point2D(*point), self._corners)

    def drag_start(self, point: Point2D) -> CropHandle | None:
        """Begin a drag at *point*.

        A handle under the point starts a resize, otherwise a point inside the
        rectangle starts moving the whole rectangle.  Anything else leaves the
        engine idle.
        """
        point = Point2D(*point)
        bounds = DragBounds(self._canvas, self._config.minimum_crop_size)
        handle = self._hit_tester.test(point, self._corners)
        self._active_handle = handle
        self._is_moving_whole = handle is None and self._hit_tester.is_inside(point, self._corners)

        if handle is not None:
            self._strategy = ResizeStrategy(handle=handle, bounds=bounds, lock_mode=self.lock_mode)
        elif self._is_moving_whole:
            self._strategy = PanStrategy(bounds)
        else:
            self._strategy = None
        _LOGGER.debug(
            "Drag start at %s: handle=%s moving=%s",
            tuple(point),
            handle.name if handle is not None else None,
            self._is_moving_whole,
        )
        return handle

    def drag(self, delta: Point2D) -> bool:
        """Apply one drag step.

        Returns
        -------
        bool:
            True if the rectangle changed; rejected or idle drags return False.
        """
        if self._strategy is None:
            return False
        result = self._strategy.on_drag(self._corners, Point2D(*delta))
        if result is None or result == self._corners:
            return False
        self._corners = result
        return True

    def drag_end(self) -> None:
        """Finish the current drag."""
        if self._strategy is not None:
            self._strategy.on_end()
        self._strategy = None
        self._active_handle = None
        self._is_moving_whole = False

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def to_dict(self) -> dict[str, object]:
        return {
            "corners": self._corners.as_mapping(),
            "canvas_size": [float(self._canvas.width), float(self._canvas.height)],
            "aspect_ratio": self._aspect_ratio.name,
            "aspect_locked": self._aspect_locked,
        }

    def load_dict(self, data: Mapping[str, object]) -> None:
        """Restore state written by :meth:`to_dict`."""
        self.drag_end()
        raw_canvas = data.get("canvas_size")
        if isinstance(raw_canvas, (list, tuple)) and len(raw_canvas) == 2:
            self._canvas = CanvasSize(float(raw_canvas[0]), float(raw_canvas[1]))
        raw_ratio = data.get("aspect_ratio")
        if isinstance(raw_ratio, str):
            try:
                self._aspect_ratio = AspectRatio.from_key(raw_ratio)
            except ValueError:
                _LOGGER.debug("Ignoring unknown aspect ratio %r", raw_ratio)
        raw_locked = data.get("aspect_locked")
        if isinstance(raw_locked, bool):
            self._aspect_locked = raw_locked
        raw_corners = data.get("corners")
        if isinstance(raw_corners, Mapping):
            corners = CropCorners.from_mapping(raw_corners)
            if corners.is_axis_aligned():
                self._corners = corners
                return
        self._corners = initial_crop_corners(
            self._canvas,
            self.lock_mode.ratio,
            self._config.minimum_crop_size,
            self._config.initial_fraction,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, object], config: CropConfig | None = None) -> "CropRectEngine":
        engine = cls(config)
        engine.load_dict(data)
        return engine
