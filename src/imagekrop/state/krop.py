"""Observable crop session wrapping :class:`CropRectEngine`."""

from __future__ import annotations

import logging

import numpy as np
from PySide6.QtCore import QObject, Signal

from ..core.crop.aspect import AspectRatio
from ..core.crop.bitmap import CropShape, ImageFlip, crop_from_display
from ..core.crop.engine import CropConfig, CropRectEngine
from ..core.crop.geometry import CropCorners, Point2D
from ..core.crop.hit_tester import CropHandle
from ..errors import CropError
from ..errors.handler import ErrorHandler, ErrorSeverity

_LOGGER = logging.getLogger(__name__)


class ImageKropState(QObject):
    """Hold the crop rectangle, options and result images of one session.

    ``commit`` is the only operation that touches pixels.  A failed commit is
    reported and leaves every stored image untouched.
    """

    cropChanged = Signal()
    """Emitted when the crop rectangle moves or resizes."""

    optionsChanged = Signal()
    """Emitted when the aspect ratio, lock, shape or flip changes."""

    historyChanged = Signal(int)
    """Emitted with the new history length."""

    cropCommitted = Signal(object)
    """Emitted with the cropped RGBA array after a successful commit."""

    cropFailed = Signal(str)
    """Emitted with a user-facing message when a commit fails."""

    def __init__(
        self,
        image: np.ndarray,
        config: CropConfig | None = None,
        shapes: tuple[CropShape, ...] = tuple(CropShape),
        error_handler: ErrorHandler | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._engine = CropRectEngine(config)
        self._shapes = tuple(shapes)
        self._error_handler = error_handler or ErrorHandler(_LOGGER)
        self._original_image = np.asarray(image)
        self._modified_image: np.ndarray | None = None
        self._images: list[np.ndarray] = []
        self._shape = CropShape.SHARP_CORNER
        self._flip: ImageFlip | None = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def engine(self) -> CropRectEngine:
        return self._engine

    @property
    def corners(self) -> CropCorners:
        return self._engine.corners

    @property
    def shapes(self) -> tuple[CropShape, ...]:
        return self._shapes

    @property
    def aspect_ratio(self) -> AspectRatio:
        return self._engine.aspect_ratio

    @property
    def is_aspect_locked(self) -> bool:
        return self._engine.aspect_locked

    @property
    def shape(self) -> CropShape:
        return self._shape

    @property
    def flip(self) -> ImageFlip | None:
        return self._flip

    @property
    def original_image(self) -> np.ndarray:
        return self._original_image

    @property
    def modified_image(self) -> np.ndarray | None:
        return self._modified_image

    @property
    def images(self) -> list[np.ndarray]:
        return list(self._images)

    # ------------------------------------------------------------------
    # Image history
    # ------------------------------------------------------------------
    def update_original_image(self, image: np.ndarray) -> None:
        self._original_image = np.asarray(image)

    def update_modified_image(self, image: np.ndarray) -> None:
        self._modified_image = image
        self.add_image(image)

    def add_image(self, image: np.ndarray) -> None:
        self._images.append(image)
        self.historyChanged.emit(len(self._images))

    def remove_last_image(self) -> None:
        if not self._images:
            return
        self._images.pop()
        self.historyChanged.emit(len(self._images))

    def clear_images(self) -> None:
        if not self._images:
            return
        self._images.clear()
        self.historyChanged.emit(0)

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------
    def set_canvas_size(self, width: float, height: float) -> None:
        if self._engine.set_canvas_size(width, height):
            self.cropChanged.emit()

    def set_aspect_ratio(self, aspect_ratio: AspectRatio) -> None:
        changed = self._engine.aspect_ratio is not aspect_ratio
        moved = self._engine.set_aspect_ratio(aspect_ratio)
        if changed:
            self.optionsChanged.emit()
        if moved:
            self.cropChanged.emit()

    def set_aspect_locked(self, locked: bool) -> None:
        changed = self._engine.aspect_locked != bool(locked)
        moved = self._engine.set_aspect_locked(locked)
        if changed:
            self.optionsChanged.emit()
        if moved:
            self.cropChanged.emit()

    def set_shape(self, shape: CropShape) -> None:
        if shape not in self._shapes:
            raise ValueError(f"Shape {shape.name} is not offered by this session")
        if shape is self._shape:
            return
        self._shape = shape
        self.optionsChanged.emit()

    def set_flip(self, flip: ImageFlip | None) -> None:
        if flip is self._flip:
            return
        self._flip = flip
        self.optionsChanged.emit()

    # ------------------------------------------------------------------
    # Gestures
    # ------------------------------------------------------------------
    def drag_start(self, x: float, y: float) -> CropHandle | None:
        return self._engine.drag_start(Point2D(x, y))

    def drag(self, dx: float, dy: float) -> bool:
        changed = self._engine.drag(Point2D(dx, dy))
        if changed:
            self.cropChanged.emit()
        return changed

    def drag_end(self) -> None:
        self._engine.drag_end()

    def reset_crop(self) -> None:
        if self._engine.reset():
            self.cropChanged.emit()

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------
    def commit(self) -> np.ndarray | None:
        """Crop the current image with the current rectangle and options.

        Returns the cropped RGBA array, or ``None`` when the crop failed.
        """
        source = self._modified_image if self._modified_image is not None else self._original_image
        try:
            cropped, rect = crop_from_display(
                source,
                self._engine.corners,
                self._engine.canvas_size,
                flip=self._flip,
                shape=self._shape,
            )
        except CropError as exc:
            self._error_handler.handle(
                exc,
                ErrorSeverity.WARNING,
                context={"corners": self._engine.corners.bounds()},
            )
            self.cropFailed.emit(str(exc))
            return None
        _LOGGER.debug("Committed crop %s", rect)
        self.update_modified_image(cropped)
        self.cropCommitted.emit(cropped)
        return cropped
