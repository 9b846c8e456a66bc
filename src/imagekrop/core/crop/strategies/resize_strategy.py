"""
Resize strategy for crop box edge/corner dragging.
"""

from __future__ import annotations

import logging

from ..aspect import LockMode
from ..geometry import CropCorners, Point2D
from ..hit_tester import CropHandle
from .abstract import DragBounds, InteractionStrategy, clamp

_LOGGER = logging.getLogger(__name__)


class ResizeStrategy(InteractionStrategy):
    """Strategy for resizing the crop box via edge/corner dragging.

    Free resizing rejects any delta that would shrink the box below the
    minimum size.  Locked resizing projects the candidate rectangle back onto
    the aspect ratio before checking the minimum size.
    """

    def __init__(
        self,
        *,
        handle: CropHandle,
        bounds: DragBounds,
        lock_mode: LockMode = LockMode.free(),
    ) -> None:
        """Initialize resize strategy.

        Parameters
        ----------
        handle:
            The crop handle being dragged.
        bounds:
            Canvas size and minimum crop size.
        lock_mode:
            Free resizing or resizing locked to an aspect ratio.
        """
        super().__init__(bounds)
        self._handle = handle
        self._lock_mode = lock_mode

    @property
    def handle(self) -> CropHandle:
        return self._handle

    @property
    def lock_mode(self) -> LockMode:
        return self._lock_mode

    def on_drag(self, corners: CropCorners, delta: Point2D) -> CropCorners | None:
        """Handle resize drag movement."""
        if self._lock_mode.ratio is None:
            result = self._resize_free(corners, delta)
        elif self._handle.is_corner:
            result = self._resize_locked_corner(corners, delta, self._lock_mode.ratio)
        else:
            result = self._resize_locked_edge(corners, delta, self._lock_mode.ratio)
        if result is None:
            _LOGGER.debug("Rejected %s drag by %s", self._handle.name, tuple(delta))
        return result

    # ------------------------------------------------------------------
    # Free resizing
    # ------------------------------------------------------------------
    def _resize_free(self, corners: CropCorners, delta: Point2D) -> CropCorners | None:
        handle = self._handle
        canvas = self._bounds.canvas
        min_size = self._bounds.minimum_size
        left, top, right, bottom = corners.bounds()

        # The whole delta is rejected when either moving axis would end up
        # below the minimum size.
        if handle.moves_left and right - (left + delta.x) < min_size:
            return None
        if handle.moves_right and (right + delta.x) - left < min_size:
            return None
        if handle.moves_top and bottom - (top + delta.y) < min_size:
            return None
        if handle.moves_bottom and (bottom + delta.y) - top < min_size:
            return None

        if handle.moves_left:
            if right - min_size < 0.0:
                return None
            left = clamp(left + delta.x, 0.0, right - min_size)
        if handle.moves_right:
            if left + min_size > canvas.width:
                return None
            right = clamp(right + delta.x, left + min_size, canvas.width)
        if handle.moves_top:
            if bottom - min_size < 0.0:
                return None
            top = clamp(top + delta.y, 0.0, bottom - min_size)
        if handle.moves_bottom:
            if top + min_size > canvas.height:
                return None
            bottom = clamp(bottom + delta.y, top + min_size, canvas.height)

        return CropCorners.from_bounds(left, top, right, bottom)

    # ------------------------------------------------------------------
    # Aspect-locked resizing
    # ------------------------------------------------------------------
    def _resize_locked_corner(
        self, corners: CropCorners, delta: Point2D, ratio: float
    ) -> CropCorners | None:
        handle = self._handle
        canvas = self._bounds.canvas
        min_size = self._bounds.minimum_size
        left, top, right, bottom = corners.bounds()

        # The opposite corner stays where it is.
        anchor_x = left if handle.moves_right else right
        anchor_y = top if handle.moves_bottom else bottom

        if handle.moves_right:
            width = (right + delta.x) - anchor_x
            max_width = canvas.width - anchor_x
        else:
            width = anchor_x - (left + delta.x)
            max_width = anchor_x
        if handle.moves_bottom:
            height = (bottom + delta.y) - anchor_y
            max_height = canvas.height - anchor_y
        else:
            height = anchor_y - (top + delta.y)
            max_height = anchor_y

        width = min(width, max_width)
        height = min(height, max_height)

        # Shrink the dimension that overshoots the ratio.
        if width / ratio > height:
            width = height * ratio
        else:
            height = width / ratio

        if width < min_size or height < min_size:
            return None

        if handle.moves_right:
            left, right = anchor_x, anchor_x + width
        else:
            left, right = anchor_x - width, anchor_x
        if handle.moves_bottom:
            top, bottom = anchor_y, anchor_y + height
        else:
            top, bottom = anchor_y - height, anchor_y
        return CropCorners.from_bounds(left, top, right, bottom)

    def _resize_locked_edge(
        self, corners: CropCorners, delta: Point2D, ratio: float
    ) -> CropCorners | None:
        handle = self._handle
        canvas = self._bounds.canvas
        min_size = self._bounds.minimum_size
        left, top, right, bottom = corners.bounds()
        center = corners.center

        if handle.moves_left or handle.moves_right:
            if handle.moves_left:
                left = clamp(left + delta.x, 0.0, right)
            else:
                right = clamp(right + delta.x, left, canvas.width)
            width = right - left
            height = width / ratio
            top = center.y - height / 2
            bottom = center.y + height / 2
            if top < 0.0 or bottom > canvas.height:
                return None
        else:
            if handle.moves_top:
                top = clamp(top + delta.y, 0.0, bottom)
            else:
                bottom = clamp(bottom + delta.y, top, canvas.height)
            height = bottom - top
            width = height * ratio
            left = center.x - width / 2
            right = center.x + width / 2
            if left < 0.0 or right > canvas.width:
                return None

        if width < min_size or height < min_size:
            return None
        return CropCorners.from_bounds(left, top, right, bottom)
