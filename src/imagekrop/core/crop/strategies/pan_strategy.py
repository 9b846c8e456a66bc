"""
Pan/move strategy for crop box interaction.
"""

from __future__ import annotations

from ..geometry import CropCorners, Point2D
from .abstract import InteractionStrategy, clamp


class PanStrategy(InteractionStrategy):
    """Strategy for moving the entire crop box without resizing it."""

    def on_drag(self, corners: CropCorners, delta: Point2D) -> CropCorners | None:
        """Translate *corners* by *delta*, keeping them inside the canvas."""
        canvas = self._bounds.canvas
        width = corners.width
        height = corners.height

        left = clamp(corners.left + delta.x, 0.0, canvas.width - width)
        top = clamp(corners.top + delta.y, 0.0, canvas.height - height)
        right = left + width
        bottom = top + height
        return CropCorners.from_bounds(left, top, right, bottom)
