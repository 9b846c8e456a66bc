"""
Abstract base class for crop interaction strategies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..geometry import CanvasSize, CropCorners, Point2D


@dataclass(frozen=True)
class DragBounds:
    """Constraints every drag result must satisfy."""

    canvas: CanvasSize
    minimum_size: float


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class InteractionStrategy(ABC):
    """Base class for crop interaction strategies (pan, resize, etc.)."""

    def __init__(self, bounds: DragBounds) -> None:
        self._bounds = bounds

    @property
    def bounds(self) -> DragBounds:
        return self._bounds

    @abstractmethod
    def on_drag(self, corners: CropCorners, delta: Point2D) -> CropCorners | None:
        """Handle drag movement in display coordinates.

        Parameters
        ----------
        corners:
            The crop rectangle before this drag step.
        delta:
            Movement delta in display coordinates.

        Returns
        -------
        CropCorners | None:
            The new rectangle, or ``None`` when the delta is rejected.
        """

    def on_end(self) -> None:
        """Handle end of interaction (pointer release)."""
