"""
Hit testing logic for crop handles.

This module contains pure geometric functions for detecting which crop handle
(if any) is under a given point, with no dependencies on input events or UI state.
"""

from __future__ import annotations

import enum

from .geometry import CropCorners, Point2D


class CropHandle(enum.IntEnum):
    """Enumeration of crop box interaction handles."""

    TOP_LEFT = 1
    TOP_RIGHT = 2
    BOTTOM_LEFT = 3
    BOTTOM_RIGHT = 4
    TOP = 5
    BOTTOM = 6
    LEFT = 7
    RIGHT = 8

    @property
    def is_corner(self) -> bool:
        return self in _CORNERS

    @property
    def is_edge(self) -> bool:
        return not self.is_corner

    @property
    def moves_left(self) -> bool:
        return self in (CropHandle.TOP_LEFT, CropHandle.BOTTOM_LEFT, CropHandle.LEFT)

    @property
    def moves_right(self) -> bool:
        return self in (CropHandle.TOP_RIGHT, CropHandle.BOTTOM_RIGHT, CropHandle.RIGHT)

    @property
    def moves_top(self) -> bool:
        return self in (CropHandle.TOP_LEFT, CropHandle.TOP_RIGHT, CropHandle.TOP)

    @property
    def moves_bottom(self) -> bool:
        return self in (CropHandle.BOTTOM_LEFT, CropHandle.BOTTOM_RIGHT, CropHandle.BOTTOM)


_CORNERS = frozenset(
    {CropHandle.TOP_LEFT, CropHandle.TOP_RIGHT, CropHandle.BOTTOM_LEFT, CropHandle.BOTTOM_RIGHT}
)


def handle_position(handle: CropHandle, corners: CropCorners) -> Point2D:
    """Return the display position of *handle* on *corners*."""

    return {
        CropHandle.TOP_LEFT: corners.top_left,
        CropHandle.TOP_RIGHT: corners.top_right,
        CropHandle.BOTTOM_LEFT: corners.bottom_left,
        CropHandle.BOTTOM_RIGHT: corners.bottom_right,
        CropHandle.TOP: corners.top_center,
        CropHandle.BOTTOM: corners.bottom_center,
        CropHandle.LEFT: corners.left_center,
        CropHandle.RIGHT: corners.right_center,
    }[handle]


class HitTester:
    """Pure-function hit tester for crop box handles."""

    # Corners first, then edge midpoints; the first match wins.
    ORDER: tuple[CropHandle, ...] = (
        CropHandle.TOP_LEFT,
        CropHandle.TOP_RIGHT,
        CropHandle.BOTTOM_LEFT,
        CropHandle.BOTTOM_RIGHT,
        CropHandle.TOP,
        CropHandle.BOTTOM,
        CropHandle.LEFT,
        CropHandle.RIGHT,
    )

    def __init__(self, threshold: float = 20.0) -> None:
        """Initialize hit tester.

        Parameters
        ----------
        threshold:
            Radius around each handle that counts as a hit, in display pixels.
        """
        self._threshold = float(threshold)

    @property
    def threshold(self) -> float:
        return self._threshold

    def test(self, point: Point2D, corners: CropCorners) -> CropHandle | None:
        """Determine which crop handle (if any) is under *point*.

        Returns
        -------
        CropHandle | None:
            The handle that was hit, or ``None`` if no handle was hit.
        """
        for handle in self.ORDER:
            if point.is_near(handle_position(handle, corners), self._threshold):
                return handle
        return None

    def is_inside(self, point: Point2D, corners: CropCorners) -> bool:
        return corners.contains(point)
