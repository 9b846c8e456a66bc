"""Value types describing a crop rectangle in display coordinates."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import NamedTuple

from ...config import INITIAL_CROP_FRACTION


class Point2D(NamedTuple):
    """A point (or delta) in display pixels."""

    x: float = 0.0
    y: float = 0.0

    def translated(self, dx: float, dy: float) -> "Point2D":
        return Point2D(self.x + dx, self.y + dy)

    def distance_to(self, other: "Point2D") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_near(self, other: "Point2D", threshold: float) -> bool:
        """Return ``True`` when *other* lies within *threshold* of this point."""

        return self.distance_to(other) <= threshold


class CanvasSize(NamedTuple):
    """Size of the area the image is displayed in."""

    width: float = 0.0
    height: float = 0.0

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class CropCorners:
    """The four corners of an axis-aligned crop rectangle."""

    top_left: Point2D = Point2D()
    top_right: Point2D = Point2D()
    bottom_left: Point2D = Point2D()
    bottom_right: Point2D = Point2D()

    @classmethod
    def from_bounds(cls, left: float, top: float, right: float, bottom: float) -> "CropCorners":
        return cls(
            top_left=Point2D(left, top),
            top_right=Point2D(right, top),
            bottom_left=Point2D(left, bottom),
            bottom_right=Point2D(right, bottom),
        )

    @property
    def left(self) -> float:
        return self.top_left.x

    @property
    def top(self) -> float:
        return self.top_left.y

    @property
    def right(self) -> float:
        return self.top_right.x

    @property
    def bottom(self) -> float:
        return self.bottom_left.y

    @property
    def width(self) -> float:
        return self.top_right.x - self.top_left.x

    @property
    def height(self) -> float:
        return self.bottom_left.y - self.top_left.y

    @property
    def center(self) -> Point2D:
        return Point2D((self.left + self.right) * 0.5, (self.top + self.bottom) * 0.5)

    @property
    def top_center(self) -> Point2D:
        return Point2D((self.top_left.x + self.top_right.x) / 2, self.top_left.y)

    @property
    def bottom_center(self) -> Point2D:
        return Point2D((self.bottom_left.x + self.bottom_right.x) / 2, self.bottom_left.y)

    @property
    def left_center(self) -> Point2D:
        return Point2D(self.top_left.x, (self.top_left.y + self.bottom_left.y) / 2)

    @property
    def right_center(self) -> Point2D:
        return Point2D(self.top_right.x, (self.top_right.y + self.bottom_right.y) / 2)

    def bounds(self) -> tuple[float, float, float, float]:
        """Return ``(left, top, right, bottom)``."""

        return (self.left, self.top, self.right, self.bottom)

    def is_axis_aligned(self) -> bool:
        return (
            self.top_right.y == self.top_left.y
            and self.bottom_left.x == self.top_left.x
            and self.bottom_right.x == self.top_right.x
            and self.bottom_right.y == self.bottom_left.y
        )

    def contains(self, point: Point2D) -> bool:
        """Half-open containment test: the right and bottom edges are excluded."""

        return self.left <= point.x < self.right and self.top <= point.y < self.bottom

    def translated(self, dx: float, dy: float) -> "CropCorners":
        return CropCorners.from_bounds(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)

    def as_mapping(self) -> dict[str, list[float]]:
        return {
            "top_left": [float(self.top_left.x), float(self.top_left.y)],
            "top_right": [float(self.top_right.x), float(self.top_right.y)],
            "bottom_left": [float(self.bottom_left.x), float(self.bottom_left.y)],
            "bottom_right": [float(self.bottom_right.x), float(self.bottom_right.y)],
        }

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> "CropCorners":
        def _point(key: str) -> Point2D:
            raw = values.get(key)
            if isinstance(raw, (list, tuple)) and len(raw) == 2:
                return Point2D(float(raw[0]), float(raw[1]))
            return Point2D()

        return cls(
            top_left=_point("top_left"),
            top_right=_point("top_right"),
            bottom_left=_point("bottom_left"),
            bottom_right=_point("bottom_right"),
        )


def initial_crop_corners(
    canvas: CanvasSize,
    ratio: float | None,
    minimum_size: float,
    fraction: float = INITIAL_CROP_FRACTION,
) -> CropCorners:
    """Return a centred crop rectangle covering *fraction* of the canvas.

    With *ratio* ``None`` the rectangle follows the canvas aspect ratio,
    otherwise it is the largest ``ratio`` rectangle fitting inside the
    available area.  The result is grown to honour *minimum_size* and then
    shrunk (keeping the ratio) to fit inside the canvas.
    """

    canvas_width = float(canvas.width)
    canvas_height = float(canvas.height)
    if canvas_width <= 0 or canvas_height <= 0:
        return CropCorners()

    available_width = canvas_width * fraction
    available_height = canvas_height * fraction
    desired_ratio = ratio if ratio is not None and ratio > 0 else canvas_width / canvas_height

    if available_width / desired_ratio <= available_height:
        width = available_width
        height = width / desired_ratio
    else:
        height = available_height
        width = height * desired_ratio

    # Grow to the minimum size without breaking the ratio.
    if width < minimum_size or height < minimum_size:
        grow = max(minimum_size / width, minimum_size / height)
        width *= grow
        height *= grow

    # Shrink back inside the canvas, the canvas always wins over the minimum.
    if width > canvas_width or height > canvas_height:
        shrink = min(canvas_width / width, canvas_height / height)
        width *= shrink
        height *= shrink

    center_x = canvas_width / 2
    center_y = canvas_height / 2
    return CropCorners.from_bounds(
        center_x - width / 2,
        center_y - height / 2,
        center_x + width / 2,
        center_y + height / 2,
    )
