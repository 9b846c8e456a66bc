"""Map a display-space crop rectangle onto bitmap pixels."""

from __future__ import annotations

import logging
import math
from typing import NamedTuple

from ...config import MIN_CROP_DIMENSION_PX
from ...errors import DegenerateCropError, InvalidCropGeometryError
from .geometry import CropCorners

_LOGGER = logging.getLogger(__name__)


class PixelRect(NamedTuple):
    """Integer crop rectangle in bitmap pixel space."""

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    def slices(self) -> tuple[slice, slice]:
        """Return ``(rows, cols)`` slices for indexing an ``(H, W, C)`` array."""
        return (slice(self.top, self.bottom), slice(self.left, self.right))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return int(math.floor(value + 0.5))


def _clamp_int(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


def fit_scale(
    canvas_width: float, canvas_height: float, bitmap_width: int, bitmap_height: int
) -> tuple[float, float, float]:
    """Return ``(scale, offset_x, offset_y)`` of an aspect-fit display.

    The bitmap is scaled uniformly to fit inside the canvas and centred, so
    one of the offsets is the letterbox margin and the other is zero.
    """
    scale = min(canvas_width / bitmap_width, canvas_height / bitmap_height)
    offset_x = (canvas_width - bitmap_width * scale) / 2.0
    offset_y = (canvas_height - bitmap_height * scale) / 2.0
    return scale, offset_x, offset_y


def displayed_image_bounds(
    canvas_width: float, canvas_height: float, bitmap_width: int, bitmap_height: int
) -> CropCorners:
    """Return the display rectangle occupied by the fitted bitmap."""
    scale, offset_x, offset_y = fit_scale(canvas_width, canvas_height, bitmap_width, bitmap_height)
    return CropCorners.from_bounds(
        offset_x,
        offset_y,
        offset_x + bitmap_width * scale,
        offset_y + bitmap_height * scale,
    )


def _as_bounds(rect: CropCorners | tuple[float, float, float, float]) -> tuple[float, float, float, float]:
    if isinstance(rect, CropCorners):
        return rect.bounds()
    left, top, right, bottom = rect
    return (float(left), float(top), float(right), float(bottom))


def map_to_pixels(
    rect: CropCorners | tuple[float, float, float, float],
    canvas_width: float,
    canvas_height: float,
    bitmap_width: int,
    bitmap_height: int,
) -> PixelRect:
    """Translate *rect* (display pixels) into a bitmap pixel rectangle.

    Parameters
    ----------
    rect:
        Crop rectangle as :class:`CropCorners` or ``(left, top, right, bottom)``.
    canvas_width, canvas_height:
        Size of the area the bitmap is displayed in.
    bitmap_width, bitmap_height:
        Size of the bitmap in pixels.

    Raises
    ------
    InvalidCropGeometryError
        If the canvas or bitmap is empty, or *rect* has a negative size.
    DegenerateCropError
        If the resulting crop is one pixel or less in either dimension.
    """
    if canvas_width <= 0 or canvas_height <= 0:
        raise InvalidCropGeometryError(
            f"Canvas size must be positive, got {canvas_width}x{canvas_height}"
        )
    if bitmap_width <= 0 or bitmap_height <= 0:
        raise InvalidCropGeometryError(
            f"Bitmap size must be positive, got {bitmap_width}x{bitmap_height}"
        )
    left, top, right, bottom = _as_bounds(rect)
    if right - left < 0 or bottom - top < 0:
        raise InvalidCropGeometryError(
            f"Crop rectangle has negative size: {right - left}x{bottom - top}"
        )

    bitmap_width = int(bitmap_width)
    bitmap_height = int(bitmap_height)
    scale, offset_x, offset_y = fit_scale(canvas_width, canvas_height, bitmap_width, bitmap_height)

    px_left = _clamp_int(round_half_up((left - offset_x) / scale), 0, bitmap_width)
    px_top = _clamp_int(round_half_up((top - offset_y) / scale), 0, bitmap_height)
    px_right = _clamp_int(round_half_up((right - offset_x) / scale), 0, bitmap_width)
    px_bottom = _clamp_int(round_half_up((bottom - offset_y) / scale), 0, bitmap_height)

    px_left, px_right = min(px_left, px_right), max(px_left, px_right)
    px_top, px_bottom = min(px_top, px_bottom), max(px_top, px_bottom)

    # Lower bound wins when the bitmap has no room left past ``px_left``.
    width = max(MIN_CROP_DIMENSION_PX, min(px_right - px_left, bitmap_width - px_left))
    height = max(MIN_CROP_DIMENSION_PX, min(px_bottom - px_top, bitmap_height - px_top))

    if width <= MIN_CROP_DIMENSION_PX or height <= MIN_CROP_DIMENSION_PX:
        _LOGGER.debug(
            "Degenerate crop %sx%s from display rect %s", width, height, (left, top, right, bottom)
        )
        raise DegenerateCropError(width, height)

    return PixelRect(px_left, px_top, width, height)
