"""Pixel extraction for a committed crop: flip, cut out, and mask to a shape."""

from __future__ import annotations

import enum
import logging
import math

import numpy as np
from PIL import Image, ImageDraw

from ...config import SHAPE_RADIUS_FRACTION, STAR_INNER_RADIUS_DIVISOR
from .geometry import CanvasSize, CropCorners
from .mapper import PixelRect, map_to_pixels

_LOGGER = logging.getLogger(__name__)


class ImageFlip(enum.Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class CropShape(enum.Enum):
    """Outline applied to the cropped pixels."""

    STAR = "star"
    CIRCLE = "circle"
    CUT_CORNER = "cut_corner"
    TRIANGLE = "triangle"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    HEPTAGON = "heptagon"
    OCTAGON = "octagon"
    NONAGON = "nonagon"
    DECAGON = "decagon"
    SHARP_CORNER = "sharp_corner"
    ROUNDED_CORNER = "rounded_corner"

    @property
    def is_rectangular(self) -> bool:
        return self is CropShape.SHARP_CORNER


_POLYGON_SIDES: dict[CropShape, int] = {
    CropShape.PENTAGON: 5,
    CropShape.HEXAGON: 6,
    CropShape.HEPTAGON: 7,
    CropShape.OCTAGON: 8,
    CropShape.NONAGON: 9,
    CropShape.DECAGON: 10,
}

Vertex = tuple[float, float]


def _regular_polygon(width: float, height: float, sides: int) -> list[Vertex]:
    # Odd polygons point up, even ones start on the right-hand vertex.
    radius = min(width, height) / 2
    center_x, center_y = width / 2, height / 2
    step = 2 * math.pi / sides
    start = -math.pi / 2 if sides % 2 else 0.0
    return [
        (center_x + radius * math.cos(start + i * step), center_y + radius * math.sin(start + i * step))
        for i in range(sides)
    ]


def _star(width: float, height: float) -> list[Vertex]:
    center_x, center_y = width / 2, height / 2
    outer = min(width, height) / 2
    inner = outer / STAR_INNER_RADIUS_DIVISOR
    points = 10
    vertices = []
    for i in range(points):
        radius = outer if i % 2 == 0 else inner
        angle = math.radians(i * 360.0 / points - 90)
        vertices.append((center_x + radius * math.cos(angle), center_y + radius * math.sin(angle)))
    return vertices


def shape_outline(
    shape: CropShape,
    width: float,
    height: float,
    radius_fraction: float = SHAPE_RADIUS_FRACTION,
) -> list[Vertex] | None:
    """Return the polygon of *shape* inside a ``width`` x ``height`` box.

    ``None`` is returned for the curved shapes (circle and rounded corners).
    """

    if shape in _POLYGON_SIDES:
        return _regular_polygon(width, height, _POLYGON_SIDES[shape])
    if shape is CropShape.STAR:
        return _star(width, height)
    if shape is CropShape.TRIANGLE:
        return [(width / 2, 0.0), (width, height), (0.0, height)]
    if shape is CropShape.CUT_CORNER:
        cut = min(width, height) * radius_fraction
        return [
            (cut, 0.0),
            (width - cut, 0.0),
            (width, cut),
            (width, height - cut),
            (width - cut, height),
            (cut, height),
            (0.0, height - cut),
            (0.0, cut),
        ]
    if shape is CropShape.SHARP_CORNER:
        return [(0.0, 0.0), (width, 0.0), (width, height), (0.0, height)]
    return None


def _draw_elliptical_corners(
    draw: ImageDraw.ImageDraw, width: int, height: int, radius_fraction: float
) -> None:
    # Elliptical corners with radii proportional to each side.
    rx = width * radius_fraction
    ry = height * radius_fraction
    right = width - 1
    bottom = height - 1
    draw.rectangle((rx, 0, right - rx, bottom), fill=255)
    draw.rectangle((0, ry, right, bottom - ry), fill=255)
    for x0, y0 in ((0, 0), (right - 2 * rx, 0), (0, bottom - 2 * ry), (right - 2 * rx, bottom - 2 * ry)):
        draw.ellipse((x0, y0, x0 + 2 * rx, y0 + 2 * ry), fill=255)


def shape_mask(
    shape: CropShape,
    width: int,
    height: int,
    radius_fraction: float = SHAPE_RADIUS_FRACTION,
) -> np.ndarray:
    """Rasterise *shape* into a ``(height, width)`` uint8 alpha mask."""

    if shape is CropShape.SHARP_CORNER:
        return np.full((height, width), 255, dtype=np.uint8)

    mask = Image.new("L", (width, height), 0)
    draw = ImageDraw.Draw(mask)
    if shape is CropShape.CIRCLE:
        draw.ellipse((0, 0, width - 1, height - 1), fill=255)
    elif shape is CropShape.ROUNDED_CORNER:
        _draw_elliptical_corners(draw, width, height, radius_fraction)
    else:
        outline = shape_outline(shape, width, height, radius_fraction)
        draw.polygon(outline, fill=255)
    return np.asarray(mask, dtype=np.uint8)


def flip_pixels(pixels: np.ndarray, flip: ImageFlip | None) -> np.ndarray:
    if flip is ImageFlip.HORIZONTAL:
        return pixels[:, ::-1]
    if flip is ImageFlip.VERTICAL:
        return pixels[::-1]
    return pixels


def _to_rgba(pixels: np.ndarray) -> np.ndarray:
    if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
        raise ValueError(f"Expected an (H, W, 3) or (H, W, 4) array, got {pixels.shape}")
    if pixels.shape[2] == 4:
        return np.array(pixels, dtype=np.uint8)
    alpha = np.full(pixels.shape[:2] + (1,), 255, dtype=np.uint8)
    return np.concatenate([pixels.astype(np.uint8), alpha], axis=2)


def crop_bitmap(
    pixels: np.ndarray,
    pixel_rect: PixelRect,
    flip: ImageFlip | None = None,
    shape: CropShape = CropShape.SHARP_CORNER,
) -> np.ndarray:
    """Cut *pixel_rect* out of *pixels* and return it as RGBA.

    The flip applies to the whole source before cutting, so *pixel_rect* is
    interpreted in flipped coordinates.  Non-rectangular shapes clear the
    alpha channel outside the outline.
    """

    source = flip_pixels(np.asarray(pixels), flip)
    rows, cols = pixel_rect.slices()
    cropped = _to_rgba(source[rows, cols])
    if not shape.is_rectangular:
        height, width = cropped.shape[:2]
        mask = shape_mask(shape, width, height)
        alpha = cropped[..., 3].astype(np.uint16) * mask // 255
        cropped[..., 3] = alpha.astype(np.uint8)
    return cropped


def crop_from_display(
    pixels: np.ndarray,
    corners: CropCorners,
    canvas_size: CanvasSize | tuple[float, float],
    flip: ImageFlip | None = None,
    shape: CropShape = CropShape.SHARP_CORNER,
) -> tuple[np.ndarray, PixelRect]:
    """Map *corners* to bitmap pixels and crop them out of *pixels*.

    Raises :class:`~imagekrop.errors.DegenerateCropError` when the mapped
    rectangle is too small.
    """

    canvas_width, canvas_height = canvas_size
    bitmap_height, bitmap_width = np.asarray(pixels).shape[:2]
    rect = map_to_pixels(corners, canvas_width, canvas_height, bitmap_width, bitmap_height)
    _LOGGER.debug("Cropping %s from %sx%s bitmap", rect, bitmap_width, bitmap_height)
    return crop_bitmap(pixels, rect, flip=flip, shape=shape), rect
