"""Crop rectangle geometry, interaction and pixel mapping."""

from .aspect import AspectRatio, LockMode
from .bitmap import CropShape, ImageFlip, crop_bitmap, crop_from_display, shape_mask, shape_outline
from .engine import CropConfig, CropRectEngine
from .geometry import CanvasSize, CropCorners, Point2D, initial_crop_corners
from .hit_tester import CropHandle, HitTester
from .mapper import PixelRect, map_to_pixels

__all__ = [
    "AspectRatio",
    "CanvasSize",
    "CropConfig",
    "CropCorners",
    "CropHandle",
    "CropRectEngine",
    "CropShape",
    "HitTester",
    "ImageFlip",
    "LockMode",
    "PixelRect",
    "Point2D",
    "crop_bitmap",
    "crop_from_display",
    "initial_crop_corners",
    "map_to_pixels",
    "shape_mask",
    "shape_outline",
]
