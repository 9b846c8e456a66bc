"""Tests for cutting, flipping and shaping crop results."""

import math

import numpy as np
import pytest

from imagekrop.core.crop.bitmap import (
    CropShape,
    ImageFlip,
    crop_bitmap,
    crop_from_display,
    shape_mask,
    shape_outline,
)
from imagekrop.core.crop.geometry import CropCorners
from imagekrop.core.crop.mapper import PixelRect
from imagekrop.errors import DegenerateCropError


def test_crop_extracts_rect(gradient_image):
    result = crop_bitmap(gradient_image, PixelRect(10, 5, 20, 15))
    assert result.shape == (15, 20, 4)
    assert result[0, 0, 0] == 10
    assert result[0, 0, 1] == 5
    assert result[-1, -1, 0] == 29
    assert np.all(result[..., 3] == 255)


def test_horizontal_flip_happens_before_crop(gradient_image):
    result = crop_bitmap(gradient_image, PixelRect(10, 5, 20, 15), flip=ImageFlip.HORIZONTAL)
    assert result[0, 0, 0] == 49
    assert result[0, 0, 1] == 5


def test_vertical_flip_happens_before_crop(gradient_image):
    result = crop_bitmap(gradient_image, PixelRect(10, 5, 20, 15), flip=ImageFlip.VERTICAL)
    assert result[0, 0, 0] == 10
    assert result[0, 0, 1] == 34


def test_rgb_source_gets_opaque_alpha(gradient_image):
    rgb = np.ascontiguousarray(gradient_image[..., :3])
    result = crop_bitmap(rgb, PixelRect(0, 0, 8, 8))
    assert result.shape == (8, 8, 4)
    assert np.all(result[..., 3] == 255)


def test_circle_shape_clears_corners(gradient_image):
    result = crop_bitmap(gradient_image, PixelRect(0, 0, 20, 16), shape=CropShape.CIRCLE)
    assert result[0, 0, 3] == 0
    assert result[8, 10, 3] == 255
    # Colour channels are untouched.
    assert result[0, 0, 2] == 128


def test_crop_does_not_modify_source(gradient_image):
    original = gradient_image.copy()
    crop_bitmap(gradient_image, PixelRect(0, 0, 20, 20), flip=ImageFlip.HORIZONTAL, shape=CropShape.STAR)
    assert np.array_equal(gradient_image, original)


def test_sharp_corner_mask_is_opaque():
    assert np.all(shape_mask(CropShape.SHARP_CORNER, 7, 5) == 255)


def test_triangle_mask():
    mask = shape_mask(CropShape.TRIANGLE, 20, 20)
    assert mask.shape == (20, 20)
    assert mask[0, 0] == 0
    assert mask[19, 10] == 255


def test_rounded_corner_mask():
    mask = shape_mask(CropShape.ROUNDED_CORNER, 100, 100)
    assert mask[0, 0] == 0
    assert mask[50, 50] == 255


def test_odd_polygon_points_up():
    vertices = shape_outline(CropShape.PENTAGON, 100, 100)
    assert len(vertices) == 5
    assert vertices[0] == pytest.approx((50.0, 0.0))


def test_even_polygon_starts_on_the_right():
    vertices = shape_outline(CropShape.HEXAGON, 100, 60)
    assert len(vertices) == 6
    assert vertices[0] == pytest.approx((80.0, 30.0))


def test_star_alternates_radii():
    vertices = shape_outline(CropShape.STAR, 100, 100)
    assert len(vertices) == 10
    radii = [math.hypot(x - 50, y - 50) for x, y in vertices]
    assert radii[0] == pytest.approx(50.0)
    assert radii[1] == pytest.approx(20.0)
    assert vertices[0] == pytest.approx((50.0, 0.0))


def test_cut_corner_uses_smaller_dimension():
    vertices = shape_outline(CropShape.CUT_CORNER, 100, 200)
    assert vertices[0] == pytest.approx((5.0, 0.0))
    assert vertices[2] == pytest.approx((100.0, 5.0))


def test_curved_shapes_have_no_outline():
    assert shape_outline(CropShape.CIRCLE, 10, 10) is None
    assert shape_outline(CropShape.ROUNDED_CORNER, 10, 10) is None


def test_crop_from_display(gradient_image):
    result, rect = crop_from_display(gradient_image, CropCorners.from_bounds(10, 5, 30, 20), (60, 40))
    assert rect == PixelRect(10, 5, 20, 15)
    assert result.shape == (15, 20, 4)


def test_crop_from_display_propagates_degenerate(gradient_image):
    with pytest.raises(DegenerateCropError):
        crop_from_display(gradient_image, CropCorners.from_bounds(10, 5, 10.2, 20), (60, 40))


def test_rounded_corner_radii_follow_each_side():
    mask = shape_mask(CropShape.ROUNDED_CORNER, 400, 100)
    # Horizontal radius is 20 px, vertical radius 5 px.
    assert mask[0, 0] == 0
    assert mask[0, 8] == 0
    assert mask[0, 391] == 0
    assert mask[99, 8] == 0
    assert mask[0, 200] == 255
    assert mask[50, 0] == 255
    assert mask[50, 399] == 255
