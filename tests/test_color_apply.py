"""Tests for applying colour matrices to pixel arrays."""

import numpy as np
import pytest

from imagekrop.core.adjustments import AdjustmentParams
from imagekrop.core.color_apply import apply_adjustments, apply_color_matrix, apply_preset
from imagekrop.core.color_matrix import IDENTITY, ColorMatrix


def test_identity_returns_equal_copy(gradient_image):
    result = apply_color_matrix(gradient_image, IDENTITY)
    assert result.dtype == np.uint8
    assert np.array_equal(result, gradient_image)
    assert result is not gradient_image


def test_rgb_input_keeps_three_channels():
    pixels = np.full((2, 3, 3), 100, dtype=np.uint8)
    result = apply_color_matrix(pixels, ColorMatrix.offset(10.0, 0.0, -10.0))
    assert result.shape == (2, 3, 3)
    assert result[0, 0].tolist() == [110, 100, 90]


def test_values_are_clipped():
    pixels = np.full((1, 1, 4), 200, dtype=np.uint8)
    result = apply_color_matrix(pixels, ColorMatrix.scale(2.0, 0.5, -1.0))
    assert result[0, 0].tolist() == [255, 100, 0, 200]


def test_offset_uses_channel_units():
    pixels = np.zeros((1, 1, 4), dtype=np.uint8)
    result = apply_adjustments(pixels, AdjustmentParams(brightness=0.5))
    assert result[0, 0, :3].tolist() == [50, 50, 50]


def test_invert_preset():
    pixels = np.array([[[0, 128, 255, 255]]], dtype=np.uint8)
    result = apply_preset(pixels, "invert")
    assert result[0, 0].tolist() == [255, 127, 0, 255]


def test_rejects_bad_shapes():
    with pytest.raises(ValueError):
        apply_color_matrix(np.zeros((4, 4), dtype=np.uint8), IDENTITY)
    with pytest.raises(ValueError):
        apply_color_matrix(np.zeros((4, 4, 2), dtype=np.uint8), IDENTITY)
