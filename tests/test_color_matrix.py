"""Tests for the ColorMatrix value type."""

import numpy as np
import pytest

from imagekrop.core.color_matrix import IDENTITY, ColorMatrix, compose


def test_identity_has_unit_diagonal():
    assert IDENTITY.is_identity()
    assert IDENTITY[0, 0] == 1.0
    assert IDENTITY[3, 3] == 1.0
    assert IDENTITY[0, 4] == 0.0


def test_requires_twenty_values():
    with pytest.raises(ValueError):
        ColorMatrix((1.0, 2.0))


def test_compose_applies_other_first():
    offset = ColorMatrix.offset(10.0, 20.0, 30.0)
    scale = ColorMatrix.scale(2.0, 2.0, 2.0)

    # Offset passes through the scale of the left-hand matrix.
    result = scale.compose(offset)
    assert result[0, 0] == pytest.approx(2.0)
    assert result[0, 4] == pytest.approx(20.0)
    assert result[1, 4] == pytest.approx(40.0)
    assert result[2, 4] == pytest.approx(60.0)

    reverse = offset.compose(scale)
    assert reverse[0, 4] == pytest.approx(10.0)


def test_matmul_matches_compose():
    a = ColorMatrix.saturation(0.3)
    b = ColorMatrix.offset(5.0, -5.0, 0.0)
    assert (a @ b) == a.compose(b)


def test_compose_of_empty_sequence_is_identity():
    assert compose([]) == IDENTITY


def test_compose_folds_left():
    a = ColorMatrix.scale(2.0, 1.0, 1.0)
    b = ColorMatrix.offset(1.0, 0.0, 0.0)
    c = ColorMatrix.scale(3.0, 1.0, 1.0)
    assert compose([a, b, c]) == a.compose(b).compose(c)


def test_saturation_zero_collapses_to_luma():
    matrix = ColorMatrix.saturation(0.0)
    for row in range(3):
        assert matrix[row, 0] == pytest.approx(0.213)
        assert matrix[row, 1] == pytest.approx(0.715)
        assert matrix[row, 2] == pytest.approx(0.072)


def test_saturation_one_is_identity():
    assert ColorMatrix.saturation(1.0).is_identity(tolerance=1e-12)


def test_array_round_trip():
    matrix = ColorMatrix.saturation(1.4).compose(ColorMatrix.offset(3.0, 2.0, 1.0))
    array = matrix.as_array()
    assert array.shape == (4, 5)
    assert array.dtype == np.float32
    restored = ColorMatrix.from_array(array.astype(np.float64))
    assert list(restored.values) == pytest.approx(list(matrix.values))


def test_with_value_replaces_single_coefficient():
    matrix = IDENTITY.with_value(2, 4, 12.5)
    assert matrix[2, 4] == 12.5
    assert IDENTITY[2, 4] == 0.0
    with pytest.raises(IndexError):
        IDENTITY.with_value(4, 0, 1.0)


def test_from_rows_validates_shape():
    with pytest.raises(ValueError):
        ColorMatrix.from_rows([[1, 0, 0, 0, 0]])
