"""Tests for compiling slider values into a colour matrix."""

import pytest

from imagekrop.core.adjustments import (
    ADJUSTMENT_ORDER,
    AdjustmentConfig,
    AdjustmentParams,
    adjustment_matrices,
    brightness_matrix,
    clamp_adjustment,
    compile_adjustments,
    contrast_matrix,
    exposure_matrix,
    highlights_matrix,
    saturation_matrix,
    shadows_matrix,
    tint_matrix,
    warmth_matrix,
)
from imagekrop.core.color_matrix import compose
from imagekrop.errors import AdjustmentRangeError, UnknownAdjustmentError


def test_defaults_compile_to_identity():
    assert compile_adjustments(AdjustmentParams()).is_identity()


def test_default_params_skip_highlights_and_shadows():
    assert len(adjustment_matrices(AdjustmentParams())) == len(ADJUSTMENT_ORDER) - 2
    params = AdjustmentParams(highlights=0.5, shadows=-0.5)
    assert len(adjustment_matrices(params)) == len(ADJUSTMENT_ORDER)


def test_composition_is_not_commutative():
    brightness = brightness_matrix(0.5)
    contrast = contrast_matrix(1.5)
    forward = compose([brightness, contrast])
    reverse = compose([contrast, brightness])
    assert forward != reverse
    assert forward[0, 4] == pytest.approx(-13.75)
    assert reverse[0, 4] == pytest.approx(11.25)


def test_exposure_zero_is_identity():
    assert exposure_matrix(0.0).is_identity()


def test_exposure_one_doubles_scale():
    matrix = exposure_matrix(1.0)
    assert matrix[0, 0] == 2.0
    assert matrix[1, 1] == 2.0
    assert matrix[2, 2] == 2.0
    assert matrix[3, 3] == 1.0


def test_contrast_one_is_identity():
    matrix = contrast_matrix(1.0)
    assert matrix.is_identity()
    assert matrix[0, 4] == 0.0


def test_brightness_offsets_channels():
    matrix = brightness_matrix(-0.25)
    assert [matrix[row, 4] for row in range(3)] == [-25.0, -25.0, -25.0]
    assert matrix[3, 4] == 0.0


def test_highlights_and_shadows_share_uniform_shift():
    assert highlights_matrix(0.5) == shadows_matrix(0.5)
    assert highlights_matrix(0.5)[0, 4] == pytest.approx(10.0)


def test_compile_does_not_clamp_by_default():
    params = AdjustmentParams(brightness=2.0)
    assert compile_adjustments(params)[0, 4] == pytest.approx(200.0)


def test_strict_compile_rejects_out_of_range_values():
    params = AdjustmentParams(contrast=3.0)
    with pytest.raises(AdjustmentRangeError) as excinfo:
        compile_adjustments(params, strict=True)
    assert excinfo.value.name == "contrast"
    assert excinfo.value.value == 3.0
    assert excinfo.value.range == (0.0, 2.0)


def test_clamp_adjustment_uses_documented_ranges():
    assert clamp_adjustment("saturation", 5.0) == 2.0
    assert clamp_adjustment("tint", -4.0) == -1.0
    assert clamp_adjustment("exposure", 0.25) == 0.25


def test_unknown_adjustment_name():
    with pytest.raises(UnknownAdjustmentError):
        AdjustmentParams().get("vibrance")
    with pytest.raises(UnknownAdjustmentError):
        clamp_adjustment("vibrance", 0.0)


def test_params_dict_round_trip_ignores_unknown_keys():
    params = AdjustmentParams(brightness=0.3, saturation=1.2)
    restored = AdjustmentParams.from_dict({**params.to_dict(), "unknown": 5})
    assert restored == params
    assert AdjustmentParams.from_dict({}) == AdjustmentParams()


def test_reset_restores_defaults():
    params = AdjustmentParams(warmth=0.7, contrast=0.2)
    params.reset()
    assert params.is_identity()


def test_config_lists_enabled_adjustments():
    config = AdjustmentConfig(enable_tint=False, enable_shadows=False)
    assert not config.is_enabled("tint")
    assert "tint" not in config.enabled_names()
    assert config.enabled_names()[0] == "brightness"


def test_compile_applies_sliders_in_fixed_order():
    params = AdjustmentParams(
        brightness=0.1,
        exposure=0.3,
        contrast=1.4,
        saturation=0.6,
        warmth=0.5,
        tint=-0.4,
        highlights=0.2,
        shadows=-0.7,
    )
    expected = compose([
        brightness_matrix(0.1),
        exposure_matrix(0.3),
        contrast_matrix(1.4),
        saturation_matrix(0.6),
        warmth_matrix(0.5),
        tint_matrix(-0.4),
        highlights_matrix(0.2),
        shadows_matrix(-0.7),
    ])
    assert compile_adjustments(params).values == pytest.approx(expected.values)
