"""Tests for the crop HitTester module."""

import pytest

from imagekrop.core.crop.geometry import CropCorners, Point2D
from imagekrop.core.crop.hit_tester import CropHandle, HitTester, handle_position


@pytest.fixture
def hit_tester():
    """Create a HitTester with the default handle radius."""
    return HitTester(threshold=20.0)


@pytest.fixture
def crop_corners():
    """Standard crop box corners for testing."""
    return CropCorners.from_bounds(100, 100, 300, 300)


@pytest.mark.parametrize(
    ("point", "expected"),
    [
        (Point2D(105, 105), CropHandle.TOP_LEFT),
        (Point2D(295, 105), CropHandle.TOP_RIGHT),
        (Point2D(105, 295), CropHandle.BOTTOM_LEFT),
        (Point2D(295, 295), CropHandle.BOTTOM_RIGHT),
        (Point2D(200, 110), CropHandle.TOP),
        (Point2D(200, 290), CropHandle.BOTTOM),
        (Point2D(110, 200), CropHandle.LEFT),
        (Point2D(290, 200), CropHandle.RIGHT),
    ],
)
def test_hits_each_handle(hit_tester, crop_corners, point, expected):
    assert hit_tester.test(point, crop_corners) == expected


def test_distance_equal_to_threshold_is_a_hit(hit_tester, crop_corners):
    assert hit_tester.test(Point2D(120, 100), crop_corners) == CropHandle.TOP_LEFT


def test_outside_threshold_misses(hit_tester, crop_corners):
    assert hit_tester.test(Point2D(150, 150), crop_corners) is None
    assert hit_tester.test(Point2D(50, 50), crop_corners) is None


def test_first_handle_in_order_wins(hit_tester):
    # The top midpoint is closer, but corners are tested first.
    small = CropCorners.from_bounds(0, 0, 30, 30)
    assert hit_tester.test(Point2D(15, 0), small) == CropHandle.TOP_LEFT


def test_inside_uses_half_open_bounds(hit_tester, crop_corners):
    assert hit_tester.is_inside(Point2D(100, 100), crop_corners)
    assert hit_tester.is_inside(Point2D(299.9, 299.9), crop_corners)
    assert not hit_tester.is_inside(Point2D(300, 200), crop_corners)
    assert not hit_tester.is_inside(Point2D(200, 300), crop_corners)


def test_handle_positions(crop_corners):
    assert handle_position(CropHandle.TOP, crop_corners) == Point2D(200, 100)
    assert handle_position(CropHandle.RIGHT, crop_corners) == Point2D(300, 200)
    assert handle_position(CropHandle.BOTTOM_LEFT, crop_corners) == Point2D(100, 300)


def test_handle_axes():
    assert CropHandle.TOP_LEFT.is_corner
    assert CropHandle.LEFT.is_edge
    assert CropHandle.BOTTOM_RIGHT.moves_right and CropHandle.BOTTOM_RIGHT.moves_bottom
    assert not CropHandle.TOP.moves_left and not CropHandle.TOP.moves_right
