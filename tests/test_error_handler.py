"""Tests for the error taxonomy and ErrorHandler."""

import logging

import pytest

from imagekrop.errors import (
    AdjustmentRangeError,
    CropError,
    DegenerateCropError,
    DomainError,
    ImageKropError,
    InvalidCropGeometryError,
    UnknownPresetError,
)
from imagekrop.errors.handler import ErrorHandler, ErrorSeverity


def test_hierarchy():
    assert issubclass(DegenerateCropError, CropError)
    assert issubclass(InvalidCropGeometryError, CropError)
    assert issubclass(CropError, DomainError)
    assert issubclass(AdjustmentRangeError, ImageKropError)
    assert issubclass(UnknownPresetError, DomainError)


def test_degenerate_crop_carries_dimensions():
    error = DegenerateCropError(1, 37)
    assert (error.width, error.height) == (1, 37)
    assert str(error) == "Calculated crop dimensions too small: 1x37"


@pytest.fixture
def notifications():
    return []


@pytest.fixture
def handler(notifications):
    handler = ErrorHandler(logging.getLogger("test.errors"), notify_warnings=False)
    handler.register_ui_callback(lambda message, severity: notifications.append((message, severity)))
    return handler


def test_error_is_logged_and_forwarded(handler, notifications, caplog):
    with caplog.at_level(logging.ERROR, logger="test.errors"):
        handler.handle(DegenerateCropError(0, 0), context={"source": "test"})
    assert "DegenerateCropError" in caplog.text
    assert notifications == [("Calculated crop dimensions too small: 0x0", ErrorSeverity.ERROR)]


def test_warnings_not_forwarded_when_disabled(handler, notifications, caplog):
    with caplog.at_level(logging.WARNING, logger="test.errors"):
        handler.handle(CropError("odd"), ErrorSeverity.WARNING)
    assert "odd" in caplog.text
    assert notifications == []


def test_info_is_only_logged(handler, notifications):
    handler.handle(CropError("info"), ErrorSeverity.INFO)
    assert notifications == []
