"""Tests for the Qt-observable crop session."""

import logging

import numpy as np
import pytest

pytest.importorskip("PySide6.QtCore")

from imagekrop.core.crop.aspect import AspectRatio
from imagekrop.core.crop.bitmap import CropShape, ImageFlip
from imagekrop.errors.handler import ErrorHandler, ErrorSeverity
from imagekrop.state import ImageKropState


@pytest.fixture
def krop_state(gradient_image):
    state = ImageKropState(gradient_image)
    state.set_canvas_size(60, 40)
    return state


def test_canvas_size_places_rect(gradient_image):
    state = ImageKropState(gradient_image)
    changes = []
    state.cropChanged.connect(lambda: changes.append(True))
    state.set_canvas_size(600, 400)
    assert changes == [True]
    assert state.corners.bounds() == pytest.approx((60.0, 40.0, 540.0, 360.0))


def test_drag_emits_crop_changed(gradient_image):
    state = ImageKropState(gradient_image)
    state.set_canvas_size(600, 400)
    changes = []
    state.cropChanged.connect(lambda: changes.append(True))
    state.drag_start(300, 200)
    assert state.drag(10, 0) is True
    state.drag_end()
    assert changes == [True]


def test_commit_stores_result_and_history(krop_state):
    committed = []
    history = []
    krop_state.cropCommitted.connect(committed.append)
    krop_state.historyChanged.connect(history.append)

    result = krop_state.commit()

    assert result is not None
    assert result.shape[2] == 4
    assert krop_state.modified_image is result
    assert len(krop_state.images) == 1
    assert len(committed) == 1
    assert history == [1]


def test_failed_commit_reports_and_keeps_state(gradient_image, caplog):
    notifications = []
    handler = ErrorHandler(logging.getLogger("test.krop"))
    handler.register_ui_callback(lambda message, severity: notifications.append((message, severity)))
    state = ImageKropState(gradient_image, error_handler=handler)
    failures = []
    state.cropFailed.connect(failures.append)

    # No canvas size yet, so the rectangle is empty.
    with caplog.at_level(logging.WARNING):
        assert state.commit() is None

    assert len(failures) == 1
    assert notifications and notifications[0][1] is ErrorSeverity.WARNING
    assert state.modified_image is None
    assert state.images == []


def test_history_helpers(krop_state, gradient_image):
    krop_state.add_image(gradient_image)
    krop_state.add_image(gradient_image)
    krop_state.remove_last_image()
    assert len(krop_state.images) == 1
    krop_state.clear_images()
    assert krop_state.images == []
    krop_state.remove_last_image()
    assert krop_state.images == []


def test_options_emit_changes(krop_state):
    options = []
    krop_state.optionsChanged.connect(lambda: options.append(True))
    krop_state.set_aspect_ratio(AspectRatio.FOUR_BY_THREE)
    krop_state.set_aspect_locked(True)
    krop_state.set_shape(CropShape.CIRCLE)
    krop_state.set_flip(ImageFlip.VERTICAL)
    krop_state.set_flip(ImageFlip.VERTICAL)
    assert len(options) == 4
    assert krop_state.is_aspect_locked
    width, height = krop_state.corners.width, krop_state.corners.height
    assert width / height == pytest.approx(4 / 3)


def test_shape_must_be_offered(gradient_image):
    state = ImageKropState(gradient_image, shapes=(CropShape.SHARP_CORNER, CropShape.CIRCLE))
    with pytest.raises(ValueError):
        state.set_shape(CropShape.STAR)


def test_commit_applies_shape(krop_state):
    krop_state.set_shape(CropShape.CIRCLE)
    result = krop_state.commit()
    assert result[0, 0, 3] == 0


def test_commit_crops_modified_image(krop_state):
    first = krop_state.commit()
    assert first is not None
    second = krop_state.commit()
    assert second is not None
    assert len(krop_state.images) == 2
    assert np.asarray(second).shape[0] <= np.asarray(first).shape[0]
