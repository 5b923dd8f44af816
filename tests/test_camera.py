import threading
from unittest import mock

import cv2
import numpy as np
import pytest

from frontcam.tracking import camera as camera_module
from frontcam.tracking.camera import Camera, CameraError, FrameGrabError


@pytest.fixture
def capture():
    cap = mock.MagicMock()
    cap.isOpened.return_value = True
    cap.read.return_value = (True, np.zeros((360, 640, 3), dtype=np.uint8))
    with mock.patch.object(camera_module.cv2, "VideoCapture", return_value=cap) as ctor:
        cap.ctor = ctor
        yield cap


def test_start_requests_resolution(capture):
    cam = Camera(device=0, width=640, height=360)
    cam.start()

    capture.ctor.assert_called_once_with(0)
    capture.set.assert_any_call(cv2.CAP_PROP_FRAME_WIDTH, 640)
    capture.set.assert_any_call(cv2.CAP_PROP_FRAME_HEIGHT, 360)
    assert cam.is_started


def test_start_fails_when_device_missing(capture):
    capture.isOpened.return_value = False
    cam = Camera(device=3)

    with pytest.raises(CameraError, match="3"):
        cam.start()
    capture.release.assert_called_once()
    assert not cam.is_started


def test_grab_returns_frame(capture):
    cam = Camera()
    cam.start()
    frame = cam.grab()
    assert frame.shape == (360, 640, 3)


def test_grab_failure_raises(capture):
    capture.read.return_value = (False, None)
    cam = Camera()
    cam.start()
    with pytest.raises(FrameGrabError):
        cam.grab()


def test_grab_before_start_raises():
    with pytest.raises(FrameGrabError):
        Camera().grab()


def test_stop_is_idempotent(capture):
    cam = Camera()
    cam.start()
    cam.stop()
    cam.stop()
    capture.release.assert_called_once()
    assert not cam.is_started


def test_stop_wraps_release_errors(capture):
    capture.release.side_effect = cv2.error("release failed")
    cam = Camera()
    cam.start()
    with pytest.raises(CameraError):
        cam.stop()
    assert not cam.is_started


def test_frame_grab_error_is_camera_error():
    assert issubclass(FrameGrabError, CameraError)


def test_stop_reentered_during_release_does_not_deadlock(capture):
    cam = Camera()
    cam.start()
    # A shutdown signal handled mid-release calls stop() again on the same thread
    capture.release.side_effect = lambda: cam.stop()

    worker = threading.Thread(target=cam.stop, daemon=True)
    worker.start()
    worker.join(timeout=2.0)

    assert not worker.is_alive()
    capture.release.assert_called_once()
    assert not cam.is_started
