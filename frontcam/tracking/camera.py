import threading

import cv2
import numpy as np


class CameraError(RuntimeError):
    """The capture device could not be opened or released."""


class FrameGrabError(CameraError):
    """A single frame could not be read."""


class Camera:
    """Wraps cv2.VideoCapture for the front-facing camera."""

    def __init__(self, device: int = 0, width: int = 640, height: int = 360):
        self._device = device
        self._width = width
        self._height = height
        self._capture = None
        # grab() and stop() run on different threads; stop() can also re-enter
        # from a signal handler while a release is in progress
        self._lock = threading.RLock()

    @property
    def is_started(self) -> bool:
        return self._capture is not None

    def start(self):
        capture = cv2.VideoCapture(self._device)
        capture.set(cv2.CAP_PROP_FRAME_WIDTH, self._width)
        capture.set(cv2.CAP_PROP_FRAME_HEIGHT, self._height)
        if not capture.isOpened():
            capture.release()
            raise CameraError(f"Unable to open video device {self._device}")
        with self._lock:
            self._capture = capture

    def grab(self) -> np.ndarray:
        """Read the next BGR frame from the device."""
        with self._lock:
            if self._capture is None:
                raise FrameGrabError("Camera is not started")
            ok, frame = self._capture.read()
        if not ok or frame is None:
            raise FrameGrabError(f"No frame from video device {self._device}")
        return frame

    def stop(self):
        with self._lock:
            capture, self._capture = self._capture, None
            if capture is None:
                return
            try:
                capture.release()
            except cv2.error as e:
                raise CameraError(f"Failed to release video device {self._device}") from e
