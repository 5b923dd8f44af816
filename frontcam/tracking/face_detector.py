import cv2
import numpy as np


class FaceDetector:
    """OpenCV Haar Cascade face detection."""

    CASCADE_PATH = cv2.data.haarcascades + "haarcascade_frontalface_default.xml"

    def __init__(self, scale_factor: float = 1.2, min_neighbors: int = 3,
                 min_face_size: tuple = (30, 30)):
        self._cascade = cv2.CascadeClassifier(self.CASCADE_PATH)
        if self._cascade.empty():
            raise RuntimeError(f"Failed to load cascade from {self.CASCADE_PATH}")
        self._scale_factor = scale_factor
        self._min_neighbors = min_neighbors
        self._min_face_size = tuple(min_face_size)

    def detect(self, frame: np.ndarray) -> dict:
        """Detect faces in a BGR or grayscale frame.
        Returns {(x, y, w, h): face sub-image} for every detection."""
        grey = frame
        if frame.ndim == 3:
            grey = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)

        faces = self._cascade.detectMultiScale(
            grey,
            scaleFactor=self._scale_factor,
            minNeighbors=self._min_neighbors,
            minSize=self._min_face_size,
            flags=cv2.CASCADE_SCALE_IMAGE,
        )
        if len(faces) == 0:
            return {}

        detections = {}
        for f in faces:
            x, y, w, h = (int(v) for v in f)
            detections[(x, y, w, h)] = frame[y:y + h, x:x + w]
        return detections
