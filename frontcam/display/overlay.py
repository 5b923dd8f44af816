"""Face box overlay and mirroring for processed frames."""

import cv2
import numpy as np

from frontcam.utils.math_helpers import clamp

LABEL_OFFSET = 10


def draw_faces(frame: np.ndarray, faces, color: tuple = (0, 0, 255),
               thickness: int = 2, label: str | None = None) -> np.ndarray:
    """Draw an anti-aliased box around each (x, y, w, h) face, in place."""
    for (x, y, w, h) in faces:
        cv2.rectangle(frame, (x, y), (x + w, y + h), color, thickness, cv2.LINE_AA)

        if label:
            pos_x = int(clamp(x - LABEL_OFFSET, 0, frame.shape[1]))
            pos_y = int(clamp(y - LABEL_OFFSET, 0, frame.shape[0]))
            cv2.putText(frame, label, (pos_x, pos_y), cv2.FONT_HERSHEY_PLAIN,
                        1.0, (255, 255, 255), 1, cv2.LINE_AA)
    return frame


def mirror(frame: np.ndarray) -> np.ndarray:
    """Flip horizontally so the preview behaves like a mirror."""
    return cv2.flip(frame, 1)
