import cv2
import numpy as np
from PIL import Image


def to_panel_image(frame: np.ndarray, panel_width: int, panel_height: int) -> Image.Image:
    """Convert a BGR frame to an RGB PIL Image filling the panel.
    Panels not laid out yet report 1x1, so the frame size is kept."""
    rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
    image = Image.fromarray(rgb)
    if panel_width <= 1 or panel_height <= 1:
        return image
    if image.size == (panel_width, panel_height):
        return image
    return image.resize((panel_width, panel_height), Image.BILINEAR)
