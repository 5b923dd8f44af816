import numpy as np

from frontcam.display.frame_convert import to_panel_image


def test_bgr_converted_to_rgb():
    frame = np.zeros((36, 64, 3), dtype=np.uint8)
    frame[:, :, 2] = 255  # red in BGR

    image = to_panel_image(frame, 64, 36)

    assert image.mode == "RGB"
    assert image.getpixel((0, 0)) == (255, 0, 0)


def test_resized_to_panel():
    frame = np.zeros((360, 640, 3), dtype=np.uint8)
    image = to_panel_image(frame, 320, 200)
    assert image.size == (320, 200)


def test_unmapped_panel_keeps_frame_size():
    frame = np.zeros((360, 640, 3), dtype=np.uint8)
    image = to_panel_image(frame, 1, 1)
    assert image.size == (640, 360)
