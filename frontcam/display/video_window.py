"""Desktop preview window built on tkinter.

Tk is single-threaded, so every call coming from the detection thread is
queued and executed by a periodic poll on the Tk event loop.
"""

import logging
import queue
import tkinter as tk

import numpy as np
from PIL import ImageTk

from frontcam.display.frame_convert import to_panel_image

log = logging.getLogger("frontcam")


class VideoWindow:
    """Window with a single panel showing the latest processed frame."""

    def __init__(self, width: int = 640, height: int = 360,
                 title: str = "Front Camera Face Detection",
                 on_close=None, poll_interval_ms: int = 10):
        self._on_close = on_close
        self._poll_interval_ms = poll_interval_ms
        self._pending = queue.Queue()
        self._closed = False
        self._photo = None  # Tk drops images that lose their last reference

        self._root = tk.Tk()
        self._root.title(title)
        self._root.geometry(f"{width}x{height}")
        self._panel = tk.Label(self._root, background="black")
        self._panel.pack(fill=tk.BOTH, expand=True)
        self._root.protocol("WM_DELETE_WINDOW", self._handle_close)
        self._root.withdraw()

    # Thread-safe API

    def show(self):
        self._pending.put(self._root.deiconify)

    def post_frame(self, frame: np.ndarray):
        self._pending.put(lambda: self._paint(frame))

    def close(self):
        self._pending.put(self._destroy)

    # Tk thread

    def run(self):
        """Block in the Tk main loop until the window is destroyed."""
        self._root.after(self._poll_interval_ms, self._drain)
        self._root.mainloop()

    def _drain(self):
        try:
            while not self._closed:
                try:
                    task = self._pending.get_nowait()
                except queue.Empty:
                    break
                try:
                    task()
                except Exception as e:
                    log.error(f"Window update failed: {e}", exc_info=True)
        finally:
            if not self._closed:
                self._root.after(self._poll_interval_ms, self._drain)

    def _paint(self, frame: np.ndarray):
        image = to_panel_image(frame, self._panel.winfo_width(),
                               self._panel.winfo_height())
        self._photo = ImageTk.PhotoImage(image)
        self._panel.configure(image=self._photo)

    def _handle_close(self):
        log.info("Window closed")
        if self._on_close is not None:
            self._on_close()
        self._destroy()

    def _destroy(self):
        if self._closed:
            return
        self._closed = True
        self._root.destroy()
