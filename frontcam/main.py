#!/usr/bin/env python3
"""Front camera face detection - entry point and detection loop."""

import argparse
import logging
import signal
import sys
import threading
import time

from frontcam.config import Config, load_config
from frontcam.display.overlay import draw_faces, mirror
from frontcam.tracking.camera import Camera, CameraError, FrameGrabError
from frontcam.tracking.face_detector import FaceDetector

log = logging.getLogger("frontcam")


class FaceDetectionApp:
    def __init__(self, config: Config | None = None, camera=None,
                 detector=None, window=None):
        self.config = config or Config()
        self._camera = camera
        self._running = False
        self._stop_requested = False
        # Reentrant: the shutdown hook may call stop() while stop() is running
        self._state_lock = threading.RLock()

        if detector is None:
            det = self.config.detection
            detector = FaceDetector(
                scale_factor=det.scale_factor,
                min_neighbors=det.min_neighbors,
                min_face_size=det.min_face_size,
            )
        self._detector = detector

        # Tk must be created on the main thread, so the window is built here
        if window is None:
            from frontcam.display.video_window import VideoWindow
            window = VideoWindow(
                width=self.config.camera.width,
                height=self.config.camera.height,
                title=self.config.window.title,
                on_close=self.stop,
                poll_interval_ms=self.config.window.poll_interval_ms,
            )
        self.window = window

        self._detect_fps = 0.0

    @property
    def running(self) -> bool:
        return self._running

    def start(self):
        """Start the camera, show the window and process frames until stopped."""
        if self._camera is None:
            cam = self.config.camera
            self._camera = Camera(device=cam.device, width=cam.width, height=cam.height)

        with self._state_lock:
            if self._stop_requested:
                log.info("Stop requested before frame grabbing started")
                return
            self._running = True

        log.info("Starting frame grabber")
        try:
            self._camera.start()
        except CameraError as e:
            self._running = False
            log.error(f"Error when initializing the frame grabber: {e}")
            raise RuntimeError("Unable to start the frame grabber") from e
        log.info("Started frame grabber")

        # stop() ran while the device was opening and found nothing to release
        if not self._running:
            self._release_camera()
            return

        self.window.show()
        self._process()
        log.info("Stopped frame grabbing.")

    def _process(self):
        frame_count = 0
        fps_timer = time.monotonic()

        while self._running:
            try:
                frame = self._camera.grab()
                self.process_frame(frame)
            except FrameGrabError as e:
                log.warning(f"Error when grabbing the frame: {e}")
                continue
            except Exception as e:
                log.error(f"Unexpected error while processing a frame: {e}",
                          exc_info=True)
                continue

            frame_count += 1
            now = time.monotonic()
            if now - fps_timer >= 1.0:
                self._detect_fps = frame_count / (now - fps_timer)
                frame_count = 0
                fps_timer = now
                log.debug(f"Detection at {self._detect_fps:.1f} FPS")

    def process_frame(self, frame):
        """Detect, box and mirror one frame, then hand it to the window."""
        faces = self._detector.detect(frame)

        overlay = self.config.overlay
        draw_faces(
            frame, faces.keys(),
            color=overlay.box_color,
            thickness=overlay.box_thickness,
            label=overlay.label_text if overlay.show_label else None,
        )

        mirrored = mirror(frame)
        self.window.post_frame(mirrored)
        return mirrored

    def stop(self):
        """Stop processing, release the camera and close the window."""
        with self._state_lock:
            self._running = False
            self._stop_requested = True
        self._release_camera()
        self.window.close()

    def _release_camera(self):
        if self._camera is None:
            return
        log.info("Releasing and stopping frame grabber")
        try:
            self._camera.stop()
        except CameraError as e:
            log.warning(f"Error occurred when stopping the frame grabber: {e}")


def _detection_thread(app: FaceDetectionApp, failed: threading.Event):
    """Background thread: camera capture + face detection."""
    try:
        app.start()
    except Exception as e:
        log.error(f"Detection thread error: {e}", exc_info=True)
        failed.set()
        app.stop()


def main():
    parser = argparse.ArgumentParser(description="Front camera face detection")
    parser.add_argument("--config", default="config.yaml", help="Config file path")
    args = parser.parse_args()

    config = load_config(args.config)
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    app = FaceDetectionApp(config)

    # Shutdown hook: Ctrl+C and SIGTERM both stop the loop and close the window
    signal.signal(signal.SIGTERM, lambda *_: app.stop())
    signal.signal(signal.SIGINT, lambda *_: app.stop())

    log.info("This example works with front camera")
    log.info("Starting detection")
    failed = threading.Event()
    worker = threading.Thread(target=_detection_thread, args=(app, failed),
                              name="detection", daemon=True)
    worker.start()

    app.window.run()

    log.info("Stopping detection")
    app.stop()
    worker.join(timeout=2.0)
    log.info("Done")

    if failed.is_set():
        sys.exit(1)


if __name__ == "__main__":
    main()
