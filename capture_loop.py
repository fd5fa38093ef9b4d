"""Background capture thread and its hand-off to the UI thread."""

from __future__ import annotations

import queue
import threading
import time
from typing import Optional

from config import AppConfig, DEFAULT_CONFIG
from face_tracker import detect_and_draw_faces
from logger_setup import logger
from utils import frame_to_image


class CameraState:
    """Running flag shared between the controller and one capture loop.

    Backed by a threading.Event so a deactivate() on the UI thread is seen by
    the capture thread on its next check.
    """

    def __init__(self, active: bool = False) -> None:
        self._event = threading.Event()
        if active:
            self._event.set()

    @property
    def active(self) -> bool:
        return self._event.is_set()

    def activate(self) -> None:
        self._event.set()

    def deactivate(self) -> None:
        self._event.clear()


class FrameChannel:
    """Bounded queue of rendered images from the capture thread to the UI."""

    def __init__(self, maxsize: int = 2) -> None:
        self._queue: "queue.Queue" = queue.Queue(maxsize=maxsize)

    def publish(self, image) -> None:
        while True:
            try:
                self._queue.put_nowait(image)
                return
            except queue.Full:
                # UI is behind, drop the oldest image
                try:
                    self._queue.get_nowait()
                except queue.Empty:
                    pass

    def latest(self):
        image = None
        while True:
            try:
                image = self._queue.get_nowait()
            except queue.Empty:
                return image

    def clear(self) -> None:
        self.latest()


class CaptureLoop:
    def __init__(
        self,
        camera,
        detector,
        state: CameraState,
        frames: FrameChannel,
        config: AppConfig = DEFAULT_CONFIG,
    ) -> None:
        self.camera = camera
        self.detector = detector
        self.state = state
        self.frames = frames
        self.config = config
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        self._thread = threading.Thread(target=self.run, name="capture-loop", daemon=True)
        self._thread.start()
        logger.info("Camera thread is now active.")

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the loop to finish. Returns True once the thread is gone."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def process_frame(self, frame):
        frame, _ = detect_and_draw_faces(
            frame,
            self.detector,
            color=self.config.box_color,
            thickness=self.config.box_thickness,
        )
        return frame_to_image(frame)

    def run(self) -> None:
        try:
            while self.state.active:
                frame = self.camera.read()
                if frame is None:
                    if self.config.empty_frame_backoff > 0:
                        time.sleep(self.config.empty_frame_backoff)
                    continue

                try:
                    image = self.process_frame(frame)
                except Exception:
                    logger.exception("Frame processing failed, skipping frame")
                    continue

                if not self.state.active:
                    break
                self.frames.publish(image)
        finally:
            self.camera.release()
            logger.info("Capture loop finished.")
