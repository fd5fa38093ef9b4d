import threading

import cv2

from logger_setup import logger
from utils import is_valid_frame


class CameraOpenError(RuntimeError):
    pass


class CameraSource:
    """One open camera device handle.

    read() and release() share a lock, so the capture thread and a snapshot
    read on the UI thread never hit the VideoCapture at the same time.
    """

    def __init__(self, capture, index=0):
        self._capture = capture
        self.index = index
        self._lock = threading.Lock()

    @classmethod
    def open(cls, index=0, width=None, height=None):
        capture = cv2.VideoCapture(index)
        if not capture.isOpened():
            capture.release()
            raise CameraOpenError(f"camera {index} failed to open.")

        # Not every backend honours these
        if width:
            capture.set(cv2.CAP_PROP_FRAME_WIDTH, width)
        if height:
            capture.set(cv2.CAP_PROP_FRAME_HEIGHT, height)

        logger.info("Camera %s opened.", index)
        return cls(capture, index)

    @property
    def is_open(self):
        return self._capture is not None

    def read(self):
        """Return the next frame, or None if nothing usable came back."""
        with self._lock:
            if self._capture is None:
                return None
            try:
                ret, frame = self._capture.read()
            except cv2.error as e:
                logger.debug("Frame read failed: %s", e)
                return None
        if not ret or not is_valid_frame(frame):
            return None
        return frame

    def release(self):
        with self._lock:
            if self._capture is None:
                return
            self._capture.release()
            self._capture = None
        logger.info("Camera %s released.", self.index)
