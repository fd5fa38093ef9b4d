"""Start / stop / snapshot actions behind the window's buttons and keys."""

from __future__ import annotations

from typing import Callable, Optional

from capture_loop import CameraState, CaptureLoop, FrameChannel
from config import AppConfig, DEFAULT_CONFIG
from live_capture import CameraOpenError, CameraSource
from logger_setup import logger


def _open_default_camera(index, config):
    return CameraSource.open(index, width=config.frame_width, height=config.frame_height)


class AppController:
    def __init__(
        self,
        detector,
        snapshot_writer,
        dialogs,
        display,
        open_camera: Optional[Callable] = None,
        config: AppConfig = DEFAULT_CONFIG,
    ) -> None:
        self.detector = detector
        self.snapshot_writer = snapshot_writer
        self.dialogs = dialogs
        self.display = display
        self.config = config
        self._open_camera = open_camera or (lambda index: _open_default_camera(index, config))

        self.state = CameraState()
        self.frames = FrameChannel(maxsize=config.frame_queue_size)
        self.camera = None
        self.capture_loop: Optional[CaptureLoop] = None
        # Stopped loop that had not exited yet; it still owns its camera
        self._draining_loop: Optional[CaptureLoop] = None
        self.on_quit: Optional[Callable[[], None]] = None

    @property
    def camera_active(self) -> bool:
        return self.state.active

    # -------------------- Actions --------------------
    def start(self) -> bool:
        if self.camera_active:
            logger.info("Camera is already running.")
            return False

        draining = self._draining_loop
        if draining is not None:
            if not draining.join(self.config.stop_timeout):
                logger.error("Previous capture loop has not released the camera yet.")
                self.dialogs.show_error("Camera is still shutting down. Try again.")
                return False
            self._draining_loop = None

        # New state per run: a loop stopped earlier keeps its own, inactive flag
        self.state = CameraState(active=True)
        logger.info("Attempting to start camera feed...")

        try:
            camera = self._open_camera(self.config.camera_index)
        except CameraOpenError as e:
            self.state.deactivate()
            logger.error("Camera failed to open: %s", e)
            self.dialogs.show_error(f"Camera failed to open: {e}")
            return False

        self.camera = camera
        self.frames.clear()
        self.capture_loop = CaptureLoop(camera, self.detector, self.state, self.frames, self.config)
        self.capture_loop.start()
        logger.info("Camera feed is now open.")
        return True

    def close_feed(self) -> bool:
        """Stop the feed and blank the video panel; the window stays open."""
        if not self.camera_active:
            logger.info("Camera is not running.")
            self.dialogs.show_info("Camera is not running.", title="Camera")
            return False

        logger.info("Attempting to stop camera feed...")
        self._stop_loop()
        self.frames.clear()
        self.display.clear_frame()
        logger.info("Camera feed stopped and panel cleared.")
        return True

    def quit(self) -> None:
        """Stop the feed if it runs, then close the window."""
        if self.camera_active:
            self._stop_loop()
        logger.info("Stopped by user.")
        if self.on_quit:
            self.on_quit()

    def snapshot(self):
        if not self.camera_active or self.camera is None:
            logger.info("Camera must be running to take snapshot.")
            self.dialogs.show_info("Camera must be running to take snapshot.", title="Snapshot")
            return None
        return self.snapshot_writer.take_snapshot(self.camera, self.dialogs)

    # -------------------- Internals --------------------
    def _stop_loop(self) -> None:
        self.state.deactivate()
        loop = self.capture_loop
        if loop is not None and not loop.join(self.config.stop_timeout):
            logger.warning("Capture loop still busy after %.1fs; it will release the camera on exit.",
                           self.config.stop_timeout)
            self._draining_loop = loop
        self.capture_loop = None
        self.camera = None
