"""Labeled snapshots: snapshots/<label>/snapshot_<unix millis>.png"""

from __future__ import annotations

import os
import threading
import time
from pathlib import Path
from typing import Optional

import cv2

from logger_setup import logger
from utils import ensure_uint8, is_valid_frame


class SnapshotError(Exception):
    pass


class InvalidLabelError(SnapshotError):
    pass


class SnapshotDirectoryError(SnapshotError):
    pass


def validate_label(raw: Optional[str]) -> str:
    label = (raw or "").strip()
    if not label:
        raise InvalidLabelError("Snapshot person must have a name.")
    if label in (".", "..") or "\x00" in label or any(sep and sep in label for sep in (os.sep, os.altsep, "/")):
        raise InvalidLabelError(f'"{label}" cannot be used as a folder name.')
    return label


class SnapshotWriter:
    def __init__(self, base_dir="snapshots"):
        self.base_dir = Path(base_dir)
        self._last_stamp = 0
        self._lock = threading.Lock()

    def _next_stamp(self) -> int:
        with self._lock:
            stamp = max(int(time.time() * 1000), self._last_stamp + 1)
            self._last_stamp = stamp
            return stamp

    def label_dir(self, label: str) -> Path:
        return self.base_dir / validate_label(label)

    def next_path(self, label: str) -> Path:
        directory = self.label_dir(label)
        while True:
            path = directory / f"snapshot_{self._next_stamp()}.png"
            if not path.exists():
                return path

    def save(self, frame, label: str) -> Path:
        directory = self.label_dir(label)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as e:
            raise SnapshotDirectoryError(
                f"Something went wrong with directory. Try again. ({getattr(e, 'strerror', None) or e})"
            ) from e

        ok, buffer = cv2.imencode(".png", ensure_uint8(frame))
        if not ok:
            raise SnapshotError("Failed to save snapshot: PNG encoding failed")

        while True:
            path = self.next_path(label)
            try:
                # "x" never overwrites an existing snapshot
                with open(path, "xb") as fh:
                    fh.write(buffer.tobytes())
                return path
            except FileExistsError:
                continue
            except (OSError, ValueError) as e:
                raise SnapshotError(f"Failed to save snapshot: {e}") from e

    def take_snapshot(self, camera, dialogs) -> Optional[Path]:
        """Read one frame, ask for a label and confirmation, then write it.

        Every outcome ends in exactly one dialog. Returns the written path, or
        None when nothing was saved.
        """
        frame = camera.read()
        if not is_valid_frame(frame):
            logger.error("Snapshot aborted: frame can not be captured.")
            dialogs.show_error("Failed to capture frame")
            return None

        try:
            label = validate_label(dialogs.ask_label("Enter name: "))
        except InvalidLabelError as e:
            logger.warning("Snapshot aborted: %s", e)
            dialogs.show_info(str(e), title="Snapshot")
            return None

        if not dialogs.confirm(f'Save snapshot for "{label}"?', title="Confirm snapshot"):
            logger.info("Snapshot for %r declined by user.", label)
            dialogs.show_info("Snapshot not saved.", title="Snapshot")
            return None

        try:
            path = self.save(frame, label)
        except SnapshotError as e:
            logger.error("Snapshot for %r failed: %s", label, e)
            dialogs.show_error(str(e))
            return None

        logger.info("Snapshot saved to %s", path)
        dialogs.show_info(f"Snapshot saved to {path}", title="SUCCESS")
        return path
