"""Application defaults.

Kept in code on purpose: the app reads no config file and no environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import cv2


@dataclass(frozen=True)
class AppConfig:
    # Haar cascade shipped with opencv-python
    cascade_path: str = cv2.data.haarcascades + "haarcascade_frontalface_default.xml"
    snapshot_dir: str = "snapshots"

    # Camera
    camera_index: int = 0
    frame_width: int = 640
    frame_height: int = 480

    # Detection + overlay
    scale_factor: float = 1.1
    min_neighbors: int = 5
    box_color: Tuple[int, int, int] = (0, 255, 0)  # BGR
    box_thickness: int = 2

    # Capture loop. 0.0 keeps the busy-poll on empty frames.
    empty_frame_backoff: float = 0.0
    stop_timeout: float = 2.0
    frame_queue_size: int = 2

    # Window
    window_title: str = "Face Detection - Press Q to Exit"
    refresh_ms: int = 15

    log_level: str = "INFO"


DEFAULT_CONFIG = AppConfig()
