import cv2
import numpy as np
from PIL import Image


def ensure_uint8(frame):
    if frame.dtype != np.uint8:
        if frame.max() <= 1.0:
            frame = (frame * 255).astype(np.uint8)
        else:
            frame = np.clip(frame, 0, 255).astype(np.uint8)
    return frame


def is_valid_frame(frame):
    return frame is not None and getattr(frame, "size", 0) > 0


def frame_to_image(frame):
    """Convert an OpenCV frame (BGR or grayscale) into a PIL image for the UI."""
    frame = ensure_uint8(frame)
    if frame.ndim == 2 or frame.shape[2] == 1:
        return Image.fromarray(frame.reshape(frame.shape[:2]))
    code = cv2.COLOR_BGRA2RGB if frame.shape[2] == 4 else cv2.COLOR_BGR2RGB
    rgb = cv2.cvtColor(frame, code)
    return Image.fromarray(rgb)
