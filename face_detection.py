# face_detection.py

from typing import List, NamedTuple

import cv2

from logger_setup import logger
from utils import ensure_uint8


class DetectorLoadError(RuntimeError):
    pass


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int


class CascadeDetector:
    """Haar cascade face detector. Detection itself is OpenCV's."""

    def __init__(self, classifier, scale_factor=1.1, min_neighbors=5):
        self.classifier = classifier
        self.scale_factor = scale_factor
        self.min_neighbors = min_neighbors

    @classmethod
    def load(cls, path, scale_factor=1.1, min_neighbors=5):
        classifier = cv2.CascadeClassifier(path)
        if classifier.empty():
            raise DetectorLoadError(f"Failed to load cascade model from path: {path}")
        logger.info("Cascade model successfully loaded.")
        return cls(classifier, scale_factor=scale_factor, min_neighbors=min_neighbors)

    def detect(self, frame) -> List[Rect]:
        frame = ensure_uint8(frame)
        gray = frame if frame.ndim == 2 else cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
        faces = self.classifier.detectMultiScale(
            gray, scaleFactor=self.scale_factor, minNeighbors=self.min_neighbors
        )
        return [Rect(int(x), int(y), int(w), int(h)) for (x, y, w, h) in faces]
