import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import cv2
import numpy as np
import pytest

import live_capture
from live_capture import CameraOpenError, CameraSource


class DummyVideoCapture:
    instances = []

    def __init__(self, source, opened=True, frames=None):
        self.source = source
        self.opened = opened
        self.frames = list(frames or [])
        self.releases = 0
        self.props = {}
        DummyVideoCapture.instances.append(self)

    def isOpened(self):
        return self.opened

    def set(self, prop, value):
        self.props[prop] = value
        return True

    def read(self):
        if self.frames:
            item = self.frames.pop(0)
            if isinstance(item, Exception):
                raise item
            return item
        return False, None

    def release(self):
        self.releases += 1


@pytest.fixture(autouse=True)
def reset_instances():
    DummyVideoCapture.instances = []


def test_open_failure_raises_and_releases(monkeypatch):
    monkeypatch.setattr(live_capture.cv2, "VideoCapture", lambda index: DummyVideoCapture(index, opened=False))

    with pytest.raises(CameraOpenError):
        CameraSource.open(0)

    assert DummyVideoCapture.instances[0].releases == 1


def test_open_requests_frame_size(monkeypatch):
    monkeypatch.setattr(live_capture.cv2, "VideoCapture", DummyVideoCapture)

    camera = CameraSource.open(0, width=640, height=480)

    props = DummyVideoCapture.instances[0].props
    assert props[cv2.CAP_PROP_FRAME_WIDTH] == 640
    assert props[cv2.CAP_PROP_FRAME_HEIGHT] == 480
    assert camera.is_open


def test_read_returns_frames_and_none_for_bad_reads():
    frame = np.zeros((4, 4, 3), dtype=np.uint8)
    capture = DummyVideoCapture(0, frames=[
        (True, frame),
        (False, None),
        (True, np.zeros((0, 0, 3), dtype=np.uint8)),
        cv2.error("device gone"),
    ])
    camera = CameraSource(capture)

    assert camera.read() is frame
    assert camera.read() is None
    assert camera.read() is None
    assert camera.read() is None


def test_release_is_idempotent():
    capture = DummyVideoCapture(0, frames=[(True, np.zeros((2, 2, 3), dtype=np.uint8))])
    camera = CameraSource(capture)

    camera.release()
    camera.release()

    assert capture.releases == 1
    assert not camera.is_open
    assert camera.read() is None
