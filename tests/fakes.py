import threading
import time

import numpy as np


def blank_frame(height=120, width=160):
    return np.zeros((height, width, 3), dtype=np.uint8)


def wait_until(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


class DummyCamera:
    """Stands in for live_capture.CameraSource."""

    def __init__(self, frames=None):
        # None -> always return a blank frame
        self.frames = list(frames) if frames is not None else None
        self.reads = 0
        self.releases = 0
        self.on_exhausted = None
        self._lock = threading.Lock()

    def read(self):
        with self._lock:
            self.reads += 1
            if self.frames is None:
                return blank_frame()
            if self.frames:
                return self.frames.pop(0)
        if self.on_exhausted:
            self.on_exhausted()
        return None

    def release(self):
        with self._lock:
            self.releases += 1


class StubDetector:
    def __init__(self, faces=()):
        self.faces = list(faces)
        self.calls = 0

    def detect(self, frame):
        self.calls += 1
        return list(self.faces)


class ScriptedDialogs:
    def __init__(self, label="alice", confirm=True):
        self.label = label
        self.confirm_answer = confirm
        self.errors = []
        self.infos = []
        self.prompts = []
        self.confirmations = []

    def ask_label(self, prompt="Enter name: ", title="Take snapshot"):
        self.prompts.append(prompt)
        return self.label

    def confirm(self, message, title="Confirm"):
        self.confirmations.append(message)
        return self.confirm_answer

    def show_info(self, message, title="Info"):
        self.infos.append(message)

    def show_error(self, message, title="Error"):
        self.errors.append(message)


class DummyDisplay:
    def __init__(self):
        self.cleared = 0

    def clear_frame(self):
        self.cleared += 1
