"""
Shared fixtures.

Qt runs with the offscreen platform so the tests need no display.
"""
import os
import time

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import cv2
import numpy as np
import pytest
from PyQt6.QtCore import QCoreApplication
from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


def wait_until(predicate, timeout: float = 5.0) -> bool:
    """Pumps the Qt event loop until predicate() is true or the timeout expires."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        QCoreApplication.processEvents()
        if predicate():
            return True
        time.sleep(0.01)
    QCoreApplication.processEvents()
    return predicate()


@pytest.fixture
def image_file(tmp_path):
    """A 64x48 PNG filled with a single color (RGB 10, 20, 30)."""
    bgr = np.zeros((48, 64, 3), dtype=np.uint8)
    bgr[:, :] = (30, 20, 10)
    path = tmp_path / "background.png"
    assert cv2.imwrite(str(path), bgr)
    return str(path)
