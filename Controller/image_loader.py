# Controller/image_loader.py
from __future__ import annotations
import logging

import cv2
from PyQt6.QtCore import QObject, pyqtSignal, QThreadPool, QRunnable
from PyQt6.QtGui import QImage

from Model.image_ops import load_qimage

logger = logging.getLogger(__name__)


# Carries the decoded image (or None) from the worker thread back to the GUI thread
class _LoadSignal(QObject):
    finished = pyqtSignal(object)


# noinspection PyUnresolvedReferences
class _LoadTask(QRunnable):
    def __init__(self, path: str, sig: _LoadSignal):
        super().__init__()
        self.path = path
        self.sig = sig

    def run(self):
        try:
            img = load_qimage(self.path)
        except cv2.error as e:
            logger.warning(f"OpenCV failed to decode {self.path}: {e}")
            img = None
        self.sig.finished.emit(img)


class ImageLoader(QObject):
    """
    Loads one background image in the background, exactly once.

    The decode starts in the constructor. `ready` fires a single time when the
    image is available; until then `image` is None and canvases are drawn
    without a background. A missing or broken file is only logged - there is
    no retry and no timeout.
    """
    ready = pyqtSignal(QImage)

    def __init__(self, path: str, pool: QThreadPool | None = None, parent: QObject | None = None):
        super().__init__(parent)
        self.path = path
        self._image: QImage | None = None
        self._sig = _LoadSignal()
        self._sig.finished.connect(self._on_finished)
        pool = pool or QThreadPool.globalInstance()
        pool.start(_LoadTask(path, self._sig))

    @property
    def image(self) -> QImage | None:
        return self._image

    def is_ready(self) -> bool:
        return self._image is not None

    def _on_finished(self, img):
        if self._image is not None:
            return  # one-shot
        if img is None or img.isNull():
            logger.warning(f"Background image not available: {self.path}")
            return
        self._image = img
        logger.info(f"Background loaded: {self.path} ({img.width()}x{img.height()})")
        self.ready.emit(img)
