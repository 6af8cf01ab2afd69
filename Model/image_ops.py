from typing import Optional

import cv2
import numpy as np
from PyQt6.QtGui import QImage


def load_rgb(path: str) -> Optional[np.ndarray]:
    """
    Decodes an image file with OpenCV.
    Returns an HxWx3 uint8 RGB array, or None if the file is missing or not an image.
    """
    bgr = cv2.imread(path, cv2.IMREAD_COLOR)
    if bgr is None:
        return None
    return cv2.cvtColor(bgr, cv2.COLOR_BGR2RGB)


def numpy_rgb_to_qimage(rgb: np.ndarray) -> QImage:
    h, w, _ = rgb.shape
    rgb = np.ascontiguousarray(rgb)
    # QImage must not point at memory owned by numpy -> copy()
    qimg = QImage(
        rgb.data, w, h, 3 * w,
        QImage.Format.Format_RGB888
    ).copy()
    return qimg


def qimage_to_numpy(qimg: QImage) -> np.ndarray:
    """
    Returns the pixels of a QImage as an HxWx4 uint8 RGBA array (a copy).
    Used to compare rendered canvases pixel by pixel.
    """
    # Always convert to RGBA8888 (uniform format)
    src = qimg.convertToFormat(QImage.Format.Format_RGBA8888)
    w, h = src.width(), src.height()
    if w == 0 or h == 0:
        return np.zeros((h, w, 4), dtype=np.uint8)
    bytes_per_line = src.bytesPerLine()

    ptr = src.bits()
    ptr.setsize(bytes_per_line * h)
    arr = np.frombuffer(ptr, dtype=np.uint8).reshape((h, bytes_per_line))

    # Payload without padding: w*4
    return arr[:, :w * 4].reshape((h, w, 4)).copy()


def load_qimage(path: str) -> Optional[QImage]:
    rgb = load_rgb(path)
    if rgb is None:
        return None
    return numpy_rgb_to_qimage(rgb)
