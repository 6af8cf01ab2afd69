from PyQt6.QtWidgets import QLabel, QSizePolicy
from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QPixmap, QPainter, QImage


class CanvasView(QLabel):
    # Shows the latest rendered canvas, aspect-fitted into the widget.
    # The canvas itself is drawn by CanvasRenderer - this widget only displays it.

    def __init__(self, placeholder: str = "Loading..."):
        super().__init__(placeholder)
        self.setObjectName("CanvasView")
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setMinimumSize(200, 200)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        self._pixmap: QPixmap | None = None

    def paintEvent(self, e):
        # Show the placeholder text as long as nothing was rendered
        if self._pixmap is None:
            super().paintEvent(e)
            return

        p = QPainter(self) # Start painting into the widget area
        p.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, True) # smooth scaling

        # Aspect fit, never enlarge beyond 100%
        s = self.current_scale()
        iw, ih = self._pixmap.width() * s, self._pixmap.height() * s
        x = (self.width() - iw) / 2.0
        y = (self.height() - ih) / 2.0
        p.drawPixmap(QRectF(x, y, iw, ih), self._pixmap, QRectF(self._pixmap.rect()))
        p.end()

    def current_scale(self) -> float:
        if not self._pixmap or self.width() <= 0 or self.height() <= 0:
            return 1.0
        iw, ih = self._pixmap.width(), self._pixmap.height()
        return min(1.0, self.width() / iw, self.height() / ih)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.update()

    # ---- Public API ----
    def show_qimage(self, qimg: QImage):
        if qimg.isNull():
            return
        self._pixmap = QPixmap.fromImage(qimg)
        self.setText("")
        self.update()

    @property
    def pixmap_size(self):
        return None if self._pixmap is None else self._pixmap.size()
