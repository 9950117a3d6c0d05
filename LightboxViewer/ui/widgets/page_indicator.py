"""Page indicator showing one dot per image."""

from PySide6.QtWidgets import QWidget
from PySide6.QtGui import QPainter, QColor, QMouseEvent
from PySide6.QtCore import Qt, QRectF, QSize

DOT_SIZE = 8
ACTIVE_DOT_WIDTH = 20
DOT_GAP = 8


class PageIndicator(QWidget):
    """Row of dots under the image; the active one is drawn wider.

    Clicking a dot jumps the viewer to that image.
    """

    def __init__(self, viewer):
        super().__init__(viewer)
        self.viewer = viewer
        self.setCursor(Qt.PointingHandCursor)

    def sizeHint(self):
        return QSize(self._row_width() + 2 * DOT_GAP, DOT_SIZE + 2 * DOT_GAP)

    def _row_width(self) -> int:
        count = self.viewer.state.count
        if count <= 0:
            return 0
        return (count - 1) * (DOT_SIZE + DOT_GAP) + ACTIVE_DOT_WIDTH

    def dot_rects(self) -> list:
        """Rectangles of the dots, left to right."""
        state = self.viewer.state
        x = (self.width() - self._row_width()) / 2.0
        y = (self.height() - DOT_SIZE) / 2.0
        rects = []
        for i in range(state.count):
            w = ACTIVE_DOT_WIDTH if i == state.real_index else DOT_SIZE
            rects.append(QRectF(x, y, w, DOT_SIZE))
            x += w + DOT_GAP
        return rects

    def index_at(self, x: float) -> int:
        """Index of the dot nearest to widget x-coordinate ``x``, or -1."""
        rects = self.dot_rects()
        if not rects:
            return -1
        if x < rects[0].left() - DOT_GAP or x > rects[-1].right() + DOT_GAP:
            return -1
        return min(range(len(rects)), key=lambda i: abs(rects[i].center().x() - x))

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setPen(Qt.NoPen)
        active = self.viewer.state.real_index
        for i, rect in enumerate(self.dot_rects()):
            painter.setBrush(QColor(255, 255, 255) if i == active else QColor(255, 255, 255, 102))
            painter.drawRoundedRect(rect, DOT_SIZE / 2.0, DOT_SIZE / 2.0)
        painter.end()

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() != Qt.LeftButton:
            return super().mousePressEvent(event)
        idx = self.index_at(event.position().x())
        if idx >= 0:
            self.viewer.go_to(idx)
        event.accept()
