"""Image canvas: paints the page strip and recognizes gestures.

The canvas paints only the pages next to the current strip position. Each
page is fitted into the canvas with a margin; the displayed page gets the
live zoom/pan transform on top.

Input handling:
    - Pinch gesture / touchpad zoom: pinch zoom
    - Double click: double-tap zoom toggle
    - Left-drag while zoomed: pan
    - Left-drag otherwise: swipe to the neighbouring page
    - Mouse wheel: step zoom
"""

from PySide6.QtWidgets import QWidget
from PySide6.QtGui import QPainter, QColor, QPen
from PySide6.QtCore import Qt, QEvent, QRectF

from ...core.transform import MODE_ZOOMED

PAGE_MARGIN = 20


class ImageCanvas(QWidget):
    """Widget displaying the visible window of the image carousel.

    Attributes:
        viewer: Parent ImageViewer instance
    """

    def __init__(self, viewer, parent=None):
        super().__init__(parent)
        self.viewer = viewer
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setAttribute(Qt.WA_AcceptTouchEvents, True)
        self.grabGesture(Qt.PinchGesture)

        self._press_pos = None
        self._drag_mode = None  # "pan" | "swipe" | None
        self._native_zoom = 1.0

    # --- geometry ---

    def page_rect(self, virtual_index: int) -> QRectF:
        x = (virtual_index - self.viewer.carousel_manager.offset) * self.width()
        return QRectF(x, 0, self.width(), self.height())

    def fitted_rect(self, page: QRectF, image_width: int, image_height: int) -> QRectF:
        """Aspect-fit an image of the given size into ``page`` minus the margin."""
        area = page.adjusted(PAGE_MARGIN, PAGE_MARGIN, -PAGE_MARGIN, -PAGE_MARGIN)
        if image_width <= 0 or image_height <= 0 or area.width() <= 0 or area.height() <= 0:
            return QRectF()
        factor = min(area.width() / image_width, area.height() / image_height)
        w = image_width * factor
        h = image_height * factor
        return QRectF(area.center().x() - w / 2.0, area.center().y() - h / 2.0, w, h)

    # --- painting ---

    def paintEvent(self, event):
        state = self.viewer.state
        if not state.visible:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.SmoothPixmapTransform, True)
        painter.setRenderHint(QPainter.Antialiasing, True)

        center = int(round(self.viewer.carousel_manager.offset))
        for virtual_index, real_index in state.visible_window(radius=1, center=center):
            page = self.page_rect(virtual_index)
            if page.right() < 0 or page.left() > self.width():
                continue
            painter.save()
            painter.setClipRect(page)
            if virtual_index == state.virtual_index:
                t = self.viewer.zoom_manager.display
                c = page.center()
                painter.translate(c.x() + t.translate_x, c.y() + t.translate_y)
                painter.scale(t.scale, t.scale)
                painter.translate(-c.x(), -c.y())
            self._paint_page(painter, page, real_index)
            painter.restore()
        painter.end()

    def _paint_page(self, painter: QPainter, page: QRectF, real_index: int):
        pixmap = self.viewer.pixmap_for(real_index)
        if pixmap is None or pixmap.isNull():
            self._paint_placeholder(painter, page)
            return
        target = self.fitted_rect(page, pixmap.width(), pixmap.height())
        painter.drawPixmap(target, pixmap, QRectF(pixmap.rect()))

    def _paint_placeholder(self, painter: QPainter, page: QRectF):
        box = QRectF(0, 0, 160, 120)
        box.moveCenter(page.center())
        painter.setPen(QPen(QColor(255, 255, 255, 120), 2))
        painter.setBrush(QColor(255, 255, 255, 30))
        painter.drawRoundedRect(box, 8, 8)
        painter.drawText(box, Qt.AlignCenter, "画像を読み込めません")

    # --- gestures ---

    def event(self, event):
        if event.type() == QEvent.Gesture:
            return self._gesture_event(event)
        if event.type() == QEvent.NativeGesture:
            return self._native_gesture_event(event)
        return super().event(event)

    def _gesture_event(self, event) -> bool:
        pinch = event.gesture(Qt.PinchGesture)
        if pinch is None:
            return False
        zoom = self.viewer.zoom_manager
        if pinch.state() == Qt.GestureStarted:
            self._cancel_drag()
        if pinch.state() in (Qt.GestureStarted, Qt.GestureUpdated):
            zoom.pinch_update(pinch.totalScaleFactor())
        elif pinch.state() in (Qt.GestureFinished, Qt.GestureCanceled):
            zoom.pinch_update(pinch.totalScaleFactor())
            zoom.pinch_end()
        event.accept(pinch)
        return True

    def _native_gesture_event(self, event) -> bool:
        zoom = self.viewer.zoom_manager
        kind = event.gestureType()
        if kind == Qt.BeginNativeGesture:
            self._native_zoom = 1.0
        elif kind == Qt.ZoomNativeGesture:
            self._native_zoom *= 1.0 + event.value()
            zoom.pinch_update(self._native_zoom)
        elif kind == Qt.EndNativeGesture:
            if self._native_zoom != 1.0:
                zoom.pinch_end()
            self._native_zoom = 1.0
        else:
            return super().event(event)
        event.accept()
        return True

    # --- mouse ---

    def mousePressEvent(self, event):
        if event.button() != Qt.LeftButton or not self.viewer.state.visible:
            return super().mousePressEvent(event)
        self._press_pos = event.position()
        if self.viewer.state.mode == MODE_ZOOMED:
            self._drag_mode = "pan"
            self.viewer.zoom_manager.stop()
            self.setCursor(Qt.ClosedHandCursor)
        elif self.viewer.state.can_navigate:
            self._drag_mode = "swipe"
            self.viewer.carousel_manager.begin_drag()
        event.accept()

    def mouseMoveEvent(self, event):
        if self._press_pos is None or self._drag_mode is None:
            return super().mouseMoveEvent(event)
        delta = event.position() - self._press_pos
        if self._drag_mode == "pan":
            self.viewer.zoom_manager.pan_update(delta.x(), delta.y())
        else:
            self.viewer.carousel_manager.drag(delta.x(), self.width())
        event.accept()

    def mouseReleaseEvent(self, event):
        if event.button() != Qt.LeftButton:
            return super().mouseReleaseEvent(event)
        mode = self._drag_mode
        self._press_pos = None
        self._drag_mode = None
        if mode == "pan":
            self.viewer.zoom_manager.pan_end()
        elif mode == "swipe":
            self.viewer.carousel_manager.end_drag()
        self.update_cursor()
        event.accept()

    def mouseDoubleClickEvent(self, event):
        if event.button() != Qt.LeftButton or not self.viewer.state.visible:
            return super().mouseDoubleClickEvent(event)
        self._cancel_drag()
        self.viewer.zoom_manager.double_tap()
        event.accept()

    def wheelEvent(self, event):
        if not self.viewer.state.visible:
            return super().wheelEvent(event)
        steps = event.angleDelta().y() / 120.0
        if steps:
            self.viewer.zoom_manager.wheel(steps)
        event.accept()

    def _cancel_drag(self):
        mode = self._drag_mode
        self._press_pos = None
        self._drag_mode = None
        if mode == "pan":
            self.viewer.zoom_manager.pan_end()
        elif mode == "swipe":
            self.viewer.carousel_manager.end_drag()

    def update_cursor(self):
        if self.viewer.state.mode == MODE_ZOOMED:
            self.setCursor(Qt.OpenHandCursor)
        else:
            self.unsetCursor()
