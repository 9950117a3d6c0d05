"""Fullscreen image viewer window.

This module provides the ImageViewer class, a lightbox that shows one image
at a time from a fixed set of references.

Features:
- Pinch zoom, double-tap zoom toggle and wheel zoom (100%-300%)
- Drag to pan while zoomed
- Horizontal swipe navigation that wraps around in both directions
- Previous/next buttons, page counter and page indicator dots
- Zoom buttons with a percentage readout
"""

import logging
from typing import Dict, Optional, Sequence

import requests
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QToolButton
from PySide6.QtGui import QPixmap, QPainter, QColor
from PySide6.QtCore import Qt, Signal

from ...core.config import ViewerConfig
from ...core.image_io import ImageLoadError, load_image, numpy_to_qimage
from ...core.transform import ViewportTransform
from ...core.viewer_state import ViewerState
from ..widgets import ImageCanvas, PageIndicator
from ..dialogs import HelpDialog

from .menu_builder import create_shortcuts
from .zoom_manager import ZoomManager
from .carousel_manager import CarouselManager

logger = logging.getLogger(__name__)

BUTTON_STYLE = (
    "QToolButton { color: white; background: rgba(255, 255, 255, 50); border: none;"
    " border-radius: 22px; font-size: 16pt; min-width: 44px; min-height: 44px; }"
    "QToolButton:hover { background: rgba(255, 255, 255, 90); }"
    "QToolButton:disabled { color: rgba(255, 255, 255, 80); }"
)


class ImageViewer(QWidget):
    """Lightbox window for browsing a fixed set of images.

    Usage:
        viewer = ImageViewer()
        viewer.closed.connect(on_close)
        viewer.open(["a.jpg", "b.jpg"], initial_index=1)

    Keyboard Shortcuts:
        - Esc: Close
        - Left / Right: Previous / next image (wraps around)
        - + / -: Zoom in / out
        - 0: Reset zoom
        - F1: Help

    Attributes:
        state: Headless ViewerState holding images, position and transform
        zoom_manager: Runs zoom gestures and animations
        carousel_manager: Moves the page strip
    """

    # Signals for host and widget updates
    closed = Signal()
    index_changed = Signal(int)
    scale_changed = Signal(float)

    def __init__(self, config: Optional[ViewerConfig] = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("LightboxViewer")
        self.setWindowFlags(self.windowFlags() | Qt.FramelessWindowHint)
        self.setAttribute(Qt.WA_TranslucentBackground, True)
        self.resize(1000, 700)

        self.state = ViewerState(
            config,
            on_close=self._on_state_closed,
            on_index_changed=self._on_index_changed,
            on_transform_changed=self._on_transform_changed,
        )
        # Pixmaps of the open session, keyed by real index (None = failed)
        self._pixmaps: Dict[int, Optional[QPixmap]] = {}
        self._session: Optional[requests.Session] = None

        self.canvas = ImageCanvas(self, self)
        self.zoom_manager = ZoomManager(self)
        self.carousel_manager = CarouselManager(self)

        # Header: close, counter, zoom controls
        self.close_button = self._make_button("✕", "閉じる", self.close_viewer)
        self.counter_label = QLabel()
        self.counter_label.setStyleSheet("color: white; font-size: 14pt; font-weight: 500;")
        self.zoom_out_button = self._make_button("−", "縮小", lambda: self.zoom_manager.zoom_out())
        self.zoom_label = QLabel()
        self.zoom_label.setMinimumWidth(56)
        self.zoom_label.setAlignment(Qt.AlignCenter)
        self.zoom_label.setStyleSheet("color: white; font-size: 11pt;")
        self.zoom_in_button = self._make_button("+", "拡大", lambda: self.zoom_manager.zoom_in())
        self.reset_button = self._make_button("⟲", "リセット", lambda: self.zoom_manager.reset_zoom())

        header = QHBoxLayout()
        header.setContentsMargins(20, 20, 20, 10)
        header.addWidget(self.close_button)
        header.addStretch()
        header.addWidget(self.counter_label)
        header.addStretch()
        header.addWidget(self.zoom_out_button)
        header.addWidget(self.zoom_label)
        header.addWidget(self.zoom_in_button)
        header.addWidget(self.reset_button)

        # Middle: prev, canvas, next
        self.prev_button = self._make_button("‹", "前の画像", self.prev_image)
        self.next_button = self._make_button("›", "次の画像", self.next_image)
        middle = QHBoxLayout()
        middle.setContentsMargins(10, 0, 10, 0)
        middle.addWidget(self.prev_button, 0, Qt.AlignVCenter)
        middle.addWidget(self.canvas, 1)
        middle.addWidget(self.next_button, 0, Qt.AlignVCenter)

        self.page_indicator = PageIndicator(self)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 10)
        layout.addLayout(header)
        layout.addLayout(middle, 1)
        layout.addWidget(self.page_indicator, 0, Qt.AlignHCenter)

        self.help_dialog = HelpDialog(self)
        create_shortcuts(self)
        self.update_controls()

    def _make_button(self, text: str, tooltip: str, slot) -> QToolButton:
        button = QToolButton(self)
        button.setText(text)
        button.setToolTip(tooltip)
        button.setFocusPolicy(Qt.NoFocus)
        button.setStyleSheet(BUTTON_STYLE)
        button.clicked.connect(slot)
        return button

    # --- session ---

    def open(self, images: Sequence[str], initial_index: int = 0) -> bool:
        """Show ``images`` starting at ``initial_index``.

        An empty sequence is ignored; a session that is already open keeps
        running unchanged.

        Returns:
            True if the viewer was opened.
        """
        if not self.state.open(images, initial_index):
            return False
        self.zoom_manager.stop()
        self._release_images()
        self._session = requests.Session()
        self.carousel_manager.reset(self.state.virtual_index)
        self.zoom_manager.sync()
        self.update_controls()
        self.show()
        self.raise_()
        self.activateWindow()
        self.canvas.setFocus()
        return True

    def close_viewer(self):
        """Close the viewer and emit ``closed``."""
        self.zoom_manager.stop()
        self.carousel_manager.stop()
        self.state.close()

    def _on_state_closed(self):
        self._release_images()
        self.hide()
        self.closed.emit()

    def _release_images(self):
        self._pixmaps.clear()
        if self._session is not None:
            self._session.close()
            self._session = None

    # --- navigation ---

    def next_image(self):
        self.carousel_manager.next_image()

    def prev_image(self):
        self.carousel_manager.prev_image()

    def go_to(self, real_index: int):
        self.carousel_manager.go_to(real_index)

    # --- images ---

    def pixmap_for(self, real_index: int) -> Optional[QPixmap]:
        """Return the pixmap of image ``real_index``, loading it on first use.

        Returns None when the image could not be loaded.
        """
        if real_index in self._pixmaps:
            return self._pixmaps[real_index]
        if not 0 <= real_index < self.state.count:
            return None
        reference = self.state.images[real_index]
        cfg = self.state.config
        try:
            arr = load_image(reference, base_url=cfg.base_url, timeout=cfg.request_timeout, session=self._session)
            pixmap = QPixmap.fromImage(numpy_to_qimage(arr))
        except ImageLoadError as e:
            logger.warning("%s", e)
            pixmap = None
        self._pixmaps[real_index] = pixmap
        return pixmap

    # --- state listeners ---

    def _on_index_changed(self, real_index: int):
        # A new image always starts from the identity transform
        self.zoom_manager.stop()
        self.zoom_manager.sync()
        self.update_controls()
        self.index_changed.emit(real_index)

    def _on_transform_changed(self, transform: ViewportTransform):
        self.zoom_manager.sync()

    # --- controls ---

    def update_controls(self):
        """Refresh counter, navigation buttons, dots and zoom readout."""
        navigable = self.state.can_navigate
        self.counter_label.setText(self.state.counter_text)
        self.counter_label.setVisible(navigable)
        self.prev_button.setVisible(navigable)
        self.next_button.setVisible(navigable)
        self.page_indicator.setVisible(navigable)
        self.page_indicator.updateGeometry()
        self.page_indicator.update()
        self.update_zoom_controls()

    def update_zoom_controls(self):
        cfg = self.state.config
        scale = self.zoom_manager.display.scale
        self.zoom_label.setText(f"{int(round(scale * 100))}%")
        self.zoom_in_button.setEnabled(self.state.visible and self.state.transform.saved_scale < cfg.max_scale)
        self.zoom_out_button.setEnabled(self.state.visible and self.state.transform.saved_scale > cfg.min_scale)
        self.reset_button.setEnabled(self.state.visible and self.state.transform.saved_scale > cfg.min_scale)

    # --- events ---

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(0, 0, 0, 242))
        painter.end()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.canvas.update()

    def closeEvent(self, event):
        """Treat a window close like the close button."""
        if self.state.visible:
            self.close_viewer()
        if self.help_dialog.isVisible():
            self.help_dialog.close()
        event.accept()
