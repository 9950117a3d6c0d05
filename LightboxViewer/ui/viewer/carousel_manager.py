"""Horizontal page strip management for ImageViewer.

The strip position is kept as a fractional virtual page index (``offset``).
Dragging moves it directly, releasing picks the page to settle on, and
ScrollRequests from the viewer state are carried out either as an animation
or, for re-centering, as an immediate jump.
"""

import logging
from typing import Optional

from PySide6.QtCore import QEasingCurve, QVariantAnimation

from ...core.carousel import ScrollRequest

logger = logging.getLogger(__name__)


class CarouselManager:
    """Moves the page strip and reports settled pages to the viewer state."""

    def __init__(self, viewer):
        """Initialize carousel manager.

        Args:
            viewer: ImageViewer instance
        """
        self.viewer = viewer
        self.offset = 0.0
        self._drag_origin: Optional[float] = None
        self._target: Optional[int] = None

        self._animation = QVariantAnimation(viewer)
        self._animation.setEasingCurve(QEasingCurve.OutCubic)
        self._animation.valueChanged.connect(self._on_animation_step)
        self._animation.finished.connect(self._on_animation_finished)

    def is_animating(self) -> bool:
        return self._animation.state() == QVariantAnimation.Running

    def stop(self):
        if self.is_animating():
            self._animation.stop()
        self._target = None

    def reset(self, virtual_index: int):
        """Place the strip on ``virtual_index`` without animation."""
        self.stop()
        self._drag_origin = None
        self.offset = float(virtual_index)
        self.viewer.canvas.update()

    # --- navigation ---

    def next_image(self):
        self.apply(self.viewer.state.go_to_adjacent("next"))

    def prev_image(self):
        self.apply(self.viewer.state.go_to_adjacent("prev"))

    def go_to(self, real_index: int):
        self.apply(self.viewer.state.go_to(real_index))

    def apply(self, request: Optional[ScrollRequest]):
        """Carry out a ScrollRequest from the viewer state."""
        if request is None:
            return
        if not request.animated or self.viewer.state.config.scroll_duration_ms <= 0:
            # Same call as the state update, so no frame shows the old offset.
            self.reset(request.virtual_index)
            return
        self.stop()
        count = self.viewer.state.count
        if count > 1:
            # Same pages one copy over, so the strip takes the short way round
            self.offset += round((request.virtual_index - self.offset) / count) * count
        self._target = request.virtual_index
        self._animation.setDuration(self.viewer.state.config.scroll_duration_ms)
        self._animation.setStartValue(float(self.offset))
        self._animation.setEndValue(float(request.virtual_index))
        self._animation.start()

    def settle(self, virtual_index: int):
        """Report the page the strip came to rest on."""
        self.offset = float(virtual_index)
        request = self.viewer.state.on_swipe_settle(virtual_index)
        if request is not None:
            self.apply(request)
        else:
            self.viewer.canvas.update()

    # --- swipe ---

    def begin_drag(self):
        if self.is_animating():
            self._animation.stop()
            self._target = None
        self._drag_origin = self.offset

    def drag(self, dx: float, page_width: float):
        """Move the strip by ``dx`` pixels since the drag began."""
        if self._drag_origin is None or page_width <= 0:
            return
        position = self.viewer.state.position
        if position is None:
            return
        offset = self._drag_origin - dx / page_width
        self.offset = max(0.0, min(float(position.length - 1), offset))
        self.viewer.canvas.update()

    def end_drag(self):
        """Pick the page to settle on and scroll there."""
        if self._drag_origin is None:
            return
        position = self.viewer.state.position
        base = int(round(self._drag_origin))
        self._drag_origin = None
        if position is None:
            return

        moved = self.offset - base
        threshold = self.viewer.state.config.swipe_threshold
        if moved > threshold:
            target = base + 1
        elif moved < -threshold:
            target = base - 1
        else:
            target = base
        target = max(0, min(position.length - 1, target))
        logger.debug("Swipe released at %.2f, settling on %d", self.offset, target)

        if self.offset == target or self.viewer.state.config.scroll_duration_ms <= 0:
            self.settle(target)
            return
        self._target = target
        self._animation.setDuration(self.viewer.state.config.scroll_duration_ms)
        self._animation.setStartValue(float(self.offset))
        self._animation.setEndValue(float(target))
        self._animation.start()

    # --- animation ---

    def _on_animation_step(self, value):
        self.offset = float(value)
        self.viewer.canvas.update()

    def _on_animation_finished(self):
        target = self._target
        self._target = None
        if target is not None:
            self.settle(target)
