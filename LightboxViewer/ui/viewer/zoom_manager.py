"""Zoom and pan management for ImageViewer.

This module handles all zoom-related operations including:
- Forwarding pinch, pan, double-tap and wheel input to the viewer state
- Running the zoom animations the state asks for (snap-back, double tap,
  reset)
- Keeping the transform that is actually painted (``display``)
"""

from typing import Optional

from PySide6.QtCore import QEasingCurve, QVariantAnimation

from ...core.transform import EASE_OUT, AnimationRequest, ViewportTransform, interpolate

_EASING = {EASE_OUT: QEasingCurve.OutCubic}


class ZoomManager:
    """Manages zoom and pan operations for the image viewer.

    The committed transform lives in ``viewer.state``. While an animation
    runs, ``display`` moves from the previous live values to the committed
    target; otherwise it equals ``viewer.state.transform``.
    """

    def __init__(self, viewer):
        """Initialize zoom manager.

        Args:
            viewer: ImageViewer instance
        """
        self.viewer = viewer
        self.display: ViewportTransform = viewer.state.transform
        self._start = self.display
        self._target = self.display

        self._animation = QVariantAnimation(viewer)
        self._animation.setStartValue(0.0)
        self._animation.setEndValue(1.0)
        self._animation.valueChanged.connect(self._on_animation_step)
        self._animation.finished.connect(self._on_animation_finished)

    def is_animating(self) -> bool:
        return self._animation.state() == QVariantAnimation.Running

    def stop(self):
        """Stop a running animation; the committed target stays in effect."""
        if self.is_animating():
            self._animation.stop()

    def sync(self):
        """Show the committed transform unless an animation owns the display."""
        if self.is_animating():
            return
        self._set_display(self.viewer.state.transform)

    # --- gesture forwarding ---

    def pinch_update(self, scale_delta: float):
        self.stop()
        self.viewer.state.on_pinch_update(scale_delta)

    def pinch_end(self):
        start = self.display
        self.run(self.viewer.state.on_pinch_end(), start)

    def pan_update(self, dx: float, dy: float):
        self.stop()
        self.viewer.state.on_pan_update(dx, dy)

    def pan_end(self):
        self.viewer.state.on_pan_end()

    def double_tap(self):
        self.stop()
        start = self.display
        self.run(self.viewer.state.on_double_tap(), start)

    def wheel(self, steps: float):
        self.stop()
        self.viewer.state.on_wheel(steps)

    def zoom_in(self):
        self.stop()
        self.viewer.state.zoom_in()

    def zoom_out(self):
        self.stop()
        self.viewer.state.zoom_out()

    def reset_zoom(self):
        self.stop()
        start = self.display
        self.run(self.viewer.state.reset_zoom(), start)

    # --- animation ---

    def run(self, request: Optional[AnimationRequest], start: Optional[ViewportTransform] = None):
        """Animate the display from ``start`` towards ``request.target``.

        The state has already committed (and announced) the target by the
        time this runs, so ``start`` must be captured before the gesture
        call. Without a request (or with a zero duration) the committed
        transform is shown immediately.
        """
        if request is None or request.duration_ms <= 0:
            self.stop()
            self._set_display(self.viewer.state.transform)
            return
        self.stop()
        self._start = self.display if start is None else start
        self._target = request.target
        self._animation.setDuration(request.duration_ms)
        self._animation.setEasingCurve(_EASING.get(request.easing, QEasingCurve.OutCubic))
        self._animation.start()

    def _on_animation_step(self, value):
        self._set_display(interpolate(self._start, self._target, float(value)))

    def _on_animation_finished(self):
        self._set_display(self.viewer.state.transform)

    def _set_display(self, transform: ViewportTransform):
        changed = transform.scale != self.display.scale
        self.display = transform
        self.viewer.canvas.update()
        self.viewer.canvas.update_cursor()
        if changed:
            self.viewer.scale_changed.emit(transform.scale)
        self.viewer.update_zoom_controls()
