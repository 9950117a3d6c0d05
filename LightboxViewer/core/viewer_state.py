"""Headless state of the image viewer.

ViewerState owns everything the viewer knows between frames: the image set,
the carousel position and the zoom/pan transform of the displayed image.
It has no Qt dependency. The widgets in ``LightboxViewer.ui`` call the
gesture methods and carry out the AnimationRequest / ScrollRequest values
they return.

Listeners:
    on_close():                       the viewer was closed
    on_index_changed(real_index):     the displayed image changed
    on_transform_changed(transform):  the zoom/pan state changed
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .config import ViewerConfig
from .carousel import CarouselPosition, ScrollRequest, clamp_index
from .transform import (
    IDENTITY,
    AnimationRequest,
    ViewportTransform,
    double_tap,
    pan_end,
    pan_update,
    pinch_end,
    pinch_update,
    reset,
    zoom_by,
)

logger = logging.getLogger(__name__)


class ViewerState:
    """Image set, carousel position and transform of one viewer session.

    Attributes:
        images: Image references of the open session (empty when closed).
        position: Carousel position, or None when nothing is open.
        transform: Zoom/pan state of the displayed image.
        visible: Whether a session is open.
    """

    def __init__(
        self,
        config: Optional[ViewerConfig] = None,
        on_close: Optional[Callable[[], None]] = None,
        on_index_changed: Optional[Callable[[int], None]] = None,
        on_transform_changed: Optional[Callable[[ViewportTransform], None]] = None,
    ):
        self.config = config or ViewerConfig()
        self.on_close = on_close
        self.on_index_changed = on_index_changed
        self.on_transform_changed = on_transform_changed

        self.images: Tuple[str, ...] = ()
        self.position: Optional[CarouselPosition] = None
        self.transform = self._identity()
        self.visible = False

    # --- derived values ---

    @property
    def count(self) -> int:
        return len(self.images)

    @property
    def real_index(self) -> int:
        return self.position.real_index if self.position else 0

    @property
    def virtual_index(self) -> int:
        return self.position.virtual_index if self.position else 0

    @property
    def current_image(self) -> Optional[str]:
        if not self.images:
            return None
        return self.images[self.real_index]

    @property
    def is_infinite(self) -> bool:
        return bool(self.position and self.position.is_infinite)

    @property
    def can_navigate(self) -> bool:
        return self.count > 1

    @property
    def counter_text(self) -> str:
        """Page counter such as ``"2 / 5"``; empty for fewer than two images."""
        if self.count < 2:
            return ""
        return f"{self.real_index + 1} / {self.count}"

    @property
    def zoom_percent(self) -> int:
        return int(round(self.transform.scale * 100))

    @property
    def mode(self) -> str:
        return self.transform.mode(self.config.min_scale)

    def visible_window(self, radius: int = 1, center: Optional[int] = None) -> List[Tuple[int, int]]:
        if self.position is None:
            return []
        return self.position.window(radius, center)

    # --- session ---

    def open(self, images: Sequence[str], initial_index: int = 0) -> bool:
        """Start a session on ``images`` showing ``initial_index``.

        An empty image set is ignored. ``initial_index`` is clamped into range.

        Returns:
            True if a session was opened.
        """
        images = tuple(images or ())
        if not images:
            logger.debug("open() called with an empty image set; ignoring")
            return False

        index = clamp_index(initial_index, len(images))
        if index != initial_index:
            logger.warning("initial index %s out of range for %d images; using %d", initial_index, len(images), index)

        self.images = images
        self.position = CarouselPosition.start(len(images), index)
        self.visible = True
        logger.info("Opened viewer with %d image(s) at index %d", len(images), index)
        self._set_transform(self._identity())
        self._notify_index()
        return True

    def close(self):
        """End the session and notify the ``on_close`` listener."""
        was_visible = self.visible
        self.images = ()
        self.position = None
        self.transform = self._identity()
        self.visible = False
        if was_visible:
            logger.info("Closed viewer")
        if self.on_close is not None:
            self.on_close()

    # --- zoom and pan gestures ---

    def on_pinch_update(self, scale_delta: float):
        if not self.visible:
            return
        self._set_transform(pinch_update(self.transform, scale_delta))

    def on_pinch_end(self) -> Optional[AnimationRequest]:
        if not self.visible:
            return None
        cfg = self.config
        transform, request = pinch_end(self.transform, cfg.min_scale, cfg.max_scale, cfg.animation_duration_ms)
        logger.debug("Pinch settled at scale %.3f", transform.saved_scale)
        self._set_transform(transform)
        return request

    def on_pan_update(self, dx: float, dy: float):
        if not self.visible:
            return
        self._set_transform(pan_update(self.transform, dx, dy, self.config.min_scale))

    def on_pan_end(self):
        if not self.visible:
            return
        self._set_transform(pan_end(self.transform, self.config.min_scale))

    def on_double_tap(self) -> Optional[AnimationRequest]:
        if not self.visible:
            return None
        cfg = self.config
        transform, request = double_tap(self.transform, cfg.min_scale, cfg.double_tap_scale, cfg.animation_duration_ms)
        logger.debug("Double tap -> scale %.3f", transform.saved_scale)
        self._set_transform(transform)
        return request

    def on_wheel(self, steps: float):
        """Zoom by ``steps`` mouse wheel notches (positive zooms in)."""
        if not self.visible or not steps:
            return
        self._set_transform(
            zoom_by(self.transform, steps * self.config.wheel_zoom_step, self.config.min_scale, self.config.max_scale)
        )

    def zoom_in(self):
        if not self.visible:
            return
        self._set_transform(zoom_by(self.transform, self.config.zoom_step, self.config.min_scale, self.config.max_scale))

    def zoom_out(self):
        if not self.visible:
            return
        self._set_transform(
            zoom_by(self.transform, -self.config.zoom_step, self.config.min_scale, self.config.max_scale)
        )

    def reset_zoom(self) -> Optional[AnimationRequest]:
        if not self.visible:
            return None
        transform, request = reset(self.transform, self.config.min_scale, self.config.animation_duration_ms)
        self._set_transform(transform)
        return request

    # --- carousel ---

    def on_swipe_settle(self, virtual_index: int) -> Optional[ScrollRequest]:
        """Record the page a swipe came to rest on.

        The real index and a possible re-centering jump are applied together;
        a returned request is always non-animated.
        """
        if self.position is None:
            return None
        old_real = self.position.real_index
        self.position, request = self.position.settle(virtual_index)
        if request is not None:
            logger.debug("Re-centered carousel from %d to %d", virtual_index, request.virtual_index)
        self._after_move(old_real)
        return request

    def go_to_adjacent(self, direction) -> Optional[ScrollRequest]:
        """Step to the previous/next image with wraparound.

        Args:
            direction: ``"prev"``/``"next"`` or a negative/positive number.
        """
        if self.position is None or not self.position.is_infinite:
            return None
        old_real = self.position.real_index
        self.position, request = self.position.adjacent(direction)
        self._after_move(old_real)
        return request

    def go_to(self, real_index: int) -> Optional[ScrollRequest]:
        """Jump to ``real_index`` (used by the page indicator)."""
        if self.position is None:
            return None
        old_real = self.position.real_index
        self.position, request = self.position.jump_to(real_index)
        self._after_move(old_real)
        return request

    # --- internals ---

    def _identity(self) -> ViewportTransform:
        if self.config.min_scale == IDENTITY.scale:
            return IDENTITY
        return ViewportTransform.committed(self.config.min_scale)

    def _set_transform(self, transform: ViewportTransform):
        if transform == self.transform:
            return
        self.transform = transform
        if self.on_transform_changed is not None:
            self.on_transform_changed(transform)

    def _after_move(self, old_real: int):
        if self.position.real_index == old_real:
            return
        logger.info("Showing image %d of %d", self.position.real_index + 1, self.count)
        self._set_transform(self._identity())
        self._notify_index()

    def _notify_index(self):
        if self.on_index_changed is not None:
            self.on_index_changed(self.real_index)
