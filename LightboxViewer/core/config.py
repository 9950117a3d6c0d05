"""Viewer configuration.

ViewerConfig bundles the tunable numbers of the viewer. Defaults come from
``constants``; ``ViewerConfig.from_env()`` lets a host override a few of them
through environment variables:

    LIGHTBOX_BASE_URL          prefix joined onto relative image references
    LIGHTBOX_REQUEST_TIMEOUT   timeout in seconds for remote images
    LIGHTBOX_MAX_SCALE         upper zoom bound
    LIGHTBOX_DOUBLE_TAP_SCALE  zoom level reached by a double tap
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import (
    MIN_ZOOM_SCALE,
    MAX_ZOOM_SCALE,
    DOUBLE_TAP_SCALE,
    ZOOM_STEP,
    WHEEL_ZOOM_STEP,
    ZOOM_ANIMATION_MS,
    SCROLL_ANIMATION_MS,
    SWIPE_THRESHOLD,
    REQUEST_TIMEOUT,
)


@dataclass(frozen=True)
class ViewerConfig:
    """Tunable parameters of an ImageViewer session.

    Attributes:
        min_scale: Lower zoom bound; also the "fitted" scale.
        max_scale: Upper zoom bound.
        double_tap_scale: Zoom level a double tap toggles to.
        zoom_step: Scale added/removed by the zoom buttons.
        wheel_zoom_step: Scale added/removed per mouse wheel notch.
        animation_duration_ms: Duration of zoom animations.
        scroll_duration_ms: Duration of animated page scrolls.
        swipe_threshold: Fraction of the page width a drag must cover to
            move to the neighbouring page.
        base_url: Prefix for relative image references ("" = local paths).
        request_timeout: Timeout for remote image fetches, in seconds.
    """

    min_scale: float = MIN_ZOOM_SCALE
    max_scale: float = MAX_ZOOM_SCALE
    double_tap_scale: float = DOUBLE_TAP_SCALE
    zoom_step: float = ZOOM_STEP
    wheel_zoom_step: float = WHEEL_ZOOM_STEP
    animation_duration_ms: int = ZOOM_ANIMATION_MS
    scroll_duration_ms: int = SCROLL_ANIMATION_MS
    swipe_threshold: float = SWIPE_THRESHOLD
    base_url: str = ""
    request_timeout: float = REQUEST_TIMEOUT

    def __post_init__(self):
        if self.min_scale <= 0:
            raise ValueError(f"min_scale must be positive, got {self.min_scale}")
        if self.min_scale >= self.max_scale:
            raise ValueError(f"min_scale ({self.min_scale}) must be below max_scale ({self.max_scale})")
        if not self.min_scale < self.double_tap_scale <= self.max_scale:
            raise ValueError(
                f"double_tap_scale must lie in ({self.min_scale}, {self.max_scale}], got {self.double_tap_scale}"
            )
        if self.zoom_step <= 0 or self.wheel_zoom_step <= 0:
            raise ValueError("zoom steps must be positive")
        if self.animation_duration_ms < 0 or self.scroll_duration_ms < 0:
            raise ValueError("animation durations must not be negative")
        if not 0.0 < self.swipe_threshold < 1.0:
            raise ValueError(f"swipe_threshold must lie in (0, 1), got {self.swipe_threshold}")
        if self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive, got {self.request_timeout}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "ViewerConfig":
        """Build a config from ``LIGHTBOX_*`` environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``).
            **overrides: Explicit field values; these win over the environment.

        Raises:
            ValueError: If a variable cannot be parsed or the result is invalid.
        """
        if environ is None:
            environ = os.environ

        values = {}
        if environ.get("LIGHTBOX_BASE_URL"):
            values["base_url"] = environ["LIGHTBOX_BASE_URL"]
        for key, field, conv in (
            ("LIGHTBOX_REQUEST_TIMEOUT", "request_timeout", float),
            ("LIGHTBOX_MAX_SCALE", "max_scale", float),
            ("LIGHTBOX_DOUBLE_TAP_SCALE", "double_tap_scale", float),
        ):
            raw = environ.get(key)
            if raw:
                try:
                    values[field] = conv(raw)
                except ValueError:
                    raise ValueError(f"{key} must be a number, got {raw!r}") from None

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
