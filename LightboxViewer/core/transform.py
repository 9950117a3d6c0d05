"""Zoom/pan transform model for the displayed image.

A ViewportTransform carries two triples: the *live* values shown while a
gesture is in progress (scale, translate_x, translate_y) and the *committed*
baseline the next gesture starts from (saved_scale, saved_translate_x,
saved_translate_y). Every gesture step is a pure function returning a new
transform; committing is just building a transform whose saved values equal
its live values.

Gesture steps that should be animated return an AnimationRequest next to
the new transform. The request only describes the target; running the
animation is left to the rendering layer.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .constants import MIN_ZOOM_SCALE, MAX_ZOOM_SCALE, DOUBLE_TAP_SCALE, ZOOM_ANIMATION_MS

MODE_IDLE = "idle"
MODE_ZOOMED = "zoomed"

EASE_OUT = "ease_out"


@dataclass(frozen=True)
class ViewportTransform:
    """Live and committed zoom/pan state of one displayed image."""

    scale: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0
    saved_scale: float = 1.0
    saved_translate_x: float = 0.0
    saved_translate_y: float = 0.0

    @classmethod
    def committed(cls, scale: float, translate_x: float = 0.0, translate_y: float = 0.0) -> "ViewportTransform":
        """Return a settled transform whose live values equal its baseline."""
        return cls(scale, translate_x, translate_y, scale, translate_x, translate_y)

    @property
    def translate(self) -> Tuple[float, float]:
        return (self.translate_x, self.translate_y)

    @property
    def is_settled(self) -> bool:
        return (
            self.scale == self.saved_scale
            and self.translate_x == self.saved_translate_x
            and self.translate_y == self.saved_translate_y
        )

    def mode(self, min_scale: float = MIN_ZOOM_SCALE) -> str:
        """Return MODE_ZOOMED when the committed scale is above ``min_scale``."""
        return MODE_ZOOMED if self.saved_scale > min_scale else MODE_IDLE


IDENTITY = ViewportTransform()


@dataclass(frozen=True)
class AnimationRequest:
    """Ask the rendering layer to animate the live values to ``target``."""

    target: ViewportTransform
    duration_ms: int = ZOOM_ANIMATION_MS
    easing: str = EASE_OUT


def clamp_scale(scale: float, min_scale: float = MIN_ZOOM_SCALE, max_scale: float = MAX_ZOOM_SCALE) -> float:
    return max(min_scale, min(max_scale, scale))


def interpolate(start: ViewportTransform, end: ViewportTransform, t: float) -> ViewportTransform:
    """Linear blend of the live values of two transforms, ``t`` in [0, 1].

    The committed baseline of ``end`` is kept, since an animation always runs
    towards an already committed target.
    """
    t = max(0.0, min(1.0, t))
    return replace(
        end,
        scale=start.scale + (end.scale - start.scale) * t,
        translate_x=start.translate_x + (end.translate_x - start.translate_x) * t,
        translate_y=start.translate_y + (end.translate_y - start.translate_y) * t,
    )


# --- gesture steps ---


def pinch_update(transform: ViewportTransform, scale_delta: float) -> ViewportTransform:
    """Scale relative to the committed baseline of the current gesture."""
    if scale_delta <= 0:
        return transform
    return replace(transform, scale=transform.saved_scale * scale_delta)


def pinch_end(
    transform: ViewportTransform,
    min_scale: float = MIN_ZOOM_SCALE,
    max_scale: float = MAX_ZOOM_SCALE,
    duration_ms: int = ZOOM_ANIMATION_MS,
) -> Tuple[ViewportTransform, Optional[AnimationRequest]]:
    """Clamp and commit the pinched scale.

    Settling at or below ``min_scale`` snaps back to the identity transform,
    which also clears any pan offset.
    """
    clamped = clamp_scale(transform.scale, min_scale, max_scale)
    if clamped <= min_scale:
        target = ViewportTransform.committed(min_scale)
        if transform.scale == target.scale and transform.translate == target.translate:
            return target, None
        return target, AnimationRequest(target, duration_ms)

    target = ViewportTransform.committed(clamped, transform.translate_x, transform.translate_y)
    if clamped != transform.scale:
        return target, AnimationRequest(target, duration_ms)
    return target, None


def pan_update(
    transform: ViewportTransform, dx: float, dy: float, min_scale: float = MIN_ZOOM_SCALE
) -> ViewportTransform:
    """Offset the committed translate by (dx, dy); no-op unless zoomed.

    The offset is not limited to the image bounds.
    """
    if transform.saved_scale <= min_scale:
        return transform
    return replace(
        transform,
        translate_x=transform.saved_translate_x + dx,
        translate_y=transform.saved_translate_y + dy,
    )


def pan_end(transform: ViewportTransform, min_scale: float = MIN_ZOOM_SCALE) -> ViewportTransform:
    if transform.saved_scale <= min_scale:
        return transform
    return replace(
        transform,
        saved_translate_x=transform.translate_x,
        saved_translate_y=transform.translate_y,
    )


def double_tap(
    transform: ViewportTransform,
    min_scale: float = MIN_ZOOM_SCALE,
    zoom_scale: float = DOUBLE_TAP_SCALE,
    duration_ms: int = ZOOM_ANIMATION_MS,
) -> Tuple[ViewportTransform, AnimationRequest]:
    """Toggle between the fitted scale and ``zoom_scale``."""
    if transform.saved_scale > min_scale:
        target = ViewportTransform.committed(min_scale)
    else:
        target = ViewportTransform.committed(zoom_scale)
    return target, AnimationRequest(target, duration_ms)


def zoom_by(
    transform: ViewportTransform,
    amount: float,
    min_scale: float = MIN_ZOOM_SCALE,
    max_scale: float = MAX_ZOOM_SCALE,
) -> ViewportTransform:
    """Add ``amount`` to the committed scale (buttons, mouse wheel).

    Landing on ``min_scale`` drops the pan offset like a snap-back does.
    """
    scale = clamp_scale(transform.saved_scale + amount, min_scale, max_scale)
    if scale <= min_scale:
        return ViewportTransform.committed(min_scale)
    return ViewportTransform.committed(scale, transform.saved_translate_x, transform.saved_translate_y)


def reset(
    transform: ViewportTransform, min_scale: float = MIN_ZOOM_SCALE, duration_ms: int = ZOOM_ANIMATION_MS
) -> Tuple[ViewportTransform, Optional[AnimationRequest]]:
    target = ViewportTransform.committed(min_scale)
    if transform == target:
        return target, None
    return target, AnimationRequest(target, duration_ms)
