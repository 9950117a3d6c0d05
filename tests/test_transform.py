"""Tests for the zoom/pan transform model.

These tests exercise the pure gesture steps in LightboxViewer.core.transform:
pinch scaling, clamping and snap-back, panning, double tap and step zoom.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path to import LightboxViewer module
sys.path.insert(0, str(Path(__file__).parent.parent))

from LightboxViewer.core.transform import (
    IDENTITY,
    MODE_IDLE,
    MODE_ZOOMED,
    ViewportTransform,
    double_tap,
    interpolate,
    pan_end,
    pan_update,
    pinch_end,
    pinch_update,
    reset,
    zoom_by,
)


def test_pinch_update_is_relative_to_committed_scale():
    """Pinch deltas multiply the committed scale, not the last live value."""
    t = ViewportTransform.committed(2.0)
    t = pinch_update(t, 1.2)
    t = pinch_update(t, 1.2)
    assert t.scale == pytest.approx(2.4), f"Expected 2.4, got {t.scale}"
    assert t.saved_scale == 2.0, "Pinch update must not commit"


def test_pinch_update_ignores_non_positive_delta():
    t = pinch_update(IDENTITY, 0.0)
    assert t == IDENTITY


@pytest.mark.parametrize("delta", [0.1, 0.5, 0.99, 1.0, 1.5, 2.9, 3.0, 4.0, 25.0])
def test_pinch_end_commits_scale_within_bounds(delta):
    """After a pinch ends the committed scale lies in [1, 3]."""
    t, _ = pinch_end(pinch_update(IDENTITY, delta))
    assert 1.0 <= t.saved_scale <= 3.0, f"Committed scale {t.saved_scale} out of bounds"
    assert t.is_settled


def test_pinch_end_below_minimum_snaps_back_to_identity():
    """Pinching out below 1x animates back to the identity transform."""
    zoomed = ViewportTransform.committed(2.0, 40.0, -15.0)
    t, request = pinch_end(pinch_update(zoomed, 0.3))
    assert t == IDENTITY, f"Expected identity, got {t}"
    assert request is not None, "Snap-back must be animated"
    assert request.target == IDENTITY


def test_pinch_end_above_maximum_clamps_and_animates():
    t, request = pinch_end(pinch_update(IDENTITY, 5.0))
    assert t.saved_scale == 3.0
    assert request is not None and request.target.scale == 3.0


def test_pinch_end_inside_bounds_keeps_pan_and_needs_no_animation():
    zoomed = ViewportTransform.committed(1.5, 10.0, 20.0)
    t, request = pinch_end(pinch_update(zoomed, 1.2))
    assert t.saved_scale == pytest.approx(1.8)
    assert (t.saved_translate_x, t.saved_translate_y) == (10.0, 20.0)
    assert request is None


def test_pinch_end_at_identity_has_nothing_to_animate():
    t, request = pinch_end(IDENTITY)
    assert t == IDENTITY
    assert request is None


def test_pan_is_ignored_when_not_zoomed():
    """Panning at scale 1 never changes the committed translate."""
    t = pan_update(IDENTITY, 50.0, -30.0)
    t = pan_end(t)
    assert t == IDENTITY, f"Expected identity, got {t}"


def test_pan_offsets_from_committed_translate():
    t = ViewportTransform.committed(2.0, 5.0, 5.0)
    t = pan_update(t, 10.0, 0.0)
    t = pan_update(t, 20.0, -4.0)
    assert t.translate == (25.0, 1.0), f"Expected (25, 1), got {t.translate}"
    assert (t.saved_translate_x, t.saved_translate_y) == (5.0, 5.0)

    t = pan_end(t)
    assert (t.saved_translate_x, t.saved_translate_y) == (25.0, 1.0)


def test_pan_is_not_clamped_to_image_bounds():
    t = pan_end(pan_update(ViewportTransform.committed(3.0), 1e5, -1e5))
    assert t.translate == (1e5, -1e5)


def test_double_tap_toggles_between_fit_and_zoomed():
    """Two double taps return to the original scale (1 -> 2 -> 1)."""
    t, first = double_tap(IDENTITY)
    assert t.saved_scale == 2.0 and first.target.scale == 2.0
    assert t.mode() == MODE_ZOOMED

    t, second = double_tap(t)
    assert t == IDENTITY
    assert second.target == IDENTITY
    assert t.mode() == MODE_IDLE


def test_double_tap_from_panned_state_resets_pan():
    t, _ = double_tap(ViewportTransform.committed(2.5, 30.0, 30.0))
    assert t == IDENTITY


def test_zoom_by_clamps_and_drops_pan_at_minimum():
    t = zoom_by(ViewportTransform.committed(1.2, 8.0, 8.0), -0.5)
    assert t == IDENTITY

    t = IDENTITY
    for _ in range(20):
        t = zoom_by(t, 0.2)
    assert t.saved_scale == 3.0


def test_reset_only_animates_when_needed():
    assert reset(IDENTITY) == (IDENTITY, None)
    t, request = reset(ViewportTransform.committed(2.0, 3.0, 4.0))
    assert t == IDENTITY and request.target == IDENTITY


def test_interpolate_moves_live_values_and_keeps_target_baseline():
    start = ViewportTransform.committed(1.0)
    end = ViewportTransform.committed(2.0, 10.0, 0.0)
    mid = interpolate(start, end, 0.5)
    assert mid.scale == pytest.approx(1.5)
    assert mid.translate_x == pytest.approx(5.0)
    assert mid.saved_scale == 2.0
    assert interpolate(start, end, 2.0) == end
