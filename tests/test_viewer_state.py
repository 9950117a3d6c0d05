"""Tests for the headless viewer state (open/close, gestures, navigation)."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path to import LightboxViewer module
sys.path.insert(0, str(Path(__file__).parent.parent))

from LightboxViewer.core.config import ViewerConfig
from LightboxViewer.core.transform import IDENTITY, MODE_IDLE, MODE_ZOOMED
from LightboxViewer.core.viewer_state import ViewerState


@pytest.fixture
def events():
    return {"closed": 0, "index": [], "transform": []}


@pytest.fixture
def state(events):
    def on_close():
        events["closed"] += 1

    return ViewerState(
        on_close=on_close,
        on_index_changed=events["index"].append,
        on_transform_changed=events["transform"].append,
    )


def test_open_with_empty_images_is_a_noop(state, events):
    """An empty image set renders nothing and does no index arithmetic."""
    assert state.open([], 0) is False
    assert not state.visible
    assert state.position is None
    assert state.current_image is None
    assert events["index"] == []
    assert state.go_to_adjacent("next") is None
    assert state.on_swipe_settle(3) is None


def test_open_sets_real_and_virtual_index(state, events):
    assert state.open(["a", "b", "c"], 0)
    assert state.real_index == 0
    assert state.virtual_index == 3, f"Expected virtual 3, got {state.virtual_index}"
    assert state.current_image == "a"
    assert state.transform == IDENTITY
    assert events["index"] == [0]


def test_open_clamps_initial_index(state):
    state.open(["a", "b"], 9)
    assert state.real_index == 1
    state.open(["a", "b"], -2)
    assert state.real_index == 0


def test_reopen_resets_position_and_transform(state):
    state.open(["a", "b", "c"], 1)
    state.on_double_tap()
    state.go_to_adjacent("next")
    state.open(["x", "y", "z", "w"], 3)
    assert state.real_index == 3
    assert state.virtual_index == 7
    assert state.transform == IDENTITY


def test_close_tears_down_and_notifies(state, events):
    state.open(["a", "b"], 1)
    state.close()
    assert events["closed"] == 1
    assert not state.visible
    assert state.images == ()
    assert state.position is None


def test_pinch_sequence_commits_clamped_scale(state):
    state.open(["a", "b"], 0)
    state.on_pinch_update(1.5)
    assert state.transform.scale == pytest.approx(1.5)
    assert state.on_pinch_end() is None
    assert state.mode == MODE_ZOOMED

    state.on_pinch_update(4.0)
    request = state.on_pinch_end()
    assert state.transform.saved_scale == 3.0
    assert request is not None and request.target.scale == 3.0


def test_pinch_out_snaps_back(state):
    state.open(["a", "b"], 0)
    state.on_double_tap()
    state.on_pan_update(20, 20)
    state.on_pan_end()
    state.on_pinch_update(0.4)
    request = state.on_pinch_end()
    assert request is not None and request.target == IDENTITY
    assert state.transform == IDENTITY
    assert state.mode == MODE_IDLE


def test_double_tap_twice_restores_scale(state):
    state.open(["a", "b"], 0)
    state.on_double_tap()
    assert state.transform.saved_scale == 2.0
    state.on_double_tap()
    assert state.transform.saved_scale == 1.0


def test_pan_without_zoom_does_not_move(state):
    state.open(["a", "b"], 0)
    state.on_pan_update(100, 50)
    state.on_pan_end()
    assert state.transform.translate == (0.0, 0.0)


def test_pan_while_zoomed(state):
    state.open(["a", "b"], 0)
    state.on_double_tap()
    state.on_pan_update(12, -7)
    state.on_pan_end()
    assert (state.transform.saved_translate_x, state.transform.saved_translate_y) == (12, -7)


def test_go_to_adjacent_wraps(state, events):
    state.open(["a", "b", "c"], 2)
    request = state.go_to_adjacent("next")
    assert state.real_index == 0
    assert request.animated and request.virtual_index == 3

    state.go_to_adjacent("prev")
    assert state.real_index == 2
    assert events["index"] == [2, 0, 2]


def test_prev_three_times_cycles_back(state):
    state.open(["a", "b", "c"], 0)
    seen = []
    for _ in range(3):
        state.go_to_adjacent("prev")
        seen.append(state.real_index)
    assert seen == [2, 1, 0]


def test_single_image_disables_navigation(state):
    state.open(["only"], 0)
    assert not state.is_infinite
    assert not state.can_navigate
    assert state.go_to_adjacent("next") is None
    assert state.real_index == 0
    assert state.counter_text == ""
    assert state.position.length == 1


def test_swipe_settle_recenters_atomically(state):
    """Reaching the start of the sequence jumps to N with the real index unchanged."""
    state.open(["a", "b", "c"], 0)
    request = state.on_swipe_settle(0)
    assert request is not None and not request.animated
    assert request.virtual_index == 3
    assert state.virtual_index == 3
    assert state.real_index == 0


def test_swipe_settle_updates_real_index(state):
    state.open(["a", "b", "c"], 0)
    assert state.on_swipe_settle(4) is None
    assert state.real_index == 1
    assert state.counter_text == "2 / 3"


def test_changing_image_resets_transform(state, events):
    state.open(["a", "b", "c"], 0)
    state.on_double_tap()
    state.on_pan_update(5, 5)
    state.on_pan_end()
    state.on_swipe_settle(4)
    assert state.transform == IDENTITY
    assert events["transform"][-1] == IDENTITY


def test_zoom_buttons_and_wheel_stay_in_bounds(state):
    state.open(["a"], 0)
    for _ in range(30):
        state.zoom_in()
    assert state.transform.saved_scale == 3.0
    assert state.zoom_percent == 300
    for _ in range(30):
        state.on_wheel(-1)
    assert state.transform == IDENTITY
    state.on_wheel(2)
    assert state.transform.saved_scale == pytest.approx(1.2)
    state.zoom_out()
    assert state.transform == IDENTITY


def test_go_to_from_indicator(state):
    state.open(["a", "b", "c", "d"], 0)
    request = state.go_to(2)
    assert state.real_index == 2
    assert request.virtual_index == 6


def test_gestures_are_ignored_when_closed(state, events):
    state.on_pinch_update(2.0)
    assert state.on_pinch_end() is None
    assert state.on_double_tap() is None
    state.on_pan_update(10, 10)
    assert state.transform == IDENTITY
    assert events["transform"] == []


def test_custom_config_bounds():
    state = ViewerState(ViewerConfig(max_scale=5.0, double_tap_scale=4.0))
    state.open(["a", "b"], 0)
    state.on_double_tap()
    assert state.transform.saved_scale == 4.0
    state.on_pinch_update(2.0)
    state.on_pinch_end()
    assert state.transform.saved_scale == 5.0


def test_state_modules_have_no_qt_imports():
    """Transform, carousel, config and state logic run without PySide6."""
    core = Path(__file__).parent.parent / "LightboxViewer" / "core"
    for name in ("transform.py", "carousel.py", "config.py", "viewer_state.py"):
        source = (core / name).read_text(encoding="utf-8")
        assert "PySide6" not in source, f"{name} should not import Qt"
