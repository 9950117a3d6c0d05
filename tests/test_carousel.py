"""Tests for the infinite carousel index arithmetic."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path to import LightboxViewer module
sys.path.insert(0, str(Path(__file__).parent.parent))

from LightboxViewer.core.carousel import CarouselPosition, ScrollRequest, clamp_index, parse_direction


@pytest.mark.parametrize("count", [2, 3, 5, 8])
def test_start_places_initial_index_in_middle_copy(count):
    """Opening at any valid index shows that index from the middle copy."""
    for initial in range(count):
        pos = CarouselPosition.start(count, initial)
        assert pos.real_index == initial, f"Expected real {initial}, got {pos.real_index}"
        assert pos.virtual_index == count + initial
        assert pos.length == 3 * count


def test_start_clamps_out_of_range_initial_index():
    assert CarouselPosition.start(3, 7).real_index == 2
    assert CarouselPosition.start(3, -4).real_index == 0


def test_single_image_is_not_tripled():
    pos = CarouselPosition.start(1, 0)
    assert not pos.is_infinite
    assert pos.length == 1
    assert pos.virtual_index == 0
    assert pos.adjacent("next") == (pos, None)
    assert pos.adjacent("prev") == (pos, None)


def test_adjacent_wraps_around_both_ends():
    """Next from the last image lands on 0; prev from 0 lands on the last."""
    last = CarouselPosition.start(4, 3)
    nxt, request = last.adjacent("next")
    assert nxt.real_index == 0
    assert request == ScrollRequest(4, animated=True)

    first = CarouselPosition.start(4, 0)
    prev, request = first.adjacent("prev")
    assert prev.real_index == 3
    assert request.virtual_index == 7


def test_prev_cycle_over_three_images():
    """images a, b, c from index 0: prev goes 2 -> 1 -> 0, always in the middle copy."""
    pos = CarouselPosition.start(3, 0)
    assert pos.virtual_index == 3
    seen = []
    for _ in range(3):
        pos, request = pos.adjacent("prev")
        seen.append(pos.real_index)
        assert 3 <= request.virtual_index <= 5
    assert seen == [2, 1, 0], f"Expected [2, 1, 0], got {seen}"


def test_settle_at_sequence_start_recenters_without_animation():
    """Reaching virtual index 0 jumps to N keeping the real index."""
    pos = CarouselPosition.start(3, 0)
    settled, request = pos.settle(0)
    assert request == ScrollRequest(3, animated=False)
    assert settled.virtual_index == 3
    assert settled.real_index == 0 % 3


def test_settle_at_sequence_end_recenters():
    pos = CarouselPosition.start(3, 0)
    settled, request = pos.settle(8)
    assert request is not None and not request.animated
    assert settled.virtual_index == 5
    assert settled.real_index == 8 % 3


def test_settle_inside_sequence_keeps_position():
    pos = CarouselPosition.start(3, 0)
    for v in range(1, 8):
        settled, request = pos.settle(v)
        assert request is None, f"Unexpected re-center at {v}"
        assert settled.virtual_index == v
        assert settled.real_index == v % 3


def test_settle_outside_sequence_recenters():
    settled, request = CarouselPosition.start(4, 1).settle(-1)
    assert settled.real_index == 3
    assert request.virtual_index == 7


def test_jump_to_targets_middle_copy():
    pos, request = CarouselPosition.start(5, 0).jump_to(3)
    assert pos.real_index == 3
    assert request.virtual_index == 8
    same, none = pos.jump_to(3)
    assert none is None and same == pos


def test_window_materializes_only_neighbours():
    pos = CarouselPosition.start(4, 0)
    assert pos.window(1) == [(3, 3), (4, 0), (5, 1)]
    assert CarouselPosition(4, 0).window(1) == [(0, 0), (1, 1)]
    assert CarouselPosition.start(1, 0).window(2) == [(0, 0)]


def test_helpers():
    assert clamp_index(10, 3) == 2
    assert clamp_index(0, 0) == 0
    assert parse_direction("next") == 1
    assert parse_direction("PREV") == -1
    assert parse_direction(-3) == -1
    with pytest.raises(ValueError):
        parse_direction("up")
    with pytest.raises(ValueError):
        parse_direction(0)
