"""Tests for ViewerConfig validation and environment loading."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path to import LightboxViewer module
sys.path.insert(0, str(Path(__file__).parent.parent))

from LightboxViewer.core.config import ViewerConfig


def test_defaults():
    cfg = ViewerConfig()
    assert (cfg.min_scale, cfg.max_scale, cfg.double_tap_scale) == (1.0, 3.0, 2.0)
    assert cfg.base_url == ""


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_scale": 0.0},
        {"min_scale": 3.0, "max_scale": 3.0},
        {"double_tap_scale": 1.0},
        {"double_tap_scale": 3.5},
        {"zoom_step": 0.0},
        {"animation_duration_ms": -1},
        {"swipe_threshold": 1.0},
        {"request_timeout": 0},
    ],
)
def test_invalid_values_raise(kwargs):
    with pytest.raises(ValueError):
        ViewerConfig(**kwargs)


def test_from_env_reads_lightbox_variables():
    env = {
        "LIGHTBOX_BASE_URL": "https://shop.example",
        "LIGHTBOX_REQUEST_TIMEOUT": "2.5",
        "LIGHTBOX_MAX_SCALE": "4",
        "LIGHTBOX_DOUBLE_TAP_SCALE": "2.5",
    }
    cfg = ViewerConfig.from_env(env)
    assert cfg.base_url == "https://shop.example"
    assert cfg.request_timeout == 2.5
    assert cfg.max_scale == 4.0
    assert cfg.double_tap_scale == 2.5


def test_from_env_overrides_win():
    cfg = ViewerConfig.from_env({"LIGHTBOX_BASE_URL": "https://a.example"}, base_url="https://b.example")
    assert cfg.base_url == "https://b.example"
    cfg = ViewerConfig.from_env({"LIGHTBOX_BASE_URL": "https://a.example"}, base_url=None)
    assert cfg.base_url == "https://a.example"


def test_from_env_rejects_garbage():
    with pytest.raises(ValueError):
        ViewerConfig.from_env({"LIGHTBOX_MAX_SCALE": "big"})
