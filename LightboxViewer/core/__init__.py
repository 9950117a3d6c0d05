"""Core of the viewer: transform model, carousel arithmetic, viewer state, image I/O.

Only image_io touches Qt (for the QImage conversion); the state modules
are plain Python.
"""

from .config import ViewerConfig
from .transform import IDENTITY, AnimationRequest, ViewportTransform
from .carousel import CarouselPosition, ScrollRequest
from .viewer_state import ViewerState
from .image_io import ImageLoadError, load_image, numpy_to_qimage, resolve_reference
from .logging_setup import setup_logging

__all__ = [
    "ViewerConfig",
    "IDENTITY",
    "AnimationRequest",
    "ViewportTransform",
    "CarouselPosition",
    "ScrollRequest",
    "ViewerState",
    "ImageLoadError",
    "load_image",
    "numpy_to_qimage",
    "resolve_reference",
    "setup_logging",
]
