"""LightboxViewer - A fullscreen image lightbox with gesture zoom.

This package provides a Qt-based viewer that shows one image at a time
from a fixed set of image references, with the following features:

Viewing:
    - Pinch zoom, double-tap zoom toggle, wheel and button zoom (100%-300%)
    - Drag to pan while zoomed
    - Snap back to the fitted view when a pinch ends below 100%

Navigation:
    - Horizontal swipe that wraps around endlessly in both directions
    - Previous/next buttons and arrow keys
    - Page counter and page indicator dots

Image I/O:
    - Local files and http(s) URLs (requests)
    - Relative references joined onto a configurable base URL
    - Pillow decoding with EXIF orientation

Package Structure:
    - core/: State without Qt imports (transform, carousel, viewer state),
      configuration, logging, and image I/O (which converts to QImage)
    - ui/: UI components (viewer, widgets, dialogs)

Quick Start:
    from LightboxViewer import main
    main(["a.jpg", "b.jpg"])

Dependencies:
    - PySide6: Qt for Python
    - numpy: Array operations
    - Pillow: Image decoding
    - requests: Remote image references
"""

from .app import main
from .ui import ImageViewer, HelpDialog
from .core import (
    ViewerConfig,
    ViewerState,
    ViewportTransform,
    CarouselPosition,
    load_image,
    numpy_to_qimage,
)

__version__ = "0.1.0"
__all__ = [
    "main",
    "ImageViewer",
    "HelpDialog",
    "ViewerConfig",
    "ViewerState",
    "ViewportTransform",
    "CarouselPosition",
    "load_image",
    "numpy_to_qimage",
]
