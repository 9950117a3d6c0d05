"""UI components package."""

from .viewer import ImageViewer
from .widgets import ImageCanvas, PageIndicator
from .dialogs import HelpDialog

__all__ = [
    "ImageViewer",
    "ImageCanvas",
    "PageIndicator",
    "HelpDialog",
]
