"""Custom widgets used by the image viewer."""

from .image_canvas import ImageCanvas
from .page_indicator import PageIndicator

__all__ = ["ImageCanvas", "PageIndicator"]
