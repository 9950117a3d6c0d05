"""Image viewer package with modular components.

This package provides the ImageViewer window split into logical components:
- viewer.py: Main ImageViewer class coordinating all components
- menu_builder.py: Keyboard shortcut setup
- zoom_manager.py: Zoom/pan gestures and zoom animations
- carousel_manager.py: Page strip movement, swipe settling and re-centering
"""

from .viewer import ImageViewer

__all__ = ["ImageViewer"]
