"""Keyboard shortcut configuration for ImageViewer.

The viewer is a frameless window without a menu bar, so every command is
registered as a window-level QAction.
"""

from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtCore import Qt


def _add_action(viewer, name: str, text: str, shortcuts, slot):
    action = QAction(text, viewer)
    action.setShortcuts([QKeySequence(s) for s in shortcuts])
    action.setShortcutContext(Qt.WindowShortcut)
    action.triggered.connect(slot)
    viewer.addAction(action)
    setattr(viewer, name, action)
    return action


def create_shortcuts(viewer):
    """Create all keyboard shortcuts for the viewer.

    Args:
        viewer: ImageViewer instance
    """
    _add_action(viewer, "close_action", "閉じる", ["Esc"], lambda: viewer.close_viewer())

    # Image navigation actions
    _add_action(viewer, "prev_image_action", "前の画像", ["Left"], lambda: viewer.prev_image())
    _add_action(viewer, "next_image_action", "次の画像", ["Right"], lambda: viewer.next_image())

    # Zoom actions
    _add_action(viewer, "zoom_in_action", "拡大", ["+", "="], lambda: viewer.zoom_manager.zoom_in())
    _add_action(viewer, "zoom_out_action", "縮小", ["-"], lambda: viewer.zoom_manager.zoom_out())
    _add_action(viewer, "reset_zoom_action", "ズームリセット", ["0"], lambda: viewer.zoom_manager.reset_zoom())

    _add_action(viewer, "help_action", "ヘルプ", ["F1"], lambda: viewer.help_dialog.show())
