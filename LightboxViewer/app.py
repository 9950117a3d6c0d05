"""Application entry point.

This module provides the main() function that initializes the Qt application
and opens the ImageViewer on the images given on the command line.

Usage:
    lightbox-viewer photo1.jpg photo2.jpg --index 1

    # Or as a module:
    python -m LightboxViewer.app https://example.com/a.jpg b.png

    # Or from Python:
    from LightboxViewer import main
    main(["a.jpg", "b.jpg"])
"""

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication

from .core.config import ViewerConfig
from .core.logging_setup import setup_logging
from .ui.viewer import ImageViewer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lightbox-viewer", description="Fullscreen image lightbox")
    parser.add_argument("images", nargs="*", help="image files or URLs")
    parser.add_argument("-i", "--index", type=int, default=0, help="index of the first image to show")
    parser.add_argument("--base-url", default=None, help="prefix joined onto relative image references")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--windowed", action="store_true", help="do not switch to fullscreen")
    return parser


def main(argv=None):
    """Run the image viewer application.

    Args:
        argv: Command-line arguments without the program name
              (defaults to sys.argv[1:])

    Returns:
        Exit code from QApplication.exec(), or 2 when there is nothing to show
    """
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = ViewerConfig.from_env(base_url=args.base_url)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    if not args.images:
        logger.error("No images given")
        return 2

    app = QApplication.instance() or QApplication([sys.argv[0]])
    w = ImageViewer(config)
    w.closed.connect(app.quit)
    w.open(args.images, args.index)
    if not args.windowed:
        w.showFullScreen()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
