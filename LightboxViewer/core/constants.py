"""Application-wide constants for LightboxViewer.

This module contains shared constants used across the application.
"""

# Zoom scale limits
MIN_ZOOM_SCALE = 1.0  # fit to page
MAX_ZOOM_SCALE = 3.0

# Zoom level reached by a double tap from the fitted state
DOUBLE_TAP_SCALE = 2.0

# Step sizes for the zoom buttons and one mouse wheel notch
ZOOM_STEP = 0.2
WHEEL_ZOOM_STEP = 0.1

# Animation durations (milliseconds)
ZOOM_ANIMATION_MS = 250
SCROLL_ANIMATION_MS = 300

# Fraction of the page width a drag must travel to change page
SWIPE_THRESHOLD = 0.2

# Number of concatenated copies of the image set backing the infinite carousel
CAROUSEL_COPIES = 3

# Network timeout for remote image references (seconds)
REQUEST_TIMEOUT = 10.0
