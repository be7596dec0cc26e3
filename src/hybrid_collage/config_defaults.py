"""Shared default values for user-facing configuration settings."""

# Layout
DEFAULT_CANVAS_WIDTH = 1200
DEFAULT_SPACING = 15

# Output
DEFAULT_OUTPUT_PATH = "collage.jpg"
DEFAULT_JPEG_QUALITY = 98
DEFAULT_BACKGROUND = "#ffffff"
DEFAULT_THUMBNAIL_SIZE = 120
DEFAULT_THUMBNAIL_QUALITY = 70

# Input
DEFAULT_SORT_BY_MTIME = True
DEFAULT_RECURSIVE = False
