"""
Constants used internally by the collage builder.

These are implementation-level values that should not be overridden
via config files or CLI arguments.
"""

# Orientation tags
ORIENTATION_LANDSCAPE = "landscape"
ORIENTATION_PORTRAIT = "portrait"

# Row pattern scoring weights
PATTERN_COUNT_BONUS = 100
PATTERN_UNIFORMITY_BONUS = 1000.0
PATTERN_MIXED_BONUS = 50

# Row pattern sizes
SINGLE_ROW_COUNT = 1
PAIR_ROW_COUNT = 2
TRIPLE_ROW_COUNT = 3

# Internal color constants
COLOR_MODE_RGB = "RGB"
COLOR_WHITE = (255, 255, 255)

# Previous outputs are never fed back in as inputs
COLLAGE_OUTPUT_PATTERN = r"^collage\."

# File discovery
SUPPORTED_EXTENSIONS = frozenset({
    ".bmp",
    ".gif",
    ".jpeg",
    ".jpg",
    ".png",
    ".tif",
    ".tiff",
    ".webp",
})

# EXIF orientation tag and the values that swap width and height
EXIF_ORIENTATION_TAG = 0x0112
EXIF_TRANSPOSED_ORIENTATIONS = frozenset({5, 6, 7, 8})

# JPEG quality range accepted by Pillow
JPEG_QUALITY_MIN = 1
JPEG_QUALITY_MAX = 100
JPEG_SUFFIXES = frozenset({".jpg", ".jpeg"})

# Fallback when the requested output directory cannot be created
FALLBACK_OUTPUT_DIR = "collage_output"
