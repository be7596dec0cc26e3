"""
Layout core: pattern selection, row packing and cover crops.

Everything in this package is pure computation on image dimensions; it
never opens files or touches pixels.
"""

from __future__ import annotations

from . import crop, engine, model, orientation, packing, patterns
from .crop import cover_crop
from .engine import LayoutEngine, compute_layout
from .model import (
    CanvasLayout,
    ImageDescriptor,
    PlacementRect,
    RowPattern,
    RowResult,
    SourceCropRect,
)
from .orientation import (
    OrientationCounts,
    classify,
    count_orientations,
    is_landscape,
)
from .packing import pack_row
from .patterns import choose_pattern, generate_candidates, score_pattern

__all__ = [
    "CanvasLayout",
    "ImageDescriptor",
    "LayoutEngine",
    "OrientationCounts",
    "PlacementRect",
    "RowPattern",
    "RowResult",
    "SourceCropRect",
    "choose_pattern",
    "classify",
    "compute_layout",
    "count_orientations",
    "cover_crop",
    "crop",
    "engine",
    "generate_candidates",
    "is_landscape",
    "model",
    "orientation",
    "pack_row",
    "packing",
    "patterns",
    "score_pattern",
]
