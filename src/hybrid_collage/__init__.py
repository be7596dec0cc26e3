"""Public package exports for the hybrid collage builder."""

from __future__ import annotations

from .layout import (
    CanvasLayout,
    ImageDescriptor,
    LayoutEngine,
    PlacementRect,
    SourceCropRect,
    compute_layout,
    cover_crop,
)
from .session import CollageSession

__all__ = [
    "CanvasLayout",
    "CollageSession",
    "ImageDescriptor",
    "LayoutEngine",
    "PlacementRect",
    "SourceCropRect",
    "compute_layout",
    "cover_crop",
]
