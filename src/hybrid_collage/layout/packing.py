"""Proportional width packing for a single row."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from hybrid_collage.layout.model import PlacementRect
from hybrid_collage.layout.patterns import available_width

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from hybrid_collage.layout.model import ImageDescriptor


def row_widths(
    images: Sequence[ImageDescriptor],
    avail_w: int,
) -> list[int]:
    """
    Split ``avail_w`` in proportion to each image's aspect ratio.

    Every width but the last is floored; the last takes whatever is
    left so the widths always sum to ``avail_w``.
    """
    total_aspect = sum(img.aspect_ratio for img in images)
    widths = [
        math.floor(img.aspect_ratio / total_aspect * avail_w)
        for img in images[:-1]
    ]
    widths.append(avail_w - sum(widths))
    return widths


def pack_row(
    images: Sequence[ImageDescriptor],
    *,
    canvas_width: int,
    spacing: int,
    y: int,
) -> tuple[list[PlacementRect], int]:
    """
    Lay out ``images`` left to right across the full canvas width.

    Returns the placements and the shared row height, which is the
    tallest floored height any image needs at its packed width.
    """
    widths = row_widths(
        images, available_width(canvas_width, spacing, len(images)),
    )
    row_height = max(
        math.floor(w / img.aspect_ratio)
        for img, w in zip(images, widths, strict=True)
    )

    placements: list[PlacementRect] = []
    x = 0
    for img, w in zip(images, widths, strict=True):
        placements.append(PlacementRect(img, x, y, w, row_height))
        x += w + spacing
    return placements, row_height
