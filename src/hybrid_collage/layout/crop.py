"""Centered "cover" crop computation for finished placements."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hybrid_collage.layout.model import SourceCropRect

if TYPE_CHECKING:  # pragma: no cover
    from hybrid_collage.layout.model import PlacementRect
    from hybrid_collage.type_defs import Size


def cover_crop(
    placement: PlacementRect,
    source_size: Size | None = None,
) -> SourceCropRect:
    """
    Return the source region that fills ``placement`` without distortion.

    The region has the placement's aspect ratio, spans the full source
    along one axis and is centered along the other, trimmed axis.
    ``source_size`` defaults to the size recorded on the placement's
    image descriptor.

    A cell with no height gives a zero-height strip across the middle
    of the source; a cell with no width gives a zero-width strip down
    its middle.
    """
    img_w, img_h = source_size or placement.image.size
    if placement.height <= 0:
        return SourceCropRect(sx=0.0, sy=img_h / 2, width=float(img_w),
                              height=0.0)
    if placement.width <= 0:
        return SourceCropRect(sx=img_w / 2, sy=0.0, width=0.0,
                              height=float(img_h))

    target_aspect = placement.width / placement.height
    image_aspect = img_w / img_h

    if image_aspect > target_aspect:
        s_height = float(img_h)
        s_width = min(float(img_w), s_height * target_aspect)
        return SourceCropRect(
            sx=(img_w - s_width) / 2,
            sy=0.0,
            width=s_width,
            height=s_height,
        )

    s_width = float(img_w)
    s_height = min(float(img_h), s_width / target_aspect)
    return SourceCropRect(
        sx=0.0,
        sy=(img_h - s_height) / 2,
        width=s_width,
        height=s_height,
    )
