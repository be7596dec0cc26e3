"""
Rasterize a computed layout onto a Pillow canvas.

For every placement the cover crop is sampled from the source image and
resampled into the destination cell, so each cell is filled without
distortion.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from PIL import Image
from tqdm import tqdm

from hybrid_collage.constants import COLOR_MODE_RGB, COLOR_WHITE
from hybrid_collage.image_io import open_oriented
from hybrid_collage.layout.crop import cover_crop
from hybrid_collage.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable

    from hybrid_collage.layout.model import CanvasLayout, PlacementRect
    from hybrid_collage.type_defs import RGB


class ProgressReporter(Protocol):
    """Protocol capturing the subset of tqdm's interface we rely on."""

    def update(self, n: float | None = 1) -> bool | None:
        """Advance the progress display by ``n`` units."""

    def close(self) -> None:
        """Release any resources associated with the display."""


def draw_placement(
    canvas: Image.Image,
    source: Image.Image,
    placement: PlacementRect,
) -> None:
    """Paste the cover-cropped ``source`` into ``placement`` on canvas."""
    src_w, src_h = source.size
    x0, y0, x1, y1 = cover_crop(placement, source.size).box
    # float sums can overshoot the edge by an ulp, which Pillow rejects
    box = (x0, y0, min(x1, src_w), min(y1, src_h))
    cell = source.resize(
        (placement.width, placement.height),
        Image.Resampling.LANCZOS,
        box=box,
    )
    canvas.paste(cell, (placement.x, placement.y))


def render_collage(
    layout: CanvasLayout,
    *,
    opener: Callable[[object], Image.Image] = open_oriented,
    background: RGB = COLOR_WHITE,
    progress: ProgressReporter | None = None,
) -> Image.Image:
    """
    Draw every placement of ``layout`` onto a new RGB canvas.

    Args:
        layout: Layout produced by the engine.
        opener: Turns a descriptor handle into a Pillow image.
        background: Fill color for the gaps between cells.
        progress: Optional progress reporter; a tqdm bar is used when
            omitted.

    Returns:
        The rendered canvas.

    Raises:
        ValueError: If the layout has no placements.

    """
    if not layout.placements:
        msg = "No images to render"
        raise ValueError(msg)

    canvas = Image.new(COLOR_MODE_RGB, layout.size, background)

    owns_progress = progress is None
    bar: ProgressReporter = (
        progress if progress is not None
        else tqdm(total=len(layout), desc="Rendering collage", unit="img")
    )
    try:
        for placement in layout.placements:
            if placement.width <= 0 or placement.height <= 0:
                logger.warning(
                    "Skipping %s: cell is %dx%d",
                    placement.image.handle,
                    placement.width,
                    placement.height,
                )
            else:
                with opener(placement.image.handle) as source:
                    draw_placement(canvas, source, placement)
            bar.update(1)
    finally:
        if owns_progress:
            bar.close()

    logger.info(
        "Rendered %d images onto a %dx%d canvas",
        len(layout), layout.canvas_width, layout.canvas_height,
    )
    return canvas
