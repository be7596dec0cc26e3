"""
Greedy row-by-row layout driver.

Walks the image sequence with a cursor, asks the pattern module for the
best row shape at each position, packs that row and stacks rows top to
bottom. The computation is a pure function of its inputs: the same
sequence and settings always give the same layout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hybrid_collage.config_defaults import (
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_SPACING,
)
from hybrid_collage.layout.model import CanvasLayout, RowResult
from hybrid_collage.layout.packing import pack_row
from hybrid_collage.layout.patterns import choose_pattern
from hybrid_collage.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

    from hybrid_collage.config import LayoutConfig
    from hybrid_collage.layout.model import ImageDescriptor, PlacementRect


def compute_layout(
    images: Sequence[ImageDescriptor],
    *,
    canvas_width: int = DEFAULT_CANVAS_WIDTH,
    spacing: int = DEFAULT_SPACING,
    on_row: Callable[[RowResult], None] | None = None,
) -> CanvasLayout:
    """
    Arrange ``images`` into rows on a canvas ``canvas_width`` wide.

    Args:
        images: Ordered image descriptors. Order is preserved exactly.
        canvas_width: Fixed width of the output canvas in pixels.
        spacing: Gap in pixels between neighbouring cells and rows.
        on_row: Optional callback invoked with each row once packed.

    Returns:
        The placements in input order with the resulting canvas height.
        An empty input gives an empty layout of height 0.

    """
    placements: list[PlacementRect] = []
    row_sizes: list[int] = []
    current_y = 0
    row_index = 0
    i = 0
    while i < len(images):
        pattern = choose_pattern(
            images, i, canvas_width=canvas_width, spacing=spacing,
        )
        if pattern is None:
            break

        row_placements, row_height = pack_row(
            images[i:i + pattern.count],
            canvas_width=canvas_width,
            spacing=spacing,
            y=current_y,
        )
        placements.extend(row_placements)
        row_sizes.append(pattern.count)
        logger.debug(
            "Row %d: %s at y=%d, widths=%s, height=%d",
            row_index,
            "/".join(pattern.orientations),
            current_y,
            [p.width for p in row_placements],
            row_height,
        )
        if on_row is not None:
            on_row(RowResult(
                index=row_index,
                pattern=pattern,
                placements=tuple(row_placements),
                y=current_y,
                height=row_height,
            ))

        current_y += row_height + spacing
        i += pattern.count
        row_index += 1

    canvas_height = current_y - spacing if row_index > 0 else 0
    return CanvasLayout(
        placements=tuple(placements),
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        row_sizes=tuple(row_sizes),
    )


class LayoutEngine:
    """Layout driver bound to an injected canvas width and spacing."""

    def __init__(
        self,
        canvas_width: int = DEFAULT_CANVAS_WIDTH,
        spacing: int = DEFAULT_SPACING,
    ) -> None:
        self.canvas_width = canvas_width
        self.spacing = spacing

    @classmethod
    def from_config(cls, config: LayoutConfig) -> LayoutEngine:
        """Build an engine from the ``[layout]`` configuration section."""
        return cls(canvas_width=config.canvas_width, spacing=config.spacing)

    def compute(
        self,
        images: Sequence[ImageDescriptor],
        on_row: Callable[[RowResult], None] | None = None,
    ) -> CanvasLayout:
        """Compute the layout for ``images`` with this engine's settings."""
        return compute_layout(
            images,
            canvas_width=self.canvas_width,
            spacing=self.spacing,
            on_row=on_row,
        )
