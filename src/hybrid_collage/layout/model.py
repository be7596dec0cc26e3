"""Value types shared by the layout engine and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from hybrid_collage.constants import (
    ORIENTATION_LANDSCAPE,
    ORIENTATION_PORTRAIT,
)

if TYPE_CHECKING:  # pragma: no cover
    from hybrid_collage.type_defs import Orientation, Size


@dataclass(frozen=True)
class ImageDescriptor:
    """
    An input image as seen by the layout engine.

    ``handle`` is opaque to the layout code. Images read from disk use
    their path. Both dimensions must be strictly positive; that is
    validated by whoever builds the descriptor.
    """

    handle: Any
    width: int
    height: int

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    @property
    def orientation(self) -> Orientation:
        """Landscape when strictly wider than tall, otherwise portrait."""
        if self.width > self.height:
            return ORIENTATION_LANDSCAPE
        return ORIENTATION_PORTRAIT

    @property
    def size(self) -> Size:
        """Return (width, height)."""
        return self.width, self.height


@dataclass(frozen=True)
class RowPattern:
    """Shape of a candidate row: one orientation tag per image."""

    orientations: tuple[Orientation, ...]

    @property
    def count(self) -> int:
        """Number of images the row consumes."""
        return len(self.orientations)

    @property
    def is_mixed(self) -> bool:
        """True when the row holds both landscape and portrait images."""
        return len(set(self.orientations)) > 1


@dataclass(frozen=True)
class PlacementRect:
    """Final position and size of one image on the canvas."""

    image: ImageDescriptor
    x: int
    y: int
    width: int
    height: int

    @property
    def box(self) -> tuple[int, int, int, int]:
        """Return (x0, y0, x1, y1) in canvas pixels."""
        return self.x, self.y, self.x + self.width, self.y + self.height


@dataclass(frozen=True)
class RowResult:
    """One packed row, reported as soon as the engine finishes it."""

    index: int
    pattern: RowPattern
    placements: tuple[PlacementRect, ...]
    y: int
    height: int


@dataclass(frozen=True)
class CanvasLayout:
    """
    Complete layout: placements in input order plus canvas size.

    ``row_sizes`` holds the number of placements in each row, top to
    bottom. Layouts built by hand may leave it empty.
    """

    placements: tuple[PlacementRect, ...]
    canvas_width: int
    canvas_height: int
    row_sizes: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if self.row_sizes and sum(self.row_sizes) != len(self.placements):
            msg = (f"row_sizes {self.row_sizes} do not cover "
                   f"{len(self.placements)} placements")
            raise ValueError(msg)

    def __len__(self) -> int:
        return len(self.placements)

    @property
    def size(self) -> Size:
        """Return (canvas_width, canvas_height)."""
        return self.canvas_width, self.canvas_height

    @property
    def rows(self) -> list[tuple[PlacementRect, ...]]:
        """
        Split placements into rows.

        Uses ``row_sizes`` when present. Hand-built layouts without it are
        grouped by shared y coordinate, which cannot tell apart rows that
        collapse onto the same y.
        """
        if self.row_sizes:
            rows: list[tuple[PlacementRect, ...]] = []
            start = 0
            for size in self.row_sizes:
                rows.append(self.placements[start:start + size])
                start += size
            return rows

        grouped: list[list[PlacementRect]] = []
        for placement in self.placements:
            if grouped and grouped[-1][0].y == placement.y:
                grouped[-1].append(placement)
            else:
                grouped.append([placement])
        return [tuple(row) for row in grouped]


@dataclass(frozen=True)
class SourceCropRect:
    """Region of the original image to sample for a placement."""

    sx: float
    sy: float
    width: float
    height: float

    @property
    def box(self) -> tuple[float, float, float, float]:
        """Return (x0, y0, x1, y1) in source pixels."""
        return self.sx, self.sy, self.sx + self.width, self.sy + self.height
