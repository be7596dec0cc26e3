"""
Caller-owned mutable state for an interactive collage session.

The session keeps the working image order, the current selection and
whether the last render is still valid. It changes only through the
command methods below. The layout core never sees the session itself;
it is given an immutable snapshot of the image order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hybrid_collage.layout.orientation import count_orientations
from hybrid_collage.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable

    from hybrid_collage.layout.model import ImageDescriptor


@dataclass(frozen=True)
class CollageStats:
    """Counts shown alongside the current selection."""

    total: int
    landscape: int
    portrait: int

    @property
    def headline(self) -> str:
        """Return e.g. "3 photos selected"."""
        noun = "photo" if self.total == 1 else "photos"
        return f"{self.total} {noun} selected"

    @property
    def detail(self) -> str:
        """Return e.g. "1 landscape, 2 portrait"."""
        return f"{self.landscape} landscape, {self.portrait} portrait"


class CollageSession:
    """Mutable image order plus selection, driven by discrete commands."""

    def __init__(self, images: Iterable[ImageDescriptor] = ()) -> None:
        self._images: list[ImageDescriptor] = list(images)
        self._selected: int | None = None
        self._canvas_ready = False

    def __len__(self) -> int:
        return len(self._images)

    @property
    def selected_index(self) -> int | None:
        """Index of the currently selected image, if any."""
        return self._selected

    @property
    def canvas_ready(self) -> bool:
        """True when the last render still matches the image order."""
        return self._canvas_ready

    def snapshot(self) -> tuple[ImageDescriptor, ...]:
        """Return the current image order as an immutable tuple."""
        return tuple(self._images)

    def stats(self) -> CollageStats:
        """Return total, landscape and portrait counts."""
        counts = count_orientations(self._images)
        return CollageStats(
            total=counts.total,
            landscape=counts.landscape,
            portrait=counts.portrait,
        )

    def load(self, images: Iterable[ImageDescriptor]) -> None:
        """Replace the working set with ``images``."""
        self._images = list(images)
        self._selected = None
        self._canvas_ready = False

    def clear(self) -> None:
        """Drop all images and any selection."""
        self._images = []
        self._selected = None
        self._canvas_ready = False

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._images):
            msg = (f"Image index {index} out of range "
                   f"(0-{len(self._images) - 1})")
            raise ValueError(msg)

    def swap(self, first: int, second: int) -> None:
        """Exchange the images at ``first`` and ``second``."""
        self._check_index(first)
        self._check_index(second)
        images = self._images
        images[first], images[second] = images[second], images[first]
        self._selected = None
        self._canvas_ready = False
        logger.debug("Swapped images %d and %d", first, second)

    def select(self, index: int) -> bool:
        """
        Apply a thumbnail click at ``index``.

        The first click selects, clicking the selected image again
        deselects, and clicking a different image swaps the two.

        Returns:
            True if the click caused a swap.

        """
        self._check_index(index)
        if self._selected is None:
            self._selected = index
            return False
        if self._selected == index:
            self._selected = None
            return False
        self.swap(self._selected, index)
        return True

    def mark_rendered(self) -> None:
        """Record that a render of the current order has completed."""
        self._canvas_ready = True
