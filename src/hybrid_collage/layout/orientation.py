"""Landscape/portrait classification and the display-only summary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hybrid_collage.constants import ORIENTATION_LANDSCAPE

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable

    from hybrid_collage.layout.model import ImageDescriptor
    from hybrid_collage.type_defs import Orientation


def classify(image: ImageDescriptor) -> Orientation:
    """Return the orientation of ``image``; squares count as portrait."""
    return image.orientation


def is_landscape(image: ImageDescriptor) -> bool:
    """Return True when ``image`` is strictly wider than tall."""
    return classify(image) == ORIENTATION_LANDSCAPE


@dataclass(frozen=True)
class OrientationCounts:
    """Landscape and portrait totals for a set of images."""

    landscape: int
    portrait: int

    @property
    def total(self) -> int:
        """Total number of images counted."""
        return self.landscape + self.portrait

    def describe(self) -> str:
        """Return the short "N landscape, M portrait" summary."""
        return f"{self.landscape} landscape, {self.portrait} portrait"


def count_orientations(images: Iterable[ImageDescriptor]) -> OrientationCounts:
    """Count landscape and portrait images."""
    landscape = 0
    portrait = 0
    for image in images:
        if is_landscape(image):
            landscape += 1
        else:
            portrait += 1
    return OrientationCounts(landscape=landscape, portrait=portrait)
