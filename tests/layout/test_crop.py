"""Tests for cover crop computation."""

from __future__ import annotations

import random

import pytest

from hybrid_collage.layout.crop import cover_crop
from hybrid_collage.layout.engine import compute_layout
from hybrid_collage.layout.model import (
    ImageDescriptor,
    PlacementRect,
    SourceCropRect,
)


def _placement(size: tuple[int, int], cell: tuple[int, int]) -> PlacementRect:
    return PlacementRect(ImageDescriptor("x", *size), 0, 0, *cell)


def test_wider_image_trims_width() -> None:
    crop = cover_crop(_placement((1600, 900), (300, 200)))
    assert crop == SourceCropRect(sx=125.0, sy=0.0, width=1350.0, height=900.0)


def test_taller_image_trims_height() -> None:
    crop = cover_crop(_placement((900, 1600), (300, 200)))
    assert crop == SourceCropRect(sx=0.0, sy=500.0, width=900.0, height=600.0)


def test_matching_aspect_uses_whole_image() -> None:
    crop = cover_crop(_placement((1500, 1000), (300, 200)))
    assert crop.box == (0.0, 0.0, 1500.0, 1000.0)


def test_explicit_source_size_overrides_descriptor() -> None:
    """Renderers may pass the decoded size of the actual pixels."""
    crop = cover_crop(_placement((1600, 900), (300, 200)), (800, 450))
    assert crop == SourceCropRect(sx=62.5, sy=0.0, width=675.0, height=450.0)


@pytest.mark.parametrize("seed", range(10))
def test_crops_are_contained_and_centered(seed: int) -> None:
    rng = random.Random(seed)
    images = [
        ImageDescriptor(idx, rng.randint(200, 4000), rng.randint(200, 4000))
        for idx in range(rng.randint(1, 12))
    ]
    layout = compute_layout(images)

    for placement in layout.placements:
        img_w, img_h = placement.image.size
        crop = cover_crop(placement)
        assert crop.sx >= 0
        assert crop.sy >= 0
        assert crop.sx + crop.width <= img_w + 1e-9
        assert crop.sy + crop.height <= img_h + 1e-9

        # only one axis is trimmed, and it is trimmed evenly
        assert crop.sx == 0 or crop.sy == 0
        left, right = crop.sx, img_w - (crop.sx + crop.width)
        top, bottom = crop.sy, img_h - (crop.sy + crop.height)
        assert left == pytest.approx(right, abs=1e-6)
        assert top == pytest.approx(bottom, abs=1e-6)

        # the crop keeps the cell's shape
        assert crop.width / crop.height == pytest.approx(
            placement.width / placement.height, rel=1e-9,
        )


def test_zero_height_cell_gives_empty_centered_strip() -> None:
    layout = compute_layout([ImageDescriptor("wide", 5000, 1)])
    (placement,) = layout.placements
    assert (placement.width, placement.height) == (1200, 0)

    crop = cover_crop(placement)
    assert crop == SourceCropRect(sx=0.0, sy=0.5, width=5000.0, height=0.0)


def test_zero_width_cell_gives_empty_centered_strip() -> None:
    crop = cover_crop(_placement((1, 5000), (0, 40)))
    assert crop == SourceCropRect(sx=0.5, sy=0.0, width=0.0, height=5000.0)
