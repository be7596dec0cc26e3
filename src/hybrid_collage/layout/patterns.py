"""
Row pattern generation and scoring.

At each cursor position the engine considers at most two shapes: the
pair starting at the cursor, and a triple when the next three images are
all portrait. The last remaining image always gets a full-width row of
its own. Candidates are scored and the highest score wins; ties go to
the candidate generated first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hybrid_collage.constants import (
    ORIENTATION_PORTRAIT,
    PAIR_ROW_COUNT,
    PATTERN_COUNT_BONUS,
    PATTERN_MIXED_BONUS,
    PATTERN_UNIFORMITY_BONUS,
    SINGLE_ROW_COUNT,
    TRIPLE_ROW_COUNT,
)
from hybrid_collage.layout.model import RowPattern
from hybrid_collage.layout.orientation import classify

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from hybrid_collage.layout.model import ImageDescriptor


def available_width(canvas_width: int, spacing: int, count: int) -> int:
    """Return the canvas width left for ``count`` images after gaps."""
    return canvas_width - spacing * (count - 1)


def _pattern_for(images: Sequence[ImageDescriptor]) -> RowPattern:
    return RowPattern(tuple(classify(img) for img in images))


def is_terminal(images: Sequence[ImageDescriptor], start: int) -> bool:
    """Return True when exactly one image remains at ``start``."""
    return start == len(images) - 1


def generate_candidates(
    images: Sequence[ImageDescriptor],
    start: int,
) -> list[RowPattern]:
    """
    Enumerate the legal row patterns beginning at ``start``.

    Returns a single forced one-image pattern when only one image is
    left, the pair pattern plus an optional all-portrait triple
    otherwise, and an empty list once the cursor has run off the end.
    """
    if is_terminal(images, start):
        return [_pattern_for(images[start:start + SINGLE_ROW_COUNT])]

    remaining = len(images) - start
    if remaining < PAIR_ROW_COUNT:
        return []

    candidates = [_pattern_for(images[start:start + PAIR_ROW_COUNT])]

    if remaining >= TRIPLE_ROW_COUNT:
        triple = _pattern_for(images[start:start + TRIPLE_ROW_COUNT])
        if all(tag == ORIENTATION_PORTRAIT for tag in triple.orientations):
            candidates.append(triple)

    return candidates


def score_pattern(
    images: Sequence[ImageDescriptor],
    start: int,
    pattern: RowPattern,
    *,
    canvas_width: int,
    spacing: int,
) -> float:
    """
    Return the desirability of placing ``pattern`` at ``start``.

    Heights are estimated with an equal-width split of the row. The
    height term is a running-max deviation: each image's trial height is
    compared with the tallest height seen so far in scan order, so the
    result depends on the order of images within the row.
    """
    count = pattern.count
    item_width = available_width(canvas_width, spacing, count) / count

    max_height = 0.0
    height_variance = 0.0
    for image in images[start:start + count]:
        height = item_width / image.aspect_ratio
        max_height = max(max_height, height)
        height_variance += abs(height - max_height)

    count_bonus = PATTERN_COUNT_BONUS * count
    uniformity_bonus = PATTERN_UNIFORMITY_BONUS / (1 + height_variance)
    mixed_bonus = PATTERN_MIXED_BONUS if pattern.is_mixed else 0
    return count_bonus + uniformity_bonus + mixed_bonus


def choose_pattern(
    images: Sequence[ImageDescriptor],
    start: int,
    *,
    canvas_width: int,
    spacing: int,
) -> RowPattern | None:
    """Pick the best-scoring pattern at ``start``, or None at the end."""
    candidates = generate_candidates(images, start)
    if not candidates:
        return None
    if is_terminal(images, start):
        return candidates[0]

    best = candidates[0]
    best_score = float("-inf")
    for candidate in candidates:
        score = score_pattern(
            images, start, candidate,
            canvas_width=canvas_width, spacing=spacing,
        )
        if score > best_score:
            best, best_score = candidate, score
    return best
