"""Top-level orchestration: load, arrange, render and save a collage."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import hybrid_collage.image_io as hc_image_io
import hybrid_collage.render as hc_render
import hybrid_collage.runtime as hc_runtime
from hybrid_collage.layout.engine import LayoutEngine
from hybrid_collage.logging_utils import logger
from hybrid_collage.session import CollageSession, CollageStats

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Sequence

    from hybrid_collage.config import CollageConfig
    from hybrid_collage.layout.model import CanvasLayout


@dataclass(slots=True)
class CollageResult:
    """What a collage run produced."""

    layout: CanvasLayout
    stats: CollageStats
    output_path: Path | None = None
    thumbnails: list[Path] | None = None


def prepare_session(
    inputs: Iterable[str | Path],
    config: CollageConfig,
    *,
    swaps: Sequence[tuple[int, int]] = (),
) -> CollageSession:
    """
    Discover, load and order the input images.

    ``swaps`` are 0-based index pairs applied in order after loading.

    Raises:
        FileNotFoundError: If an input path does not exist.
        ValueError: If no usable image was found or a swap is out of range.

    """
    paths = hc_image_io.collect_image_paths(
        inputs, recursive=config.input.recursive,
    )
    descriptors = hc_image_io.load_descriptors(
        paths, sort_by_mtime=config.input.sort_by_mtime,
    )
    if not descriptors:
        msg = "No usable images found in the given inputs"
        raise ValueError(msg)

    session = CollageSession()
    session.load(descriptors)
    for first, second in swaps:
        session.swap(first, second)

    stats = session.stats()
    logger.info("%s (%s)", stats.headline, stats.detail)
    return session


def build_collage(
    inputs: Iterable[str | Path],
    config: CollageConfig,
    *,
    swaps: Sequence[tuple[int, int]] = (),
    render: bool = True,
) -> CollageResult:
    """
    Run the full pipeline and return the layout and output locations.

    With ``render`` disabled the collage image is not drawn or saved;
    thumbnails are still written when configured.
    """
    session = prepare_session(inputs, config, swaps=swaps)
    images = session.snapshot()

    engine = LayoutEngine.from_config(config.layout)
    layout = engine.compute(images)
    logger.info(
        "Layout: %d rows on a %dx%d canvas",
        len(layout.rows), layout.canvas_width, layout.canvas_height,
    )
    result = CollageResult(layout=layout, stats=session.stats())

    if config.output.thumbnails_dir:
        result.thumbnails = hc_image_io.save_thumbnails(
            images,
            Path(config.output.thumbnails_dir),
            size=config.output.thumbnail_size,
            quality=config.output.thumbnail_quality,
        )
    if not render:
        return result

    canvas = hc_render.render_collage(
        layout, background=config.output.background_rgb,
    )
    result.output_path = hc_runtime.save_collage(
        canvas,
        Path(config.output.output),
        quality=config.output.quality,
    )
    session.mark_rendered()
    return result


def describe_layout(layout: CanvasLayout) -> list[str]:
    """Return one human-readable line per row of ``layout``."""
    lines: list[str] = []
    position = 1
    for row_idx, row in enumerate(layout.rows, start=1):
        cells = []
        for placement in row:
            name = Path(str(placement.image.handle)).name
            cells.append(
                f"#{position} {name} {placement.width}x{placement.height}"
                f"@({placement.x},{placement.y})",
            )
            position += 1
        lines.append(f"Row {row_idx}: " + " | ".join(cells))
    lines.append(f"Canvas: {layout.canvas_width}x{layout.canvas_height}")
    return lines
