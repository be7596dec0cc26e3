"""Helpers for managing output locations and the saved collage."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from hybrid_collage.config_defaults import DEFAULT_JPEG_QUALITY
from hybrid_collage.constants import (
    COLOR_MODE_RGB,
    FALLBACK_OUTPUT_DIR,
    JPEG_SUFFIXES,
)
from hybrid_collage.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable

    from PIL import Image


def setup_output_directory(
    output_path: str,
    path_factory: Callable[[str], Path] = Path,
) -> Path:
    """
    Create the output directory if needed and return its resolved path.

    Falls back to ``collage_output`` on failure to create the desired
    directory to keep the run from aborting.
    """
    resolved_path = path_factory(output_path)
    try:
        resolved_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Failed to create output directory: %s", exc)
        fallback_path = path_factory(FALLBACK_OUTPUT_DIR)
        fallback_path.mkdir(parents=True, exist_ok=True)
        logger.info("Using fallback directory: %s", fallback_path)
        return fallback_path
    return resolved_path


def save_collage(
    canvas: Image.Image,
    out_path: Path,
    *,
    quality: int = DEFAULT_JPEG_QUALITY,
) -> Path:
    """
    Write ``canvas`` to ``out_path`` and return the path actually used.

    JPEG targets are written at ``quality``; any other suffix is saved
    in the format Pillow infers from it.
    """
    out_dir = setup_output_directory(str(out_path.parent))
    target = out_dir / out_path.name

    if target.suffix.lower() in JPEG_SUFFIXES:
        canvas.convert(COLOR_MODE_RGB).save(
            target, format="JPEG", quality=quality,
        )
    else:
        canvas.save(target)

    logger.info("Collage saved to: %s", target)
    return target
