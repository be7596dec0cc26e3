"""Image discovery, dimension reading and thumbnail generation."""
from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image, ImageOps

from hybrid_collage.config_defaults import (
    DEFAULT_THUMBNAIL_QUALITY,
    DEFAULT_THUMBNAIL_SIZE,
)
from hybrid_collage.constants import (
    COLLAGE_OUTPUT_PATTERN,
    COLOR_MODE_RGB,
    EXIF_ORIENTATION_TAG,
    EXIF_TRANSPOSED_ORIENTATIONS,
    SUPPORTED_EXTENSIONS,
)
from hybrid_collage.layout.model import ImageDescriptor
from hybrid_collage.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Sequence

    from hybrid_collage.type_defs import Size

_COLLAGE_OUTPUT_RE = re.compile(COLLAGE_OUTPUT_PATTERN, re.IGNORECASE)


def is_collage_output(path: Path) -> bool:
    """Return True for files named like a previously saved collage."""
    return bool(_COLLAGE_OUTPUT_RE.match(path.name))


def _is_candidate(path: Path) -> bool:
    return (
        path.suffix.lower() in SUPPORTED_EXTENSIONS
        and not is_collage_output(path)
    )


def collect_image_paths(
    inputs: Iterable[str | Path],
    *,
    recursive: bool = False,
) -> list[Path]:
    """
    Expand files and directories into a list of image paths.

    Directories contribute their image files in name order. Explicitly
    named files are kept whatever their extension, except previously
    written collages. Duplicates are dropped, first occurrence wins.

    Raises:
        FileNotFoundError: If an input path does not exist.

    """
    found: list[Path] = []
    for raw in inputs:
        path = Path(raw)
        if path.is_dir():
            pattern = "**/*" if recursive else "*"
            found.extend(
                p for p in sorted(path.glob(pattern))
                if p.is_file() and _is_candidate(p)
            )
        elif path.is_file():
            if is_collage_output(path):
                logger.info("Skipping previous collage output: %s", path)
                continue
            found.append(path)
        else:
            msg = f"Input path not found: {raw}"
            raise FileNotFoundError(msg)

    seen: set[Path] = set()
    unique: list[Path] = []
    for path in found:
        key = path.resolve()
        if key not in seen:
            seen.add(key)
            unique.append(path)
    return unique


def oriented_size(img: Image.Image) -> Size:
    """Return the display size of ``img`` after applying EXIF rotation."""
    width, height = img.size
    orientation = img.getexif().get(EXIF_ORIENTATION_TAG)
    if orientation in EXIF_TRANSPOSED_ORIENTATIONS:
        return height, width
    return width, height


def read_descriptor(path: str | Path) -> ImageDescriptor:
    """
    Read an image's dimensions without decoding its pixels.

    Args:
        path: Path to the image file

    Returns:
        Descriptor whose handle is the image path

    Raises:
        FileNotFoundError: If the image file does not exist
        OSError: If the image cannot be opened
        ValueError: If the image reports a non-positive dimension

    """
    image_path = Path(path)
    try:
        with Image.open(image_path) as img:
            width, height = oriented_size(img)
    except FileNotFoundError as e:
        msg = f"Image file not found: '{image_path}'"
        raise FileNotFoundError(msg) from e
    except OSError as e:
        msg = f"Error loading image '{image_path}': {e!s}"
        raise OSError(msg) from e

    if width <= 0 or height <= 0:
        msg = f"Image has invalid dimensions: {width}x{height} ({image_path})"
        raise ValueError(msg)
    return ImageDescriptor(handle=image_path, width=width, height=height)


def load_descriptors(
    paths: Sequence[str | Path],
    *,
    sort_by_mtime: bool = True,
) -> list[ImageDescriptor]:
    """
    Build descriptors for ``paths``, skipping files that cannot be read.

    When ``sort_by_mtime`` is set the result is ordered by file
    modification time, oldest first; equal times keep input order.
    """
    descriptors: list[ImageDescriptor] = []
    mtimes: dict[Path, float] = {}
    total = len(paths)
    for idx, raw in enumerate(paths, start=1):
        path = Path(raw)
        logger.debug("Loading %s (%d/%d)", path.name, idx, total)
        try:
            descriptor = read_descriptor(path)
        except (OSError, ValueError) as exc:
            logger.warning("Skipping %s: %s", path, exc)
            continue
        descriptors.append(descriptor)
        mtimes[path] = path.stat().st_mtime

    if sort_by_mtime:
        descriptors.sort(key=lambda d: mtimes[d.handle])

    logger.info("Loaded %d of %d images", len(descriptors), total)
    return descriptors


def open_oriented(path: str | Path) -> Image.Image:
    """Open an image, apply its EXIF rotation and convert to RGB."""
    image_path = Path(path)
    try:
        with Image.open(image_path) as img:
            transposed = ImageOps.exif_transpose(img)
            return transposed.convert(COLOR_MODE_RGB)
    except FileNotFoundError as e:
        msg = f"Image file not found: '{image_path}'"
        raise FileNotFoundError(msg) from e
    except OSError as e:
        msg = f"Error loading image '{image_path}': {e!s}"
        raise OSError(msg) from e


def make_thumbnail(
    img: Image.Image,
    size: int = DEFAULT_THUMBNAIL_SIZE,
) -> Image.Image:
    """Return an RGB copy of ``img`` scaled to fit a ``size`` square."""
    thumb = img.convert(COLOR_MODE_RGB)
    thumb.thumbnail((size, size), Image.Resampling.LANCZOS)
    return thumb


def thumbnail_name(index: int, path: Path) -> str:
    """Build the file name for the thumbnail at 1-based ``index``."""
    stem = path.stem.replace(" ", "_")
    return f"thumb_{index:03d}_{stem}.jpg"


def save_thumbnails(
    images: Sequence[ImageDescriptor],
    out_dir: Path,
    *,
    size: int = DEFAULT_THUMBNAIL_SIZE,
    quality: int = DEFAULT_THUMBNAIL_QUALITY,
) -> list[Path]:
    """
    Write one JPEG thumbnail per image, numbered in layout order.

    The numbers match the 1-based indices accepted by ``--swap``.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for idx, descriptor in enumerate(images, start=1):
        source = Path(descriptor.handle)
        thumb = make_thumbnail(open_oriented(source), size)
        target = out_dir / thumbnail_name(idx, source)
        thumb.save(target, format="JPEG", quality=quality)
        written.append(target)
    logger.info("Wrote %d thumbnails to %s", len(written), out_dir)
    return written
