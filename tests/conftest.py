"""
Test configuration and shared fixtures for hybrid_collage.

This module defines reusable pytest fixtures for building image
descriptors, writing small image files to disk and managing test
directories. These fixtures support all test modules in the test suite.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
import os
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

from hybrid_collage.config import CollageConfig
from hybrid_collage.constants import COLOR_MODE_RGB
from hybrid_collage.layout.model import ImageDescriptor
from hybrid_collage.logging_utils import logger


@pytest.fixture
def make_descriptors() -> Callable[..., list[ImageDescriptor]]:
    """Build descriptors from (width, height) pairs, named img0, img1..."""

    def _build(*sizes: tuple[int, int]) -> list[ImageDescriptor]:
        return [
            ImageDescriptor(handle=f"img{idx}", width=w, height=h)
            for idx, (w, h) in enumerate(sizes)
        ]

    return _build


@pytest.fixture
def write_image(tmp_path: Path) -> Callable[..., Path]:
    """
    Save a solid-color RGB image under tmp_path.

    ``mtime`` sets the file's modification time so ordering by time
    can be tested deterministically.
    """

    def _write(
        name: str,
        size: tuple[int, int],
        color: str = "red",
        *,
        mtime: float | None = None,
        directory: Path | None = None,
    ) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        Image.new(COLOR_MODE_RGB, size, color=color).save(path)
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _write


@pytest.fixture
def photo_set(write_image: Callable[..., Path], tmp_path: Path) -> list[Path]:
    """Three photos (landscape, landscape, portrait) in mtime order."""
    photos = tmp_path / "photos"
    return [
        write_image("a.jpg", (160, 90), "red",
                    mtime=1_000, directory=photos),
        write_image("b.jpg", (160, 90), "green",
                    mtime=2_000, directory=photos),
        write_image("c.jpg", (90, 160), "blue",
                    mtime=3_000, directory=photos),
    ]


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., CollageConfig]:
    """Build CollageConfig instances writing into tmp_path."""

    def _build(**sections: dict) -> CollageConfig:
        data: dict[str, dict] = {key: dict(val) for key, val in sections.items()}
        output = data.setdefault("output", {})
        output.setdefault("output", str(tmp_path / "out" / "collage.jpg"))
        return CollageConfig.model_validate(data)

    return _build


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the collage logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)
