"""
Configuration schema and loader for the collage builder.

Defines Pydantic models representing structured configuration sections
and a TOML-based config loader with validation support.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, Field, field_validator

from hybrid_collage.config_defaults import (
    DEFAULT_BACKGROUND,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_JPEG_QUALITY,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_RECURSIVE,
    DEFAULT_SORT_BY_MTIME,
    DEFAULT_SPACING,
    DEFAULT_THUMBNAIL_QUALITY,
    DEFAULT_THUMBNAIL_SIZE,
)
from hybrid_collage.constants import JPEG_QUALITY_MAX, JPEG_QUALITY_MIN

_HEX_RGB_LENGTH = 6


def parse_hex_color(text: str) -> tuple[int, int, int]:
    """Parse ``#rrggbb`` strings into RGB triples."""
    stripped = text.strip().lstrip("#")
    if len(stripped) != _HEX_RGB_LENGTH:
        msg = "color must look like #rrggbb"
        raise ValueError(msg)
    try:
        red = int(stripped[0:2], 16)
        green = int(stripped[2:4], 16)
        blue = int(stripped[4:6], 16)
    except ValueError as exc:
        msg = "color contains invalid hex digits"
        raise ValueError(msg) from exc
    return red, green, blue


class LayoutConfig(BaseModel):
    """Canvas geometry used by the layout engine."""

    canvas_width: int = Field(DEFAULT_CANVAS_WIDTH, ge=1)
    spacing: int = Field(DEFAULT_SPACING, ge=0)


class OutputConfig(BaseModel):
    """Configure the rendered collage file and optional thumbnails."""

    output: str = Field(DEFAULT_OUTPUT_PATH)
    quality: int = Field(
        DEFAULT_JPEG_QUALITY,
        ge=JPEG_QUALITY_MIN,
        le=JPEG_QUALITY_MAX,
    )
    background: str = Field(DEFAULT_BACKGROUND)
    thumbnails_dir: str | None = None
    thumbnail_size: int = Field(DEFAULT_THUMBNAIL_SIZE, ge=1)
    thumbnail_quality: int = Field(
        DEFAULT_THUMBNAIL_QUALITY,
        ge=JPEG_QUALITY_MIN,
        le=JPEG_QUALITY_MAX,
    )

    @field_validator("background")
    @classmethod
    def _check_background(cls, value: str) -> str:
        parse_hex_color(value)
        return value

    @property
    def background_rgb(self) -> tuple[int, int, int]:
        """Background color as an RGB triple."""
        return parse_hex_color(self.background)


class InputConfig(BaseModel):
    """Control how input images are discovered and ordered."""

    sort_by_mtime: bool = DEFAULT_SORT_BY_MTIME
    recursive: bool = DEFAULT_RECURSIVE


class CollageConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml, grouping related parameters
    under logical categories.
    """

    layout: LayoutConfig = Field(
        default_factory=lambda: LayoutConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )
    input: InputConfig = Field(
        default_factory=lambda: InputConfig.model_validate({}),
    )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> CollageConfig:
        """
        Load a collage configuration from a TOML file.

        Returns a validated CollageConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return CollageConfig.model_validate(doc.unwrap())


# CLI argument name -> (config section, field name)
_CLI_OVERRIDES: dict[str, tuple[str, str]] = {
    "canvas_width": ("layout", "canvas_width"),
    "spacing": ("layout", "spacing"),
    "output": ("output", "output"),
    "quality": ("output", "quality"),
    "background": ("output", "background"),
    "thumbnails": ("output", "thumbnails_dir"),
    "recursive": ("input", "recursive"),
    "sort_by_mtime": ("input", "sort_by_mtime"),
}


def build_config_from_cli(
    args: Mapping[str, Any],
    base_config: CollageConfig | None = None,
) -> CollageConfig:
    """
    Merge CLI values on top of ``base_config`` (or the defaults).

    Only keys present in ``args`` with a non-None value override the
    base; argparse defaults are expected to be suppressed or None.
    """
    base = base_config or CollageConfig.model_validate({})
    data = base.model_dump()
    for arg_name, (section, field) in _CLI_OVERRIDES.items():
        value = args.get(arg_name)
        if value is not None:
            data[section][field] = value
    return CollageConfig.model_validate(data)
