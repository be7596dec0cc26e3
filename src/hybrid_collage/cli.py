"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from pydantic import ValidationError

import hybrid_collage.config as hc_config
import hybrid_collage.main as hc_main
from hybrid_collage.config_defaults import (
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_JPEG_QUALITY,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_SPACING,
)
from hybrid_collage.logging_utils import logger, set_verbosity
from hybrid_collage.runtime.version import resolve_project_version

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

T = TypeVar("T")

_SWAP_PARTS = 2


def positive_int(text: str) -> int:
    """Argparse-style validator that enforces a strictly positive integer."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = "must be an integer"
        raise ValueError(msg) from exc
    if value <= 0:
        msg = "must be positive"
        raise ValueError(msg)
    return value


def non_negative_int(text: str) -> int:
    """Argparse-style validator for integers >= 0."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = "must be an integer"
        raise ValueError(msg) from exc
    if value < 0:
        msg = "must not be negative"
        raise ValueError(msg)
    return value


def swap_pair(text: str) -> tuple[int, int]:
    """Parse ``I,J`` (1-based positions) into a 0-based index pair."""
    parts = text.split(",")
    if len(parts) != _SWAP_PARTS:
        msg = "swap must look like I,J, e.g., 2,5"
        raise ValueError(msg)
    first, second = (positive_int(part.strip()) for part in parts)
    return first - 1, second - 1


def _wrap_validator[T](
    validator: Callable[[str], T],
    error_cls: type[argparse.ArgumentTypeError] = argparse.ArgumentTypeError,
) -> Callable[[str], T]:
    """Convert ``ValueError`` from a validator into ``ArgumentTypeError``."""

    def wrapper(text: str) -> T:
        try:
            return validator(text)
        except ValueError as exc:
            raise error_cls(str(exc)) from exc

    return wrapper


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        description=(
            "Arrange photos into a fixed-width collage of one, two or "
            "three images per row, keeping their order."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "hybrid-collage photos/\n"
            "hybrid-collage a.jpg b.jpg c.jpg --output out/collage.jpg\n"
            "hybrid-collage photos/ --thumbnails thumbs --layout-only\n"
            "hybrid-collage photos/ --swap 2,5 --swap 1,3\n\n"
            "Note:\n"
            "  Files named collage.* are always skipped so a previous "
            "result is never included."
        ),
    )
    p.add_argument(
        "inputs", nargs="*", type=Path,
        help="Image files or directories of images")
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")

    layout = p.add_argument_group("layout")
    layout.add_argument(
        "--canvas-width", type=_wrap_validator(positive_int),
        help=f"Canvas width in pixels (default: {DEFAULT_CANVAS_WIDTH})")
    layout.add_argument(
        "--spacing", type=_wrap_validator(non_negative_int),
        help=f"Gap between cells in pixels (default: {DEFAULT_SPACING})")
    layout.add_argument(
        "--swap", type=_wrap_validator(swap_pair), action="append",
        default=[], metavar="I,J",
        help=(
            "Swap the images at 1-based positions I and J before layout. "
            "May be repeated; swaps apply in order."
        ))
    layout.add_argument(
        "--layout-only", action="store_true",
        help="Print the computed rows and exit without rendering")

    output = p.add_argument_group("output")
    output.add_argument(
        "--output", type=str,
        help=f"Output image path (default: {DEFAULT_OUTPUT_PATH})")
    output.add_argument(
        "--quality", type=_wrap_validator(positive_int),
        help=f"JPEG quality 1-100 (default: {DEFAULT_JPEG_QUALITY})")
    output.add_argument(
        "--background", type=str,
        help="Background color as hex like #ffffff")
    output.add_argument(
        "--thumbnails", type=str, metavar="DIR",
        help="Write numbered thumbnails of the ordered inputs to DIR")

    inputs = p.add_argument_group("input")
    inputs.add_argument(
        "--no-sort", dest="sort_by_mtime", action="store_false",
        default=None,
        help="Keep the given order instead of sorting by modification time")
    inputs.add_argument(
        "--recursive", action="store_true", default=None,
        help="Search directories recursively")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without building a collage")
    cfg.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log every packed row")

    return p


def log_parameters(cfg: hc_config.CollageConfig, n_inputs: int) -> None:
    """Log the effective settings for this run."""
    logger.info("Inputs: %d path(s)", n_inputs)
    logger.info("Canvas Width: %d", cfg.layout.canvas_width)
    logger.info("Spacing: %d", cfg.layout.spacing)
    logger.info("Output: %s", cfg.output.output)
    logger.info("JPEG Quality: %d", cfg.output.quality)
    logger.info("Background: %s", cfg.output.background)
    logger.info("Sort by Modification Time: %s",
                "Enabled" if cfg.input.sort_by_mtime else "Disabled")


def run_from_args(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> int:
    """Build a collage from parsed command-line arguments."""
    set_verbosity(verbose=args.verbose)
    if args.validate_config_only and not args.config:
        parser.error("--validate-config-only requires --config")

    base_cfg: hc_config.CollageConfig | None = None
    try:
        if args.config:
            base_cfg = hc_config.ConfigLoader.load(args.config)
            if args.validate_config_only:
                logger.info("Config %s validated successfully.", args.config)
                return 0
        cfg = hc_config.build_config_from_cli(vars(args), base_config=base_cfg)
    except (FileNotFoundError, ValidationError) as exc:
        parser.error(str(exc))

    if not args.inputs:
        parser.error("the following arguments are required: inputs")

    log_parameters(cfg, len(args.inputs))

    try:
        result = hc_main.build_collage(
            args.inputs, cfg, swaps=args.swap, render=not args.layout_only,
        )
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))

    if args.layout_only:
        for line in hc_main.describe_layout(result.layout):
            print(line)  # noqa: T201
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface for collage building."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    return run_from_args(args, arg_parser)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
