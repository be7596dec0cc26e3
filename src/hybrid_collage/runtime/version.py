"""Report the package version for ``--version``."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from pathlib import Path

import tomlkit
from tomlkit.exceptions import ParseError

from hybrid_collage.logging_utils import logger

DISTRIBUTION_NAME = "hybrid-collage"
DEV_VERSION = "0.0.0"


def _find_pyproject(start: Path) -> Path | None:
    """Return the nearest pyproject.toml above ``start``, if any."""
    for parent in start.resolve().parents:
        candidate = parent / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def resolve_project_version() -> str:
    """
    Return the installed version, or the checkout's declared version.

    Source checkouts that were never installed fall back to the
    ``[project] version`` of the nearest pyproject.toml, then to 0.0.0.
    """
    try:
        return importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        pass

    pyproject = _find_pyproject(Path(__file__))
    if pyproject is None:
        return DEV_VERSION
    try:
        doc = tomlkit.parse(pyproject.read_text(encoding="utf-8"))
    except (OSError, ParseError) as exc:
        logger.warning("Error reading %s: %s", pyproject, exc)
        return DEV_VERSION

    version = doc.get("project", {}).get("version")
    return str(version).strip() if version else DEV_VERSION
