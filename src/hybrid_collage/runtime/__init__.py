"""Runtime utilities for output handling and version lookup."""

from .output import save_collage, setup_output_directory
from .version import resolve_project_version

__all__ = [
    "resolve_project_version",
    "save_collage",
    "setup_output_directory",
]
