"""
Defines shared type aliases for the collage builder.

Centralizes reusable type hints to improve consistency and readability.
"""
from __future__ import annotations

from typing import Literal

Orientation = Literal["landscape", "portrait"]
RGB = tuple[int, int, int]
Size = tuple[int, int]
