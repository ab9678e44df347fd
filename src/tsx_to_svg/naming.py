"""Output file naming helpers."""

from __future__ import annotations

import re
from pathlib import Path

SVG_SUFFIX = ".svg"

_UPPERCASE = re.compile(r"([A-Z])")


def to_snake_case(name: str) -> str:
    """Convert a PascalCase or camelCase name to snake_case.

    Every uppercase letter starts a new word, so ``AddMember`` becomes
    ``add_member`` and ``SVGIcon`` becomes ``s_v_g_icon``.
    """
    snake = _UPPERCASE.sub(r"_\1", name).lower()
    return snake[1:] if snake.startswith("_") else snake


def output_path_for(input_path: Path, output_dir: Path, group: str | None = None) -> Path:
    """Return ``output_dir[/group]/<snake_case stem>.svg`` for a TSX source."""
    target_dir = output_dir / group if group else output_dir
    return target_dir / f"{to_snake_case(input_path.stem)}{SVG_SUFFIX}"
