"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TransformOptions:
    """Overrides applied while normalizing an SVG fragment.

    ``None`` means "use the derived or default behaviour".
    """

    width: str | None = None
    height: str | None = None
    color: str | None = None


@dataclass(frozen=True)
class BatchOptions:
    """Directory conversion configuration."""

    input_dir: Path = Path("icons")
    output_dir: Path = Path("results")
    group: str | None = None
    transform: TransformOptions = TransformOptions()
