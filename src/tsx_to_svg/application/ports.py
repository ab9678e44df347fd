"""Application ports for file input and output."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class SourceReader(Protocol):
    """Supply the text content of a source file."""

    def read(self, path: Path) -> str:
        """Return file content; raise ``OSError`` on failure."""


class OutputWriter(Protocol):
    """Persist normalized SVG markup."""

    def write(self, path: Path, text: str) -> None:
        """Write text to path; raise ``OSError`` on failure."""
