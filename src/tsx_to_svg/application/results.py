"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tsx_to_svg.errors import ConversionError


@dataclass(frozen=True)
class FileResult:
    """Outcome of converting one TSX file."""

    source_path: Path
    output_path: Path
    error: ConversionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class BatchResult:
    """Outcome of converting every TSX file in a directory."""

    output_dir: Path
    results: tuple[FileResult, ...] = ()

    @property
    def succeeded(self) -> int:
        return sum(1 for result in self.results if result.ok)

    @property
    def failed(self) -> int:
        return len(self.results) - self.succeeded
