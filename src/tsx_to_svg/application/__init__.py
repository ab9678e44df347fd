"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from tsx_to_svg.application.options import BatchOptions, TransformOptions
from tsx_to_svg.application.ports import OutputWriter, SourceReader
from tsx_to_svg.application.results import BatchResult, FileResult


def convert_file(
    input_path: Path,
    output_dir: Path,
    options: TransformOptions | None = None,
    *,
    group: str | None = None,
    reader: SourceReader | None = None,
    writer: OutputWriter | None = None,
) -> FileResult:
    """Convert one TSX file via lazy use-case import."""
    from tsx_to_svg.application.use_cases import convert_file as _impl

    return _impl(input_path, output_dir, options, group=group, reader=reader, writer=writer)


def convert_directory(
    options: BatchOptions,
    *,
    reader: SourceReader | None = None,
    writer: OutputWriter | None = None,
) -> BatchResult:
    """Convert a directory of TSX files via lazy use-case import."""
    from tsx_to_svg.application.use_cases import convert_directory as _impl

    return _impl(options, reader=reader, writer=writer)


__all__ = [
    "BatchOptions",
    "TransformOptions",
    "FileResult",
    "BatchResult",
    "convert_file",
    "convert_directory",
]
