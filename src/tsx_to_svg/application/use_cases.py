"""Application use-cases orchestrating TSX to SVG conversion."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from tsx_to_svg.adapters.filesystem import FileOutputWriter, FileSourceReader
from tsx_to_svg.application.options import BatchOptions, TransformOptions
from tsx_to_svg.application.ports import OutputWriter, SourceReader
from tsx_to_svg.application.results import BatchResult, FileResult
from tsx_to_svg.errors import ConversionError, FileAccessError
from tsx_to_svg.naming import output_path_for
from tsx_to_svg.pipeline import extract_svg, transform_svg
from tsx_to_svg.schemas import ConversionConfig
from tsx_to_svg.types import Failure, Fragment, NormalizedText, Outcome

logger = logging.getLogger(__name__)

TSX_PATTERN = "*.tsx"


def build_batch_options(
    *,
    input_dir: Path = Path("icons"),
    output_dir: Path = Path("results"),
    width: str | None = None,
    height: str | None = None,
    color: str | None = None,
    group: str | None = None,
) -> BatchOptions:
    """Validate raw settings and return typed batch options."""
    try:
        config = ConversionConfig(
            input_dir=input_dir,
            output_dir=output_dir,
            width=width,
            height=height,
            color=color,
            group=group,
        )
    except ValidationError as exc:
        raise ConversionError(f"Invalid conversion parameters: {exc}") from exc
    return config.to_batch_options()


def extract_svg_from_file(
    path: Path, reader: SourceReader | None = None
) -> Outcome[Fragment]:
    """Read ``path`` and extract its first ``<svg>`` element."""
    reader = reader or FileSourceReader()
    try:
        text = reader.read(path)
    except OSError as exc:
        return Failure(FileAccessError("Failed to read source file", path, exc))
    return extract_svg(text, source=str(path))


def convert_source(
    source_text: str,
    options: TransformOptions | None = None,
    source: str = "<string>",
) -> Outcome[NormalizedText]:
    """Use-case: extract and normalize the SVG embedded in TSX text."""
    extracted = extract_svg(source_text, source=source)
    if isinstance(extracted, Failure):
        return extracted
    return transform_svg(extracted.value, options)


def convert_file(
    input_path: Path,
    output_dir: Path,
    options: TransformOptions | None = None,
    *,
    group: str | None = None,
    reader: SourceReader | None = None,
    writer: OutputWriter | None = None,
) -> FileResult:
    """Use-case: convert one TSX file into an SVG file.

    Failures are returned on the result, never raised, so a batch can keep
    going after a bad file.
    """
    writer = writer or FileOutputWriter()
    output_path = output_path_for(input_path, output_dir, group)

    extracted = extract_svg_from_file(input_path, reader)
    if isinstance(extracted, Failure):
        return FileResult(input_path, output_path, extracted.error)

    transformed = transform_svg(extracted.value, options)
    if isinstance(transformed, Failure):
        return FileResult(input_path, output_path, transformed.error)

    try:
        writer.write(output_path, transformed.value)
    except OSError as exc:
        error = FileAccessError("Failed to write output file", output_path, exc)
        return FileResult(input_path, output_path, error)

    logger.debug("wrote %s (%d chars)", output_path, len(transformed.value))
    return FileResult(input_path, output_path)


def find_sources(input_dir: Path) -> list[Path]:
    """Return ``*.tsx`` files directly inside ``input_dir``, sorted by name."""
    return sorted(path for path in input_dir.glob(TSX_PATTERN) if path.is_file())


def convert_directory(
    options: BatchOptions,
    *,
    reader: SourceReader | None = None,
    writer: OutputWriter | None = None,
) -> BatchResult:
    """Use-case: convert every TSX file of a directory.

    Raises
    ------
    FileAccessError
        If the output directory cannot be created.
    """
    target_dir = options.output_dir / options.group if options.group else options.output_dir
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileAccessError("Failed to create output directory", target_dir, exc) from exc

    sources = find_sources(options.input_dir)
    if not sources:
        logger.warning("no %s files in %s", TSX_PATTERN, options.input_dir)

    results: list[FileResult] = []
    for source in sources:
        result = convert_file(
            source,
            options.output_dir,
            options.transform,
            group=options.group,
            reader=reader,
            writer=writer,
        )
        if not result.ok:
            logger.warning("conversion failed for %s: %s", source, result.error)
        results.append(result)
    return BatchResult(output_dir=target_dir, results=tuple(results))
