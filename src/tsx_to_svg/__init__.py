"""Top-level API for converting TSX icon components to SVG files."""

from __future__ import annotations

from pathlib import Path

from tsx_to_svg.application.options import TransformOptions
from tsx_to_svg.types import Failure, Outcome, Success

__version__ = "1.0.0"


def extract_svg(source_text: str, source: str = "<string>") -> Outcome[str]:
    """Extract the first ``<svg>`` element from TSX source text.

    Parameters
    ----------
    source_text : str
        TSX component source.
    source : str, default="<string>"
        Source name used in error messages.

    Returns
    -------
    Outcome[str]
        The raw fragment, or a failure wrapping ``SvgNotFoundError``.
    """
    from .pipeline.extractor import extract_svg as _impl

    return _impl(source_text, source)


def transform_svg(fragment: str, options: TransformOptions | None = None) -> Outcome[str]:
    """Normalize an extracted ``<svg>`` fragment into standalone SVG.

    Parameters
    ----------
    fragment : str
        Output of :func:`extract_svg`.
    options : TransformOptions, optional
        Width, height and color overrides.

    Returns
    -------
    Outcome[str]
        The normalized markup, or a failure wrapping ``TransformationError``.
    """
    from .pipeline.transformer import transform_svg as _impl

    return _impl(fragment, options)


def convert_tsx_file(
    input_path: Path,
    output_dir: Path,
    *,
    width: str | None = None,
    height: str | None = None,
    color: str | None = None,
    group: str | None = None,
) -> Path:
    """Convert a single TSX file and return the written SVG path.

    Unlike the lower-level functions this raises the ``ConversionError``
    describing the failure.
    """
    from .application.use_cases import build_batch_options, convert_file

    options = build_batch_options(
        output_dir=output_dir, width=width, height=height, color=color, group=group
    )
    result = convert_file(input_path, options.output_dir, options.transform, group=options.group)
    if result.error is not None:
        raise result.error
    return result.output_path


__all__ = [
    "Failure",
    "Outcome",
    "Success",
    "TransformOptions",
    "extract_svg",
    "transform_svg",
    "convert_tsx_file",
]
