#!/usr/bin/env python3
"""
tsx_to_svg.cli

Typer-based CLI for converting TSX icon components into clean SVG files.

Examples
--------
Convert every ``.tsx`` file in ``./icons`` into ``./results``:

    tsx-to-svg convert

Force a size and a fill color, nesting output under ``results/brand``:

    tsx-to-svg convert -i src/icons -o results --width 32 --height 32 \\
        --color "#404040" --group brand

Print one converted icon:

    tsx-to-svg file src/icons/AddMember.tsx
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path

import typer

from tsx_to_svg import __version__
from tsx_to_svg.errors import ConversionError, FileAccessError

app = typer.Typer(
    name="tsx-to-svg",
    help="Convert TSX icon components to clean SVG files.",
    no_args_is_help=True,
)

WIDTH_HELP = "Set width attribute for all SVG files (replaces existing values)."
HEIGHT_HELP = "Set height attribute for all SVG files (replaces existing values)."
COLOR_HELP = "Hex color (#RRGGBB) used in place of currentColor. Default: #000000."


# -----------------------------
# Output helpers
# -----------------------------
def _info(message: str) -> None:
    typer.secho(f"ℹ {message}", fg=typer.colors.BLUE)


def _success(message: str) -> None:
    typer.secho(f"✓ {message}", fg=typer.colors.GREEN)


def _warn(message: str) -> None:
    typer.secho(f"⚠ {message}", fg=typer.colors.YELLOW, err=True)


def _error(message: str) -> None:
    typer.secho(f"✖ {message}", fg=typer.colors.RED, err=True)


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    _error(f"{type(exc).__name__}: {exc}")
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _describe_overrides(
    width: str | None, height: str | None, color: str | None, group: str | None
) -> None:
    dimensions = " ".join(
        f'{name}="{value}"' for name, value in (("width", width), ("height", height)) if value
    )
    if dimensions:
        _info(f"Custom dimensions: {dimensions}")
    if color:
        _info(f"Custom color: {color}")
    if group:
        _info(f"Group folder: {group}")


class _EchoHandler(logging.Handler):
    """Route log records through typer so they follow the active stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        typer.echo(self.format(record), err=True)


def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("tsx_to_svg")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, _EchoHandler) for h in package_logger.handlers):
        handler = _EchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        package_logger.addHandler(handler)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tsx-to-svg {__version__}")
        raise typer.Exit()


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Initialize shared CLI state and logging."""
    del version
    _configure_logging(verbose)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    input_dir: Path = typer.Option(
        Path("icons"), "--input", "-i", help="Input directory containing TSX files."
    ),
    output_dir: Path = typer.Option(
        Path("results"), "--output", "-o", help="Output directory for SVG files."
    ),
    width: str | None = typer.Option(None, "--width", help=WIDTH_HELP),
    height: str | None = typer.Option(None, "--height", help=HEIGHT_HELP),
    color: str | None = typer.Option(None, "--color", help=COLOR_HELP),
    group: str | None = typer.Option(
        None, "--group", "-g", help="Sub-folder of the output directory to write into."
    ),
) -> None:
    """Convert every TSX file in a directory to SVG.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    input_dir : Path
        Directory scanned (non-recursively) for ``*.tsx`` files.
    output_dir : Path
        Directory receiving ``snake_case.svg`` files; created if missing.

    Notes
    -----
    - Exits with status 1 when at least one file fails to convert.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    from tsx_to_svg.application.use_cases import build_batch_options, convert_directory

    try:
        options = build_batch_options(
            input_dir=input_dir,
            output_dir=output_dir,
            width=width,
            height=height,
            color=color,
            group=group,
        )
    except ConversionError as exc:
        raise typer.BadParameter(str(exc)) from exc

    _info(f"Converting TSX icons from: {options.input_dir}")
    _info(f"Output directory: {options.output_dir}")
    _describe_overrides(
        options.transform.width, options.transform.height, options.transform.color, options.group
    )

    try:
        batch = convert_directory(options)
    except ConversionError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    if not batch.results:
        _warn(f"No TSX files found in {options.input_dir}")
        return

    _info(f"Found {len(batch.results)} TSX file(s)")
    for result in batch.results:
        if result.ok:
            _success(f"Converted: {result.source_path.name}")
        else:
            _error(f"Failed: {result.source_path.name} - {result.error}")
            if debug and result.error is not None and result.error.cause is not None:
                cause = result.error.cause
                typer.echo(
                    "".join(traceback.format_exception(type(cause), cause, cause.__traceback__)),
                    err=True,
                )

    typer.echo("")
    _info(f"Summary: {batch.succeeded} successful, {batch.failed} failed")
    if batch.failed:
        raise typer.Exit(code=1)


@app.command("file")
def file_cmd(
    ctx: typer.Context,
    source: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="TSX file to convert."
    ),
    output_path: Path | None = typer.Option(
        None, "--output", "-o", help="Where to write the .svg file (stdout when omitted)."
    ),
    width: str | None = typer.Option(None, "--width", help=WIDTH_HELP),
    height: str | None = typer.Option(None, "--height", help=HEIGHT_HELP),
    color: str | None = typer.Option(None, "--color", help=COLOR_HELP),
) -> None:
    """Convert a single TSX file, printing the SVG or writing it to a path."""
    debug: bool = bool(ctx.obj.get("debug", False))

    from tsx_to_svg.adapters.filesystem import FileOutputWriter
    from tsx_to_svg.application.use_cases import build_batch_options, extract_svg_from_file
    from tsx_to_svg.pipeline import transform_svg
    from tsx_to_svg.types import Failure

    try:
        options = build_batch_options(width=width, height=height, color=color)
    except ConversionError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        extracted = extract_svg_from_file(source)
        if isinstance(extracted, Failure):
            raise extracted.error
        transformed = transform_svg(extracted.value, options.transform)
        if isinstance(transformed, Failure):
            raise transformed.error
        if output_path is None:
            typer.echo(transformed.value)
            return
        try:
            FileOutputWriter().write(output_path, transformed.value)
        except OSError as exc:
            raise FileAccessError("Failed to write output file", output_path, exc) from exc
        _success(f"Saved: {output_path}")
    except ConversionError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))


if __name__ == "__main__":
    app()
