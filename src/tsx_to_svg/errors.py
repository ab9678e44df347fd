"""Error taxonomy for TSX to SVG conversion."""

from __future__ import annotations

from pathlib import Path


class ConversionError(Exception):
    """Base class for conversion failures.

    Parameters
    ----------
    message : str
        Human readable description.
    cause : BaseException | None, default=None
        Underlying exception, preserved as ``__cause__``.
    """

    exit_code = 1

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
        self.__cause__ = cause


class SvgNotFoundError(ConversionError):
    """No ``<svg>`` fragment could be located in the source."""

    def __init__(self, source: str) -> None:
        super().__init__(f"No SVG tag found in {source}")
        self.source = source


class FileAccessError(ConversionError):
    """Reading or writing a file failed."""

    def __init__(self, message: str, path: Path, cause: BaseException | None = None) -> None:
        super().__init__(f"{message}: {path} ({cause})" if cause else f"{message}: {path}", cause)
        self.path = path


class TransformationError(ConversionError):
    """Unexpected failure while rewriting an SVG fragment."""
