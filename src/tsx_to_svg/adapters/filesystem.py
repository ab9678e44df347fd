"""UTF-8 text file reader and writer."""

from __future__ import annotations

from pathlib import Path


class FileSourceReader:
    """Read TSX sources from disk.

    Undecodable bytes are replaced rather than raised so that extraction
    always sees a string.
    """

    def read(self, path: Path) -> str:
        return path.read_text(encoding="utf-8", errors="replace")


class FileOutputWriter:
    """Write SVG files, creating parent directories as needed."""

    def write(self, path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
