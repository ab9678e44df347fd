"""Unit tests for the top-level package API."""

from __future__ import annotations

from pathlib import Path

import pytest

import tsx_to_svg
from tsx_to_svg.errors import ConversionError, SvgNotFoundError


def test_wrappers_delegate_to_pipeline(add_member_tsx: str, add_member_svg: str) -> None:
    extracted = tsx_to_svg.extract_svg(add_member_tsx)
    assert isinstance(extracted, tsx_to_svg.Success)

    transformed = tsx_to_svg.transform_svg(extracted.value)
    assert isinstance(transformed, tsx_to_svg.Success)
    assert transformed.value == add_member_svg


def test_convert_tsx_file_returns_written_path(tmp_path: Path, add_member_tsx: str) -> None:
    source = tmp_path / "AddMember.tsx"
    source.write_text(add_member_tsx, encoding="utf-8")

    written = tsx_to_svg.convert_tsx_file(source, tmp_path / "out", color="#404040", group="g")

    assert written == tmp_path / "out" / "g" / "add_member.svg"
    assert "#404040" in written.read_text(encoding="utf-8")


def test_convert_tsx_file_raises_failure(tmp_path: Path) -> None:
    source = tmp_path / "Empty.tsx"
    source.write_text("export {};", encoding="utf-8")

    with pytest.raises(SvgNotFoundError):
        tsx_to_svg.convert_tsx_file(source, tmp_path)


def test_convert_tsx_file_validates_color(tmp_path: Path) -> None:
    with pytest.raises(ConversionError, match="Invalid conversion parameters"):
        tsx_to_svg.convert_tsx_file(tmp_path / "Any.tsx", tmp_path, color="#12")


def test_application_wrappers_delegate(icons_dir: Path, tmp_path: Path) -> None:
    """Lazy application wrappers reach the use-cases."""
    from tsx_to_svg.application import BatchOptions, convert_directory, convert_file

    single = convert_file(icons_dir / "AddMember.tsx", tmp_path / "single")
    assert single.ok
    assert single.output_path.is_file()

    batch = convert_directory(BatchOptions(input_dir=icons_dir, output_dir=tmp_path / "batch"))
    assert (batch.succeeded, batch.failed) == (1, 1)
