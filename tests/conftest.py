"""Shared pytest configuration, marker assignment and TSX fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

ADD_MEMBER_TSX = """import type { SVGProps } from "react";

export const AddMember = (props: SVGProps<SVGSVGElement>) => (
  <svg
    width="24"
    height="24"
    viewBox="0 0 24 24"
    fill="none"
    {...props}
  >
    <path
      fillRule="evenodd"
      clipRule="evenodd"
      d="M12 2a5 5 0 1 0 0 10"
      fill="currentColor"
    />
    <rect x="4" y="14" width={16} height={6} rx={1.5} fill="currentColor" />
  </svg>
);
"""

ADD_MEMBER_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" '
    'fill="none"> <path fill-rule="evenodd" clip-rule="evenodd" d="M12 2a5 5 0 1 0 0 10" '
    'fill="#000000"/> <rect x="4" y="14" width="16" height="6" rx="1.5" fill="#000000"/> '
    "</svg>"
)


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def add_member_tsx() -> str:
    return ADD_MEMBER_TSX


@pytest.fixture
def add_member_svg() -> str:
    return ADD_MEMBER_SVG


@pytest.fixture
def icons_dir(tmp_path: Path) -> Path:
    """Directory with one convertible icon and one file without an SVG."""
    directory = tmp_path / "icons"
    directory.mkdir()
    (directory / "AddMember.tsx").write_text(ADD_MEMBER_TSX, encoding="utf-8")
    (directory / "Broken.tsx").write_text(
        "export const Broken = () => null;\n", encoding="utf-8"
    )
    (directory / "README.md").write_text("not an icon", encoding="utf-8")
    return directory
