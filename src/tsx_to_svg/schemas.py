"""Pydantic schemas for validating caller-supplied conversion settings."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from tsx_to_svg.application.options import BatchOptions, TransformOptions

HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


class ConversionConfig(BaseModel):
    """Validated settings for a conversion run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_dir: Path = Path("icons")
    output_dir: Path = Path("results")
    width: str | None = None
    height: str | None = None
    color: str | None = None
    group: str | None = None

    @field_validator("width", "height")
    @classmethod
    def _validate_dimension(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value:
            raise ValueError("dimension must not be empty.")
        return value

    @field_validator("color")
    @classmethod
    def _validate_color(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if not HEX_COLOR.match(value):
            raise ValueError(f"color must be a hex value like #404040, got {value!r}.")
        return value

    @field_validator("group")
    @classmethod
    def _validate_group(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value or value in {".", ".."} or "/" in value or "\\" in value:
            raise ValueError("group must be a single folder name.")
        return value

    def transform_options(self) -> TransformOptions:
        return TransformOptions(width=self.width, height=self.height, color=self.color)

    def to_batch_options(self) -> BatchOptions:
        return BatchOptions(
            input_dir=self.input_dir,
            output_dir=self.output_dir,
            group=self.group,
            transform=self.transform_options(),
        )
