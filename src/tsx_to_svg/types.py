"""Shared type aliases and the tagged result returned by fallible operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from tsx_to_svg.errors import ConversionError

type Fragment = str
type NormalizedText = str


@dataclass(frozen=True)
class Success[T]:
    """Successful outcome carrying a value."""

    value: T
    ok: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying the error that describes it."""

    error: ConversionError
    ok: Literal[False] = field(default=False, init=False)


type Outcome[T] = Success[T] | Failure
