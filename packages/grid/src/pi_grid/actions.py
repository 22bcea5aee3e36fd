"""Draw instructions emitted by DrawProcess and consumed by render drivers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class MoveTo:
    """Place the cursor at column x, row y (zero-based)."""

    x: int
    y: int


@dataclass(frozen=True)
class Print:
    """Write text at the cursor."""

    text: str


Action = Union[MoveTo, Print]
