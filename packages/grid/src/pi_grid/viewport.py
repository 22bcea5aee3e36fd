"""
Viewport geometry — the rectangle a DrawProcess lays text into.

Provides:
- Side: which of the two sections (minus above the divider, plus below it)
- DividerStrategy: where the divider starts inside a fresh process
- Viewport: immutable four-coordinate rectangle (inclusive start, exclusive end)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .process import DrawProcess


class Side(str, Enum):
    """Section of a process. MINUS grows up from the divider, PLUS grows down."""

    MINUS = "minus"
    PLUS = "plus"


class DividerStrategy(str, Enum):
    BEGINNING = "beginning"
    END = "end"
    HALFWAY = "halfway"


# A strategy tag or an explicit row offset from start_y
DividerPlacement = Union[DividerStrategy, int]


def parse_divider(value: str | int | DividerStrategy) -> DividerPlacement:
    """Accept "beginning" / "end" / "halfway" or an explicit offset."""
    if isinstance(value, DividerStrategy):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid divider placement: {value!r}")
    if isinstance(value, int):
        return value
    text = str(value).strip().lower()
    if text.lstrip("-").isdigit():
        return int(text)
    try:
        return DividerStrategy(text)
    except ValueError:
        raise ValueError(f"Invalid divider placement: {value!r}") from None


def resolve_divider(placement: DividerPlacement, height: int) -> int:
    """Turn a placement into a row offset in [0, height]."""
    placement = parse_divider(placement)
    if placement is DividerStrategy.BEGINNING:
        return 0
    if placement is DividerStrategy.END:
        return height
    if placement is DividerStrategy.HALFWAY:
        return height // 2
    if not 0 <= placement <= height:
        raise ValueError(f"Divider {placement} outside [0, {height}]")
    return placement


@dataclass(frozen=True)
class Viewport:
    """
    Axis-aligned block of character cells.

    start_x/start_y are inclusive, end_x/end_y exclusive, so an empty
    viewport (width or height 0) is valid.
    """

    start_x: int
    start_y: int
    end_x: int
    end_y: int

    def __post_init__(self) -> None:
        if min(self.start_x, self.start_y, self.end_x, self.end_y) < 0:
            raise ValueError(f"Negative coordinate in {self!r}")
        if self.start_x > self.end_x or self.start_y > self.end_y:
            raise ValueError(f"Start after end in {self!r}")

    @property
    def width(self) -> int:
        return self.end_x - self.start_x

    @property
    def height(self) -> int:
        return self.end_y - self.start_y

    def into_process(
        self,
        strategy: DividerPlacement = DividerStrategy.BEGINNING,
        fill_char: str = " ",
    ) -> "DrawProcess":
        """Hand this viewport over to a new DrawProcess."""
        from .process import DrawProcess
        return DrawProcess(self, strategy, fill_char=fill_char)
