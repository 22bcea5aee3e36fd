"""
Trim strategies — turn one logical input into fixed-width display lines.

A strategy is any object with `trim()` and `back()`:

    trim(text, process, side) -> list[TrimmedText]
        Produce the lines to place, in placement order.
    back(leftover, process, side) -> payload
        Given the lines that did not fit (the failing line first),
        produce the payload carried by NoSpaceError.

The process argument is read-only context (width, bounds); strategies
must not mutate it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .text import expand_tabs, pad_to_width, truncate_to_width, visible_width, wrap_text
from .viewport import Side

if TYPE_CHECKING:
    from .process import DrawProcess


@dataclass(frozen=True)
class TrimmedText:
    """A display-ready line plus its position in the trim output it came from."""

    text: str
    index: int = 0

    @property
    def width(self) -> int:
        return visible_width(self.text)


@runtime_checkable
class TrimStrategy(Protocol):
    def trim(self, text: Any, process: "DrawProcess", side: Side) -> list[TrimmedText]:
        ...

    def back(self, leftover: list[TrimmedText], process: "DrawProcess", side: Side) -> Any:
        ...


def _numbered(lines: list[str]) -> list[TrimmedText]:
    return [TrimmedText(line, i) for i, line in enumerate(lines)]


class Ignore:
    """Pass text through untouched as a single line. Overflow gives the text back."""

    def trim(self, text: str, process: "DrawProcess", side: Side) -> list[TrimmedText]:
        return [TrimmedText(text)]

    def back(self, leftover: list[TrimmedText], process: "DrawProcess", side: Side) -> str:
        return "".join(t.text for t in leftover)


class Truncate:
    """
    Keep only the first line of the input, cut to the process width with
    `ellipsis` and padded with blanks. Overflow gives the original text back.
    """

    def __init__(self, ellipsis: str = "...", tab_width: int = 3) -> None:
        self.ellipsis = ellipsis
        self.tab_width = tab_width
        self._last_input: str | None = None

    def trim(self, text: str, process: "DrawProcess", side: Side) -> list[TrimmedText]:
        self._last_input = text
        first = expand_tabs(text, self.tab_width).split("\n", 1)[0]
        return [TrimmedText(truncate_to_width(first, process.width(), self.ellipsis, pad=True))]

    def back(self, leftover: list[TrimmedText], process: "DrawProcess", side: Side) -> str:
        if self._last_input is not None:
            return self._last_input
        return "".join(t.text.rstrip() for t in leftover)


class Wrap:
    """
    Word-wrap the input to the process width, one padded line per row.
    Overflow gives back the unplaced tail re-joined with single spaces,
    as one paragraph: rows that are blank (from empty input lines) carry no
    words and are not part of the payload.
    """

    def __init__(self, tab_width: int = 3) -> None:
        self.tab_width = tab_width

    def trim(self, text: str, process: "DrawProcess", side: Side) -> list[TrimmedText]:
        width = process.width()
        lines = wrap_text(expand_tabs(text, self.tab_width), width)
        return _numbered([pad_to_width(line, width) for line in lines])

    def back(self, leftover: list[TrimmedText], process: "DrawProcess", side: Side) -> str:
        return " ".join(t.text.strip() for t in leftover if t.text.strip())


class SplitLines:
    """
    One row per newline-separated input line, each truncated and padded.
    Overflow gives back the unplaced lines as a list of strings.
    """

    def __init__(self, ellipsis: str = "...", tab_width: int = 3) -> None:
        self.ellipsis = ellipsis
        self.tab_width = tab_width

    def trim(self, text: str, process: "DrawProcess", side: Side) -> list[TrimmedText]:
        width = process.width()
        lines = expand_tabs(text, self.tab_width).split("\n")
        return _numbered([truncate_to_width(line, width, self.ellipsis, pad=True) for line in lines])

    def back(self, leftover: list[TrimmedText], process: "DrawProcess", side: Side) -> list[str]:
        return [t.text.rstrip() for t in leftover]


TRIM_STRATEGIES: dict[str, type] = {
    "ignore": Ignore,
    "truncate": Truncate,
    "wrap": Wrap,
    "lines": SplitLines,
}


def get_trim_strategy(name: str, ellipsis: str = "...", tab_width: int = 3) -> TrimStrategy:
    """Build a strategy by its settings name."""
    cls = TRIM_STRATEGIES.get(name)
    if cls is None:
        raise ValueError(f"Unknown trim strategy: {name!r} (expected one of {', '.join(TRIM_STRATEGIES)})")
    if cls is Ignore:
        return Ignore()
    if cls is Wrap:
        return Wrap(tab_width=tab_width)
    return cls(ellipsis=ellipsis, tab_width=tab_width)
