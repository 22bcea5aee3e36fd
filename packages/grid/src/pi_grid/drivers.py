"""
Render drivers — sinks for the draw instructions a DrawProcess emits.

Provides:
- RenderDriver: protocol for sinks that may raise
- SafeRenderDriver: protocol for sinks that never raise
- OutToString: appends each printed line plus a newline to a string
- LineCollector: records positioned lines
- Canvas: 2-D cell grid several processes can paint onto
- TerminalDriver: writes cursor moves and text to a Terminal
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .actions import Action, MoveTo, Print
from .text import char_width

if TYPE_CHECKING:
    from .terminal import Terminal


@runtime_checkable
class RenderDriver(Protocol):
    def handle(self, action: Action) -> None:
        """Apply one instruction. May raise."""
        ...


@runtime_checkable
class SafeRenderDriver(Protocol):
    def safe_handle(self, action: Action) -> None:
        """Apply one instruction. Must never raise."""
        ...


class OutToString:
    """Collects printed text, one line per Print; cursor moves are ignored."""

    def __init__(self) -> None:
        self.output = ""

    def handle(self, action: Action) -> None:
        self.safe_handle(action)

    def safe_handle(self, action: Action) -> None:
        if isinstance(action, Print):
            self.output += action.text + "\n"


class LineCollector:
    """Records (x, y, text) for every Print, using the last MoveTo."""

    def __init__(self) -> None:
        self.lines: list[tuple[int, int, str]] = []
        self._x = 0
        self._y = 0

    def handle(self, action: Action) -> None:
        self.safe_handle(action)

    def safe_handle(self, action: Action) -> None:
        if isinstance(action, MoveTo):
            self._x, self._y = action.x, action.y
        else:
            self.lines.append((self._x, self._y, action.text))

    def rows(self) -> dict[int, str]:
        """Last text printed on each row."""
        return {y: text for _, y, text in self.lines}


class Canvas:
    """
    A width x height grid of cells. Print overwrites cells from the cursor,
    clipped at the right edge. Wide characters take two cells; the second
    is left empty.
    """

    def __init__(self, width: int, height: int, fill: str = " ") -> None:
        self.width = width
        self.height = height
        self.fill = fill
        self._cells: list[list[str]] = [[fill] * width for _ in range(height)]
        self._x = 0
        self._y = 0

    def handle(self, action: Action) -> None:
        if isinstance(action, MoveTo):
            self._x, self._y = action.x, action.y
            return
        if not 0 <= self._y < self.height:
            raise IndexError(f"Row {self._y} outside canvas of height {self.height}")
        row = self._cells[self._y]
        x = self._x
        for ch in action.text:
            w = char_width(ch)
            if w == 0:
                continue
            if x + w > self.width:
                break
            row[x] = ch
            for extra in range(1, w):
                row[x + extra] = ""
            x += w

    def render(self) -> str:
        return "\n".join("".join(row) for row in self._cells)

    def row(self, y: int) -> str:
        return "".join(self._cells[y])


class TerminalDriver:
    """Turns instructions into CSI cursor moves and raw writes on a Terminal."""

    def __init__(self, terminal: "Terminal") -> None:
        self.terminal = terminal

    def handle(self, action: Action) -> None:
        if isinstance(action, MoveTo):
            self.terminal.move_to(action.x, action.y)
        else:
            self.terminal.write(action.text)
