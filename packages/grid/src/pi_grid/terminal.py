"""
Terminal abstraction used by TerminalDriver.

Provides:
- Terminal: abstract base class (interface)
- ProcessTerminal: real terminal on a text stream (sys.stdout by default)
- BufferTerminal: in-memory terminal that records everything written
"""
from __future__ import annotations

import logging
import os
import sys
from abc import ABC, abstractmethod
from typing import TextIO

from .config import ENV_WRITE_LOG

logger = logging.getLogger(__name__)


class Terminal(ABC):
    """Minimal output-only terminal interface."""

    @abstractmethod
    def write(self, data: str) -> None:
        """Write output to the terminal."""

    @abstractmethod
    def move_to(self, x: int, y: int) -> None:
        """Move the cursor to column x, row y (zero-based)."""

    @property
    @abstractmethod
    def columns(self) -> int:
        """Terminal width in columns."""

    @property
    @abstractmethod
    def rows(self) -> int:
        """Terminal height in rows."""

    def hide_cursor(self) -> None:
        self.write("\x1b[?25l")

    def show_cursor(self) -> None:
        self.write("\x1b[?25h")

    def clear_screen(self) -> None:
        """Clear entire screen and move cursor to (0,0)."""
        self.write("\x1b[2J\x1b[H")


def cursor_position(x: int, y: int) -> str:
    """CSI CUP sequence for zero-based column x, row y."""
    return f"\x1b[{y + 1};{x + 1}H"


class ProcessTerminal(Terminal):
    """
    Terminal on a real output stream. Each write is flushed.
    If PI_GRID_WRITE_LOG is set, every write is also appended to that file.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._write_log_path = os.environ.get(ENV_WRITE_LOG, "")

    def write(self, data: str) -> None:
        self._stream.write(data)
        self._stream.flush()
        if self._write_log_path:
            try:
                with open(self._write_log_path, "a", encoding="utf-8") as f:
                    f.write(data)
            except OSError as exc:
                logger.warning("Disabling write log %s: %s", self._write_log_path, exc)
                self._write_log_path = ""

    def move_to(self, x: int, y: int) -> None:
        self.write(cursor_position(x, y))

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(self._stream.fileno()).columns
        except (OSError, ValueError, AttributeError):
            return int(os.environ.get("COLUMNS", "80"))

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size(self._stream.fileno()).lines
        except (OSError, ValueError, AttributeError):
            return int(os.environ.get("LINES", "24"))


class BufferTerminal(Terminal):
    """Records output in memory; size is fixed at construction."""

    def __init__(self, columns: int = 80, rows: int = 24) -> None:
        self._columns = columns
        self._rows = rows
        self._output: list[str] = []

    def write(self, data: str) -> None:
        self._output.append(data)

    def move_to(self, x: int, y: int) -> None:
        self.write(cursor_position(x, y))

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        return self._rows

    def get_output(self) -> str:
        return "".join(self._output)

    def clear_output(self) -> None:
        self._output.clear()
