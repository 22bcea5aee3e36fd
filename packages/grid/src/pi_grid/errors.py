"""Exceptions raised by pi_grid."""
from __future__ import annotations

from typing import Any

from .viewport import Side


class GridError(Exception):
    """Base class for all pi_grid errors."""


class NoSpaceError(GridError):
    """
    A section ran out of rows before every trimmed line was placed.

    `payload` is whatever the trim strategy's `back()` produced from the
    lines that did not fit. Lines placed before the failure stay placed.
    """

    def __init__(self, payload: Any, side: Side) -> None:
        super().__init__(f"No space left in {side.value} section")
        self.payload = payload
        self.side = side


class RenderContractError(GridError, RuntimeError):
    """A driver passed to print_safe() raised."""


class LayoutError(GridError):
    """Invalid layout document or settings file."""
