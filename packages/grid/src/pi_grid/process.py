"""
DrawProcess — lays text out inside a Viewport split by a movable divider.

The viewport's rows are divided into two sections:

    start_y ┬─────────────┐
            │   minus     │  grows upward from the divider
    divider ┼─────────────┤
            │   plus      │  grows downward from the divider
    end_y   ┴─────────────┘

Both sections are stored oldest-first. The first minus line sits directly
above the divider and later ones stack upward; plus lines run downward
from the divider in insertion order. Every row of the bounds receives exactly one
MoveTo/Print pair; unused rows are blank-filled.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable

from .actions import Action, MoveTo, Print
from .drivers import RenderDriver, SafeRenderDriver
from .errors import NoSpaceError, RenderContractError
from .text import visible_width
from .trim import TrimmedText, TrimStrategy
from .viewport import DividerPlacement, DividerStrategy, Side, Viewport, resolve_divider

logger = logging.getLogger(__name__)


class DrawProcess:
    """
    Owns a viewport, a divider offset and the two section line lists.

    Not thread-safe; one owner at a time. Viewports handed out by
    split_free_space() are independent values.
    """

    def __init__(
        self,
        viewport: Viewport,
        strategy: DividerPlacement = DividerStrategy.BEGINNING,
        fill_char: str = " ",
    ) -> None:
        if visible_width(fill_char) != 1:
            raise ValueError(f"fill_char must be one column wide, got {fill_char!r}")
        self._start_x = viewport.start_x
        self._start_y = viewport.start_y
        self._end_x = viewport.end_x
        self._end_y = viewport.end_y
        self._fill_char = fill_char
        self._divider = resolve_divider(strategy, viewport.height)
        self._minus: list[TrimmedText] = []
        self._plus: list[TrimmedText] = []
        self._blank = fill_char * viewport.width

    def __repr__(self) -> str:
        return (
            f"DrawProcess(({self._start_x}, {self._start_y})-({self._end_x}, {self._end_y}), "
            f"divider={self._divider}, minus={len(self._minus)}, plus={len(self._plus)})"
        )

    # ─── Bounds ──────────────────────────────────────────────────────────────

    def width(self) -> int:
        """Number of columns a line can occupy."""
        return self._end_x - self._start_x

    def height(self) -> int:
        """Number of rows in the process."""
        return self._end_y - self._start_y

    def start_x(self) -> int:
        return self._start_x

    def start_y(self) -> int:
        return self._start_y

    def end_x(self) -> int:
        return self._end_x

    def end_y(self) -> int:
        return self._end_y

    def viewport(self) -> Viewport:
        """Current bounds as a Viewport value."""
        return Viewport(self._start_x, self._start_y, self._end_x, self._end_y)

    @property
    def divider(self) -> int:
        """Row offset from start_y where the plus section begins."""
        return self._divider

    @property
    def minus_lines(self) -> tuple[str, ...]:
        """Minus section text, in insertion order."""
        return tuple(t.text for t in self._minus)

    @property
    def plus_lines(self) -> tuple[str, ...]:
        """Plus section text, in insertion order."""
        return tuple(t.text for t in self._plus)

    def free_space(self, side: Side) -> int:
        """Rows still available to `side`."""
        if side is Side.MINUS:
            return self._divider - len(self._minus)
        return self.height() - self._divider - len(self._plus)

    # ─── Insertion ───────────────────────────────────────────────────────────

    def _add_trimmed(self, line: TrimmedText, side: Side) -> bool:
        if self.free_space(side) <= 0:
            return False
        if side is Side.MINUS:
            self._minus.append(line)
        else:
            self._plus.append(line)
        return True

    def add_to_section(self, text: Any, strategy: TrimStrategy, side: Side) -> None:
        """
        Trim `text` with `strategy` and append the lines to `side`.

        Lines are placed one by one; on the first that does not fit, it and
        every line after it go to `strategy.back()` and NoSpaceError is
        raised with the result. Lines placed before that stay placed.
        """
        lines = strategy.trim(text, self, side)
        for i, line in enumerate(lines):
            if not self._add_trimmed(line, side):
                leftover = list(lines[i:])
                logger.debug(
                    "No space in %s section: %d of %d lines left over",
                    side.value, len(leftover), len(lines),
                )
                raise NoSpaceError(strategy.back(leftover, self, side), side)

    def add_to_section_lines(
        self,
        items: Iterable[Any],
        strategy: TrimStrategy,
        side: Side,
    ) -> list[NoSpaceError | None]:
        """
        Add several inputs so they read top to bottom on either side.

        Returns one entry per input, in input order: None when it was
        placed, the NoSpaceError otherwise. A failure does not stop the
        remaining inputs from being tried.

        Minus lines stack upward from the divider, so minus inputs are
        added last-first.
        """
        items = list(items)
        ordered = reversed(items) if side is Side.MINUS else items
        results: list[NoSpaceError | None] = []
        for item in ordered:
            try:
                self.add_to_section(item, strategy, side)
            except NoSpaceError as exc:
                results.append(exc)
            else:
                results.append(None)
        if side is Side.MINUS:
            results.reverse()
        return results

    def clear(self, strategy: DividerPlacement = DividerStrategy.BEGINNING) -> None:
        """Drop all content and re-place the divider; bounds are kept."""
        self._divider = resolve_divider(strategy, self.height())
        self._minus = []
        self._plus = []
        self._blank = self._fill_char * self.width()

    # ─── Space transfer ──────────────────────────────────────────────────────

    def split_free_space(
        self,
        side: Side,
        min_left: int | None = None,
        max_taken: int | None = None,
    ) -> Viewport | None:
        """
        Give up unused rows on `side`'s outer edge as a new Viewport.

        At least `min_left` rows of the section are kept (used or not) and
        at most `max_taken` rows are taken. Returns None if nothing can be
        taken, in which case the process is unchanged.
        """
        if (min_left is not None and min_left < 0) or (max_taken is not None and max_taken < 0):
            raise ValueError(f"min_left and max_taken must be non-negative, got {min_left}, {max_taken}")
        if side is Side.MINUS:
            space = self._divider
            occupied = len(self._minus)
        else:
            space = self.height() - self._divider
            occupied = len(self._plus)
        if min_left is not None:
            occupied = max(occupied, min_left)
        taken = max(space - occupied, 0)
        if max_taken is not None:
            taken = min(taken, max_taken)
        if taken == 0:
            return None

        if side is Side.MINUS:
            given = Viewport(self._start_x, self._start_y, self._end_x, self._start_y + taken)
            self._start_y += taken
            # Divider is relative to start_y; keep it on the same screen row
            self._divider -= taken
        else:
            given = Viewport(self._start_x, self._end_y - taken, self._end_x, self._end_y)
            self._end_y -= taken
        logger.debug(
            "Split %d free %s rows off; bounds now y=[%d, %d), divider=%d",
            taken, side.value, self._start_y, self._end_y, self._divider,
        )
        return given

    def extend(self, viewport: Viewport) -> Viewport | None:
        """
        Absorb a same-width viewport lying directly above or below.

        Rows gained below join the plus section, rows gained above join the
        minus section. Returns None on success; otherwise the viewport is
        handed back untouched.
        """
        if viewport.start_x == self._start_x and viewport.end_x == self._end_x:
            if viewport.start_y == self._end_y:
                self._end_y = viewport.end_y
                return None
            if viewport.end_y == self._start_y:
                self._start_y = viewport.start_y
                self._divider += viewport.height
                return None
        logger.debug("Rejected extend of %r with %r", self, viewport)
        return viewport

    def shove(self, side: Side) -> None:
        """
        Move the divider against the content already placed on `side`,
        handing that section's unused rows to the other one.
        """
        if side is Side.MINUS:
            self._divider = min(self._divider, len(self._minus))
        else:
            self._divider = max(self._divider, self.height() - len(self._plus))
        logger.debug("Shoved toward %s; divider=%d", side.value, self._divider)

    # ─── Rendering ───────────────────────────────────────────────────────────

    def actions(self) -> list[Action]:
        """Draw instructions covering every row of the bounds, top to bottom."""
        result: list[Action] = []
        x = self._start_x
        divider_row = self._start_y + self._divider
        minus_top = divider_row - len(self._minus)

        for y in range(self._start_y, minus_top):
            result.append(MoveTo(x, y))
            result.append(Print(self._blank))
        for i, line in enumerate(reversed(self._minus)):
            result.append(MoveTo(x, minus_top + i))
            result.append(Print(line.text))
        for i, line in enumerate(self._plus):
            result.append(MoveTo(x, divider_row + i))
            result.append(Print(line.text))
        for y in range(divider_row + len(self._plus), self._end_y):
            result.append(MoveTo(x, y))
            result.append(Print(self._blank))
        return result

    def print(self, driver: RenderDriver) -> None:
        """Feed every draw instruction to `driver`, stopping at its first error."""
        for action in self.actions():
            driver.handle(action)

    def print_safe(self, driver: SafeRenderDriver) -> None:
        """
        Feed every draw instruction to a driver that must never fail.

        Raises:
            RenderContractError: the driver raised anyway.
        """
        for action in self.actions():
            try:
                driver.safe_handle(action)
            except Exception as exc:
                raise RenderContractError(
                    f"{type(driver).__name__} failed on {action!r}"
                ) from exc
