"""
Terminal column-width helpers used by the trim strategies.

Provides:
- visible_width(): terminal column width of a string
- truncate_to_width(): cut to a column budget, with ellipsis
- pad_to_width(): right-pad to an exact column count
- wrap_text(): word-wrap to a column budget, hard-breaking long words
"""
from __future__ import annotations

import re
from functools import lru_cache

from wcwidth import wcwidth

_SPACE_RUN_RE = re.compile(r"(\s+)")


def char_width(ch: str) -> int:
    """Width of a single code point; control and combining characters are 0."""
    w = wcwidth(ch)
    return w if w > 0 else 0


@lru_cache(maxsize=512)
def visible_width(s: str) -> int:
    """Terminal column width of s. Tabs must be expanded beforehand."""
    if not s:
        return 0
    # Fast path: printable ASCII
    if s.isascii() and s.isprintable():
        return len(s)
    return sum(char_width(ch) for ch in s)


def expand_tabs(text: str, tab_width: int = 3) -> str:
    return text.replace("\t", " " * tab_width) if "\t" in text else text


def pad_to_width(text: str, width: int, fill: str = " ") -> str:
    """Right-pad text with fill until it is exactly `width` columns (never cuts)."""
    return text + fill * max(0, width - visible_width(text))


def _take_columns(text: str, budget: int) -> tuple[str, str]:
    """Split text at the last code point that still fits in `budget` columns."""
    used = 0
    for i, ch in enumerate(text):
        w = char_width(ch)
        if used + w > budget:
            return text[:i], text[i:]
        used += w
    return text, ""


def truncate_to_width(
    text: str,
    max_width: int,
    ellipsis: str = "...",
    pad: bool = False,
) -> str:
    """
    Truncate text to max_width columns, ending in `ellipsis` when cut.
    With pad=True the result is always exactly max_width columns.
    """
    if max_width <= 0:
        return ""
    text_visible = visible_width(text)
    if text_visible <= max_width:
        return pad_to_width(text, max_width) if pad else text

    target_width = max_width - visible_width(ellipsis)
    if target_width <= 0:
        result, _ = _take_columns(ellipsis, max_width)
    else:
        head, _ = _take_columns(text, target_width)
        result = head + ellipsis
    return pad_to_width(result, max_width) if pad else result


def _break_long_word(word: str, width: int) -> list[str]:
    pieces: list[str] = []
    rest = word
    while rest:
        head, rest = _take_columns(rest, width)
        if not head:
            # A single character wider than the line; emit it alone
            head, rest = rest[0], rest[1:]
        pieces.append(head)
    return pieces


def _wrap_single_line(line: str, width: int) -> list[str]:
    if visible_width(line) <= width:
        return [line.rstrip()]

    wrapped: list[str] = []
    current = ""
    current_width = 0
    for token in _SPACE_RUN_RE.split(line):
        if not token:
            continue
        token_width = visible_width(token)
        if token.isspace():
            if current_width + token_width <= width:
                current += token
                current_width += token_width
            else:
                wrapped.append(current.rstrip())
                current, current_width = "", 0
            continue

        if current_width + token_width > width and current_width > 0:
            wrapped.append(current.rstrip())
            current, current_width = "", 0

        if token_width > width:
            pieces = _break_long_word(token, width)
            wrapped.extend(pieces[:-1])
            current = pieces[-1]
            current_width = visible_width(current)
        else:
            current += token
            current_width += token_width

    if current.strip() or not wrapped:
        wrapped.append(current.rstrip())
    return wrapped


def wrap_text(text: str, width: int) -> list[str]:
    """
    Word-wrap text to `width` columns. Embedded newlines start new lines;
    trailing whitespace is stripped from each produced line.
    """
    if width <= 0:
        return []
    if not text:
        return [""]
    result: list[str] = []
    for line in text.split("\n"):
        result.extend(_wrap_single_line(line, width))
    return result
