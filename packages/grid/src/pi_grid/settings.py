"""
Layout settings — user (~/.pi-grid/settings.yaml) and project
(<cwd>/.pi-grid/settings.yaml) files, merged with project winning.

Every field is optional in the files; the effective value comes from the
get_*() accessors, which supply the defaults.
"""
from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from typing import Any

import yaml

from .config import get_project_settings_path, get_settings_path
from .errors import LayoutError
from .trim import TrimStrategy, get_trim_strategy
from .viewport import DividerPlacement, parse_divider

DEFAULT_DIVIDER = "halfway"
DEFAULT_TRIM = "wrap"
DEFAULT_ELLIPSIS = "..."
DEFAULT_FILL_CHAR = " "
DEFAULT_TAB_WIDTH = 3
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class LayoutSettings:
    divider: str | int | None = None     # beginning | end | halfway | <offset>
    trim: str | None = None              # ignore | truncate | wrap | lines
    ellipsis: str | None = None
    fill_char: str | None = None
    tab_width: int | None = None
    log_level: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LayoutSettings":
        known = cls.__dataclass_fields__.keys()
        filtered = {k: v for k, v in data.items() if k in known}
        return cls(**filtered)

    def merge(self, other: "LayoutSettings") -> "LayoutSettings":
        """Merge another LayoutSettings into this one (other wins for non-None values)."""
        base = self.to_dict()
        for k, v in other.to_dict().items():
            if v is not None:
                base[k] = v
        return LayoutSettings.from_dict(base)

    # ── Effective values ──────────────────────────────────────────────────────

    def get_divider(self) -> DividerPlacement:
        return parse_divider(self.divider if self.divider is not None else DEFAULT_DIVIDER)

    def get_trim_name(self) -> str:
        return self.trim or DEFAULT_TRIM

    def get_ellipsis(self) -> str:
        return self.ellipsis if self.ellipsis is not None else DEFAULT_ELLIPSIS

    def get_fill_char(self) -> str:
        return self.fill_char or DEFAULT_FILL_CHAR

    def get_tab_width(self) -> int:
        return self.tab_width if self.tab_width is not None else DEFAULT_TAB_WIDTH

    def get_log_level(self) -> str:
        return (self.log_level or DEFAULT_LOG_LEVEL).upper()

    def make_trim_strategy(self, name: str | None = None) -> TrimStrategy:
        """Build the named strategy (or the configured default) with these settings."""
        return get_trim_strategy(
            name or self.get_trim_name(),
            ellipsis=self.get_ellipsis(),
            tab_width=self.get_tab_width(),
        )


def _load_file(path: str) -> LayoutSettings:
    if not os.path.exists(path):
        return LayoutSettings()
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LayoutError(f"Malformed settings file {path}: {e}") from e
    if raw is None:
        return LayoutSettings()
    if not isinstance(raw, dict):
        raise LayoutError(f"Settings file {path} must contain a mapping")
    tab_width = raw.get("tab_width")
    if tab_width is not None:
        if isinstance(tab_width, bool) or not str(tab_width).strip().isdigit():
            raise LayoutError(f"Settings file {path}: tab_width must be a non-negative integer, got {tab_width!r}")
        raw["tab_width"] = int(tab_width)
    return LayoutSettings.from_dict(raw)


def load_settings(
    cwd: str | None = None,
    settings_path: str | None = None,
) -> LayoutSettings:
    """Load user settings, then project settings on top."""
    user = _load_file(settings_path or get_settings_path())
    project = _load_file(get_project_settings_path(cwd or os.getcwd()))
    return user.merge(project)
