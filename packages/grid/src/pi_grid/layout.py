"""
Layout documents — a YAML description of several zones sharing one screen.

Validated with pydantic, then turned into one DrawProcess per zone by
build_layout(). Reclaim steps move unused rows from one zone to an adjacent
one; shove steps tighten a zone's divider.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .drivers import RenderDriver
from .errors import LayoutError, NoSpaceError
from .process import DrawProcess
from .settings import LayoutSettings
from .viewport import Side, Viewport, parse_divider

logger = logging.getLogger(__name__)


class ViewportSpec(BaseModel):
    start_x: int = Field(ge=0)
    start_y: int = Field(ge=0)
    end_x: int = Field(ge=0)
    end_y: int = Field(ge=0)


class ZoneSpec(BaseModel):
    name: str
    viewport: ViewportSpec
    divider: str | int | None = None
    trim: str | None = None
    minus: list[str] = Field(default_factory=list)
    plus: list[str] = Field(default_factory=list)


class ReclaimSpec(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(alias="from")
    side: Side
    to: str
    min_left: int | None = Field(default=None, ge=0)
    max_taken: int | None = Field(default=None, ge=0)


class ShoveSpec(BaseModel):
    zone: str
    side: Side


class LayoutDocument(BaseModel):
    width: int | None = Field(default=None, ge=0)
    height: int | None = Field(default=None, ge=0)
    zones: list[ZoneSpec]
    reclaim: list[ReclaimSpec] = Field(default_factory=list)
    shove: list[ShoveSpec] = Field(default_factory=list)


@dataclass
class Layout:
    """Built zones, in document order, plus the overflow each one hit."""

    zones: dict[str, DrawProcess]
    overflow: dict[str, list[NoSpaceError]] = field(default_factory=dict)
    width: int = 0
    height: int = 0

    def print(self, driver: RenderDriver) -> None:
        for process in self.zones.values():
            process.print(driver)


def parse_layout(data: Any) -> LayoutDocument:
    try:
        return LayoutDocument.model_validate(data)
    except ValidationError as e:
        raise LayoutError(f"Invalid layout document: {e}") from e


def load_layout(path: str) -> LayoutDocument:
    """Read and validate a YAML layout document."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise LayoutError(f"Cannot read layout {path}: {e}") from e
    except yaml.YAMLError as e:
        raise LayoutError(f"Malformed layout {path}: {e}") from e
    return parse_layout(data)


def _zone(zones: dict[str, DrawProcess], name: str) -> DrawProcess:
    try:
        return zones[name]
    except KeyError:
        raise LayoutError(f"Unknown zone: {name!r}") from None


def build_layout(doc: LayoutDocument, settings: LayoutSettings | None = None) -> Layout:
    """Construct and fill every zone, then apply reclaim and shove steps."""
    settings = settings or LayoutSettings()
    zones: dict[str, DrawProcess] = {}
    overflow: dict[str, list[NoSpaceError]] = {}

    for spec in doc.zones:
        if spec.name in zones:
            raise LayoutError(f"Duplicate zone: {spec.name!r}")
        try:
            viewport = Viewport(**spec.viewport.model_dump())
            divider = parse_divider(spec.divider) if spec.divider is not None else settings.get_divider()
            process = DrawProcess(viewport, divider, fill_char=settings.get_fill_char())
            strategy = settings.make_trim_strategy(spec.trim)
        except ValueError as e:
            raise LayoutError(f"Zone {spec.name!r}: {e}") from e

        errors: list[NoSpaceError] = []
        for side, items in ((Side.MINUS, spec.minus), (Side.PLUS, spec.plus)):
            if items:
                errors.extend(r for r in process.add_to_section_lines(items, strategy, side) if r is not None)
        if errors:
            logger.info("Zone %s: %d item(s) did not fit", spec.name, len(errors))
            overflow[spec.name] = errors
        zones[spec.name] = process

    for step in doc.reclaim:
        source = _zone(zones, step.source)
        target = _zone(zones, step.to)
        freed = source.split_free_space(step.side, step.min_left, step.max_taken)
        if freed is None:
            logger.debug("Zone %s has no free %s rows to give", step.source, step.side.value)
            continue
        if target.extend(freed) is not None:
            source.extend(freed)
            raise LayoutError(
                f"Rows freed from {step.source!r} are not adjacent to {step.to!r}"
            )

    for step in doc.shove:
        _zone(zones, step.zone).shove(step.side)

    width = doc.width if doc.width is not None else max((p.end_x() for p in zones.values()), default=0)
    height = doc.height if doc.height is not None else max((p.end_y() for p in zones.values()), default=0)
    return Layout(zones=zones, overflow=overflow, width=width, height=height)
