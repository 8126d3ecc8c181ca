"""Immutable drawing primitives produced by renderers and consumed by painters.

Commands are plain values so a whole frame can be compared for equality,
which keeps rendering testable without rasterizing anything.
"""

from __future__ import annotations

from dataclasses import dataclass

from tickring.display.color import Color
from tickring.display.geometry import Point


@dataclass(frozen=True)
class FontSpec:
    name: str
    size: int


@dataclass(frozen=True)
class LineCommand:
    start: Point
    end: Point
    color: Color
    width: int = 1


@dataclass(frozen=True)
class PolygonCommand:
    points: tuple[Point, ...]
    color: Color
    blur_radius: float = 0.0


@dataclass(frozen=True)
class CircleCommand:
    center: Point
    radius: float
    color: Color
    blur_radius: float = 0.0


@dataclass(frozen=True)
class TextCommand:
    """A text run whose top-left corner sits at ``position``.

    ``size`` is the measured ``(width, height)`` the layout was computed with.
    """

    text: str
    position: Point
    font: FontSpec
    color: Color
    size: tuple[int, int]

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]


DrawCommand = LineCommand | PolygonCommand | CircleCommand | TextCommand
