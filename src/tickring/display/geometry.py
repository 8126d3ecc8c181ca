from __future__ import annotations

import math
from dataclasses import dataclass

Point = tuple[float, float]


@dataclass(frozen=True)
class FaceGeometry:
    """Square drawing area the clock face is laid out on."""

    size: int

    @property
    def center(self) -> Point:
        half = self.size / 2
        return (half, half)

    @property
    def radius(self) -> float:
        return self.size / 2

    @property
    def dimensions(self) -> tuple[int, int]:
        return (self.size, self.size)


def polar(center: Point, distance: float, angle_radians: float) -> Point:
    cx, cy = center
    return (
        cx + distance * math.cos(angle_radians),
        cy + distance * math.sin(angle_radians),
    )
