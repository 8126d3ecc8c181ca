"""Time and face geometry for the clock renderer.

Every function here is a pure function of its arguments; nothing is cached
between frames.
"""

from __future__ import annotations

import math
from datetime import datetime

from tickring.display.geometry import FaceGeometry, Point

TICK_SLOTS = 60
DEGREES_PER_SLOT = 360 / TICK_SLOTS
DEGREES_PER_SECOND = 6
EMPHASIS_EVERY = 5
# Slot 0 sits at twelve o'clock.
TOP_OFFSET_DEGREES = -90

INDICATOR_TIP_INSET = 25
INDICATOR_BASE_INSET = 10
INDICATOR_HALF_WIDTH = 8


def smooth_seconds(timestamp: datetime) -> float:
    # datetime.microsecond already includes the millisecond part.
    return timestamp.second + timestamp.microsecond / 1_000_000


def base_rotation_degrees(timestamp: datetime) -> float:
    return smooth_seconds(timestamp) * DEGREES_PER_SECOND


def slot_angle(rotation_degrees: float, slot: int) -> float:
    """Return the angle of ``slot`` in radians, with the ring rotated as a whole."""
    return math.radians(rotation_degrees) + math.radians(
        slot * DEGREES_PER_SLOT + TOP_OFFSET_DEGREES
    )


def is_emphasized(slot: int) -> bool:
    return slot % EMPHASIS_EVERY == 0


def numeral_for_slot(slot: int) -> str:
    # Numerals count down clockwise: 00, 55, 50, ... 05.
    return f"{(TICK_SLOTS - slot) % TICK_SLOTS:02d}"


def indicator_vertices(face: FaceGeometry) -> tuple[Point, Point, Point]:
    cx, cy = face.center
    top = cy - face.radius
    return (
        (cx, top + INDICATOR_TIP_INSET),
        (cx - INDICATOR_HALF_WIDTH, top + INDICATOR_BASE_INSET),
        (cx + INDICATOR_HALF_WIDTH, top + INDICATOR_BASE_INSET),
    )


def readout_runs(timestamp: datetime) -> tuple[str, str, str, str, str]:
    return (
        f"{timestamp.hour:02d}",
        ":",
        f"{timestamp.minute:02d}",
        ":",
        f"{timestamp.second:02d}",
    )

