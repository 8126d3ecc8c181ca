from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ClockState:
    timestamp: datetime


def should_repaint(previous: ClockState | None, current: ClockState) -> bool:
    if previous is None:
        return True
    return previous.timestamp != current.timestamp
