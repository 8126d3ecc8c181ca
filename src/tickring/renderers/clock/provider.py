from datetime import datetime

import reactivex
from reactivex import operators as ops

from tickring.renderers.clock.state import ClockState


class ClockStateProvider:
    """Turn the frame driver's tick stream into clock states."""

    def __init__(self, ticks: reactivex.Observable[datetime]) -> None:
        self._ticks = ticks

    def observable(self) -> reactivex.Observable[ClockState]:
        return self._ticks.pipe(
            ops.map(lambda timestamp: ClockState(timestamp=timestamp)),
        )
