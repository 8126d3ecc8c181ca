from __future__ import annotations

from datetime import datetime
from types import TracebackType
from typing import Callable

import pygame
import reactivex
from reactivex.subject import Subject

from tickring.utilities.env import Configuration
from tickring.utilities.logging import get_logger

logger = get_logger(__name__)


class FrameDriver:
    """Own the repeating frame timer and publish a fresh timestamp per tick.

    The timer is a pygame ``set_timer`` registration; it is acquired by
    ``start`` and released by the first ``stop``. Unless an event type is
    supplied, ``start`` reserves a fresh one; pygame recycles custom event ids
    across ``quit``/``init`` so they cannot be reserved at import time.
    """

    def __init__(
        self,
        interval_ms: int | None = None,
        *,
        now: Callable[[], datetime] = datetime.now,
        event_type: int | None = None,
    ) -> None:
        self._interval_ms = (
            Configuration.frame_interval_ms() if interval_ms is None else interval_ms
        )
        if self._interval_ms < 1:
            raise ValueError("Frame interval must be at least 1 ms")
        self._now = now
        self._event_type = event_type
        self._ticks: Subject[datetime] = Subject()
        self._running = False
        self._released = False

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def event_type(self) -> int | None:
        return self._event_type

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def ticks(self) -> reactivex.Observable[datetime]:
        return self._ticks

    def start(self) -> None:
        if self._running:
            raise RuntimeError("FrameDriver is already running")
        if self._released:
            raise RuntimeError("FrameDriver cannot be restarted once stopped")
        if self._event_type is None:
            self._event_type = pygame.event.custom_type()
        pygame.time.set_timer(self._event_type, self._interval_ms)
        self._running = True
        logger.info("Frame timer started at %d ms", self._interval_ms)

    def stop(self) -> None:
        if not self._running:
            logger.debug("Frame timer already released")
            return
        pygame.time.set_timer(self._event_type, 0)
        self._running = False
        self._released = True
        self._ticks.on_completed()
        logger.info("Frame timer stopped")

    def tick(self) -> datetime | None:
        """Sample the clock and publish it; returns ``None`` when not running."""
        if not self._running:
            return None
        timestamp = self._now()
        self._ticks.on_next(timestamp)
        return timestamp

    def __enter__(self) -> FrameDriver:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.stop()
