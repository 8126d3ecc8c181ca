from __future__ import annotations

from dataclasses import dataclass

import pygame

from tickring.utilities.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PumpResult:
    running: bool
    frame_due: bool


class EventPump:
    """Wait for the next pygame event, then drain whatever else is queued.

    Multiple queued frame ticks collapse into one, so a slow frame makes the
    next one late instead of queuing a backlog.
    """

    def __init__(self, frame_event_type: int) -> None:
        self._frame_event_type = frame_event_type

    def pump(self) -> PumpResult:
        running = True
        frame_due = False
        for event in (pygame.event.wait(), *pygame.event.get()):
            if event.type == pygame.QUIT:
                logger.info("Window closed")
                running = False
            elif event.type == self._frame_event_type:
                frame_due = True
        return PumpResult(running=running, frame_due=frame_due)
