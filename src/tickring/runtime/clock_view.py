from __future__ import annotations

import logging
import time
from datetime import datetime

import pygame
from reactivex.abc import DisposableBase

from tickring.renderers.clock.provider import ClockStateProvider
from tickring.renderers.clock.renderer import ClockRenderer
from tickring.renderers.clock.state import ClockState, should_repaint
from tickring.runtime.display_context import DisplayContext
from tickring.runtime.event_pump import EventPump
from tickring.runtime.frame_driver import FrameDriver
from tickring.runtime.painter import CommandPainter
from tickring.utilities.logging import get_logger
from tickring.utilities.logging_control import (LoggingController,
                                                get_logging_controller)

logger = get_logger(__name__)

FRAME_LOG_KEY = "clock.frame"


class ClockView:
    """Embed the clock in a pygame window.

    ``attach`` and ``detach`` are the only lifecycle hooks. Frames are painted
    from the driver's tick stream, so once ``detach`` has stopped the driver
    and dropped the subscription no late tick can reach the surfaces.
    """

    def __init__(
        self,
        display: DisplayContext,
        renderer: ClockRenderer,
        painter: CommandPainter,
        driver: FrameDriver,
        event_pump: EventPump | None = None,
        logging_controller: LoggingController | None = None,
    ) -> None:
        self.display = display
        self.renderer = renderer
        self.painter = painter
        self.driver = driver
        self.event_pump = event_pump
        self._logging_controller = logging_controller or get_logging_controller()
        self._subscription: DisposableBase | None = None
        self._previous: ClockState | None = None

    @property
    def attached(self) -> bool:
        return self._subscription is not None

    def attach(self) -> None:
        if self._subscription is not None:
            raise RuntimeError("ClockView is already attached")
        self.display.ensure_initialized()
        provider = ClockStateProvider(self.driver.ticks)
        self._subscription = provider.observable().subscribe(on_next=self.on_state)
        self.driver.start()

    def detach(self) -> None:
        if self._subscription is None:
            return
        self.driver.stop()
        self._subscription.dispose()
        self._subscription = None
        logger.info("Clock view detached")

    def on_state(self, state: ClockState) -> bool:
        """Paint ``state``; returns ``False`` when the frame would be unchanged."""
        if not should_repaint(self._previous, state):
            return False

        start_ns = time.perf_counter_ns()
        self.paint(state.timestamp)
        self.display.present()
        self._previous = state

        duration_ms = (time.perf_counter_ns() - start_ns) / 1_000_000
        self._logging_controller.log(
            key=FRAME_LOG_KEY,
            logger=logger,
            level=logging.DEBUG,
            msg="Painted frame for %s in %.2f ms",
            args=(state.timestamp.isoformat(), duration_ms),
        )
        return True

    def paint(self, timestamp: datetime) -> None:
        face_surface = self.display.clear_face()
        self.painter.paint(
            face_surface, self.renderer.render(self.display.face, timestamp)
        )

    def run(self) -> None:
        try:
            if self.display.screen is None:
                self.display.initialize()
            self.attach()
            # The frame event type is only known once the driver has started.
            event_pump = self.event_pump or EventPump(self.driver.event_type)
            running = True
            while running:
                result = event_pump.pump()
                running = result.running
                if running and result.frame_due:
                    self.driver.tick()
        finally:
            self.detach()
            pygame.quit()
