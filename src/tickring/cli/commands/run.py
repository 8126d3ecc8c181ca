from typing import Annotated, Optional

import typer

from tickring.runtime.launcher import build_clock_view
from tickring.utilities.env import WindowMode
from tickring.utilities.logging import get_logger

logger = get_logger(__name__)


def run_command(
    size: Annotated[
        Optional[int],
        typer.Option("--size", min=100, help="Side length of the clock face in pixels"),
    ] = None,
    interval_ms: Annotated[
        Optional[int],
        typer.Option("--interval-ms", min=1, help="Frame timer period"),
    ] = None,
    window_mode: Annotated[
        Optional[WindowMode],
        typer.Option("--window-mode", case_sensitive=False),
    ] = None,
) -> None:
    view = build_clock_view(
        size=size,
        interval_ms=interval_ms,
        window_mode=window_mode,
    )
    logger.info(
        "Starting clock: face %dpx, frame every %d ms",
        view.display.face.size,
        view.driver.interval_ms,
    )
    view.run()
