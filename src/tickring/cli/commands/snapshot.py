from datetime import date, datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from tickring.runtime.launcher import render_snapshot
from tickring.utilities.logging import get_logger

logger = get_logger(__name__)

TIME_FORMATS = ("%H:%M:%S.%f", "%H:%M:%S")


def parse_time_of_day(value: str, *, on: date | None = None) -> datetime:
    """Parse ``HH:MM:SS[.ffffff]`` into a timestamp on ``on`` (today by default)."""
    for time_format in TIME_FORMATS:
        try:
            parsed = datetime.strptime(value.strip(), time_format)
        except ValueError:
            continue
        return datetime.combine(on or date.today(), parsed.time())
    raise typer.BadParameter(
        f"{value!r} is not a time of day; expected HH:MM:SS or HH:MM:SS.ffffff",
        param_hint="--time",
    )


def snapshot_command(
    output: Annotated[
        Path,
        typer.Option("--output", dir_okay=False, help="PNG file to write"),
    ],
    time_of_day: Annotated[
        Optional[str],
        typer.Option("--time", help="Time to render, HH:MM:SS[.ffffff]; defaults to now"),
    ] = None,
    size: Annotated[
        Optional[int],
        typer.Option("--size", min=100, help="Side length of the clock face in pixels"),
    ] = None,
) -> None:
    timestamp = datetime.now() if time_of_day is None else parse_time_of_day(time_of_day)
    image = render_snapshot(timestamp, size=size)
    output.parent.mkdir(parents=True, exist_ok=True)
    image.save(output, format="PNG")
    logger.info("Wrote %s snapshot to %s", timestamp.time().isoformat(), output)
