from __future__ import annotations

from datetime import datetime

from PIL import Image

from tickring.display.geometry import FaceGeometry
from tickring.renderers.clock.renderer import ClockRenderer, ClockStyle
from tickring.renderers.text import PygameTextMeasurer
from tickring.runtime.clock_view import ClockView
from tickring.runtime.display_context import DisplayContext
from tickring.runtime.frame_driver import FrameDriver
from tickring.runtime.frame_exporter import FrameExporter
from tickring.runtime.painter import CommandPainter
from tickring.utilities.env import Configuration, WindowMode


def build_clock_view(
    *,
    size: int | None = None,
    interval_ms: int | None = None,
    window_mode: WindowMode | None = None,
    padding: int | None = None,
    font_name: str | None = None,
) -> ClockView:
    """Wire a clock view, filling unset options from the environment."""
    display, renderer = _build_face(
        size=size,
        padding=padding,
        font_name=font_name,
        window_mode=window_mode or Configuration.window_mode(),
    )
    return ClockView(
        display=display,
        renderer=renderer,
        painter=display.painter,
        driver=FrameDriver(interval_ms),
    )


def render_snapshot(
    timestamp: datetime,
    *,
    size: int | None = None,
    padding: int | None = None,
    font_name: str | None = None,
    exporter: FrameExporter | None = None,
) -> Image.Image:
    """Render one frame without opening a window or starting a timer."""
    display, renderer = _build_face(size=size, padding=padding, font_name=font_name)
    display.initialize_offscreen()
    display.painter.paint(
        display.clear_face(), renderer.render(display.face, timestamp)
    )
    return (exporter or FrameExporter()).export(display.compose())


def _build_face(
    *,
    size: int | None,
    padding: int | None,
    font_name: str | None,
    window_mode: WindowMode = WindowMode.WINDOWED,
) -> tuple[DisplayContext, ClockRenderer]:
    fonts = PygameTextMeasurer()
    style = ClockStyle(font_name=font_name or Configuration.font_name())
    display = DisplayContext(
        face=FaceGeometry(size or Configuration.surface_size()),
        painter=CommandPainter(fonts),
        style=style,
        padding=Configuration.window_padding() if padding is None else padding,
        window_mode=window_mode,
    )
    return display, ClockRenderer(fonts, style)
