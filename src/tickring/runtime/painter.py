from __future__ import annotations

import math
from collections.abc import Callable, Iterable

import pygame
from PIL import ImageFilter

from tickring.display.color import Color
from tickring.display.geometry import Point
from tickring.renderers.commands import (CircleCommand, DrawCommand,
                                         LineCommand, PolygonCommand,
                                         TextCommand)
from tickring.renderers.text import PygameTextMeasurer
from tickring.runtime.frame_exporter import FrameExporter
from tickring.utilities.env import FrameExportStrategy

# Gaussian tails are negligible past three standard deviations.
BLUR_EXTENT = 3

LayerDraw = Callable[[pygame.Surface, Callable[[Point], Point]], None]


class CommandPainter:
    """Rasterize drawing commands onto a pygame surface, in order.

    pygame's draw functions overwrite pixels instead of blending, so any
    translucent or blurred primitive is drawn on a scratch layer covering its
    bounds and alpha-blitted onto the target.
    """

    def __init__(
        self,
        fonts: PygameTextMeasurer,
        exporter: FrameExporter | None = None,
    ) -> None:
        self._fonts = fonts
        # Blurring needs the alpha channel, which only the buffer path keeps.
        self._exporter = exporter or FrameExporter(
            strategy_provider=lambda: FrameExportStrategy.BUFFER
        )

    def paint(self, surface: pygame.Surface, commands: Iterable[DrawCommand]) -> None:
        for command in commands:
            match command:
                case LineCommand():
                    self._paint_line(surface, command)
                case PolygonCommand():
                    self._paint_polygon(surface, command)
                case CircleCommand():
                    self._paint_circle(surface, command)
                case TextCommand():
                    self._paint_text(surface, command)
                case _:
                    raise TypeError(f"Unsupported draw command {command!r}")

    def _paint_line(self, surface: pygame.Surface, command: LineCommand) -> None:
        def draw(target: pygame.Surface, shift: Callable[[Point], Point]) -> None:
            pygame.draw.line(
                target,
                command.color.rgba(),
                shift(command.start),
                shift(command.end),
                command.width,
            )

        self._draw(
            surface,
            (command.start, command.end),
            command.color,
            padding=command.width,
            blur_radius=0.0,
            draw=draw,
        )

    def _paint_polygon(self, surface: pygame.Surface, command: PolygonCommand) -> None:
        def draw(target: pygame.Surface, shift: Callable[[Point], Point]) -> None:
            pygame.draw.polygon(
                target,
                command.color.rgba(),
                [shift(point) for point in command.points],
            )

        self._draw(
            surface,
            command.points,
            command.color,
            padding=1,
            blur_radius=command.blur_radius,
            draw=draw,
        )

    def _paint_circle(self, surface: pygame.Surface, command: CircleCommand) -> None:
        cx, cy = command.center
        r = command.radius

        def draw(target: pygame.Surface, shift: Callable[[Point], Point]) -> None:
            pygame.draw.circle(target, command.color.rgba(), shift(command.center), r)

        self._draw(
            surface,
            ((cx - r, cy - r), (cx + r, cy + r)),
            command.color,
            padding=1,
            blur_radius=command.blur_radius,
            draw=draw,
        )

    def _paint_text(self, surface: pygame.Surface, command: TextCommand) -> None:
        font = self._fonts.font(command.font)
        text_surface = font.render(command.text, True, command.color.rgb())
        if not command.color.is_opaque:
            text_surface.set_alpha(command.color.a)
        x, y = command.position
        surface.blit(text_surface, (round(x), round(y)))

    def _draw(
        self,
        surface: pygame.Surface,
        points: Iterable[Point],
        color: Color,
        *,
        padding: float,
        blur_radius: float,
        draw: LayerDraw,
    ) -> None:
        if color.is_opaque and blur_radius <= 0:
            draw(surface, lambda point: point)
            return

        bounds = _bounds(points, padding + BLUR_EXTENT * blur_radius)
        # Transparent pixels carry the stroke color so blurred edges do not darken.
        layer = pygame.Surface(bounds.size, pygame.SRCALPHA)
        layer.fill((*color.rgb(), 0))
        draw(layer, lambda point: (point[0] - bounds.x, point[1] - bounds.y))

        if blur_radius > 0:
            layer = self._blur(layer, blur_radius)
        surface.blit(layer, bounds.topleft)

    def _blur(self, layer: pygame.Surface, radius: float) -> pygame.Surface:
        image = self._exporter.export(layer)
        return self._exporter.load(image.filter(ImageFilter.GaussianBlur(radius)))


def _bounds(points: Iterable[Point], padding: float) -> pygame.Rect:
    xs, ys = zip(*points)
    left = math.floor(min(xs) - padding)
    top = math.floor(min(ys) - padding)
    right = math.ceil(max(xs) + padding)
    bottom = math.ceil(max(ys) + padding)
    return pygame.Rect(left, top, max(1, right - left), max(1, bottom - top))
