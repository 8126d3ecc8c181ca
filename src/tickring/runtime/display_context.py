from __future__ import annotations

from dataclasses import dataclass

import pygame

from tickring.display.geometry import FaceGeometry
from tickring.renderers.clock.renderer import ClockStyle, face_backdrop
from tickring.runtime.painter import CommandPainter
from tickring.utilities.env import WindowMode
from tickring.utilities.logging import get_logger

logger = get_logger(__name__)

WINDOW_CAPTION = "tickring"


@dataclass
class DisplayContext:
    """Own the window, the clock face surface and the static backdrop."""

    face: FaceGeometry
    painter: CommandPainter
    style: ClockStyle
    padding: int = 0
    window_mode: WindowMode = WindowMode.WINDOWED
    screen: pygame.Surface | None = None
    face_surface: pygame.Surface | None = None
    background: pygame.Surface | None = None
    onscreen: bool = False

    def initialize(self) -> None:
        pygame.init()
        size = self.window_size()
        if self.window_mode == WindowMode.FULLSCREEN:
            size = (0, 0)
        self.screen = pygame.display.set_mode(size, _pygame_flags(self.window_mode))
        pygame.display.set_caption(WINDOW_CAPTION)
        self.onscreen = True
        self._prepare_surfaces()
        logger.info(
            "Opened %s window %dx%d", self.window_mode.value, *self.screen.get_size()
        )

    def initialize_offscreen(self) -> None:
        self.screen = pygame.Surface(self.window_size(), pygame.SRCALPHA)
        self.onscreen = False
        self._prepare_surfaces()

    def ensure_initialized(self) -> None:
        if self.screen is None or self.face_surface is None or self.background is None:
            raise RuntimeError("Display is not initialized")

    def window_size(self) -> tuple[int, int]:
        side = self.face.size + 2 * self.padding
        return (side, side)

    def face_origin(self) -> tuple[int, int]:
        if self.screen is None:
            raise RuntimeError("Display is not initialized")
        width, height = self.screen.get_size()
        return ((width - self.face.size) // 2, (height - self.face.size) // 2)

    def clear_face(self) -> pygame.Surface:
        self.ensure_initialized()
        self.face_surface.fill((0, 0, 0, 0))
        return self.face_surface

    def compose(self) -> pygame.Surface:
        self.ensure_initialized()
        self.screen.blit(self.background, (0, 0))
        self.screen.blit(self.face_surface, self.face_origin())
        return self.screen

    def present(self) -> None:
        self.compose()
        if self.onscreen:
            pygame.display.flip()

    def _prepare_surfaces(self) -> None:
        self.face_surface = pygame.Surface(self.face.dimensions, pygame.SRCALPHA)
        self.background = self._build_background()

    def _build_background(self) -> pygame.Surface:
        background = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        background.fill(self.style.face_color.rgba())
        ox, oy = self.face_origin()
        cx, cy = self.face.center
        self.painter.paint(
            background,
            face_backdrop((ox + cx, oy + cy), self.face.radius, self.style),
        )
        return background


def _pygame_flags(window_mode: WindowMode) -> int:
    match window_mode:
        case WindowMode.FULLSCREEN:
            return pygame.FULLSCREEN
        case WindowMode.HIDDEN:
            return pygame.HIDDEN
        case WindowMode.WINDOWED:
            return 0
