from __future__ import annotations

from typing import Protocol

import pygame

from tickring.renderers.commands import FontSpec


class TextMeasurer(Protocol):
    def measure(self, text: str, font: FontSpec) -> tuple[int, int]:
        ...


class PygameTextMeasurer:
    """Measure and rasterize text with pygame system fonts.

    Fonts are loaded once per ``FontSpec``; the painter renders with the same
    font objects the layout was measured with.
    """

    def __init__(self) -> None:
        self._fonts: dict[FontSpec, pygame.font.Font] = {}

    def font(self, font_spec: FontSpec) -> pygame.font.Font:
        font = self._fonts.get(font_spec)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont(font_spec.name, font_spec.size)
            self._fonts[font_spec] = font
        return font

    def measure(self, text: str, font: FontSpec) -> tuple[int, int]:
        return self.font(font).size(text)
