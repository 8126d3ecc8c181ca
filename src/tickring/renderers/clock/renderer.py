from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from tickring.display.color import Color
from tickring.display.geometry import FaceGeometry, Point, polar
from tickring.renderers.clock.layout import (TICK_SLOTS,
                                             base_rotation_degrees,
                                             indicator_vertices, is_emphasized,
                                             numeral_for_slot, readout_runs,
                                             slot_angle)
from tickring.renderers.commands import (CircleCommand, DrawCommand, FontSpec,
                                         LineCommand, PolygonCommand,
                                         TextCommand)
from tickring.renderers.text import TextMeasurer
from tickring.utilities.env.rendering import DEFAULT_FONT_NAME


@dataclass(frozen=True)
class ClockStyle:
    font_name: str = DEFAULT_FONT_NAME
    numeral_size: int = 16
    readout_size: int = 30

    tick_color: Color = field(default_factory=lambda: Color.white().with_opacity(0.5))
    tick_width: int = 1
    emphasized_tick_width: int = 2
    tick_outer_inset: float = 20
    tick_inner_inset: float = 25

    numeral_color: Color = field(default_factory=Color.white)
    numeral_inset: float = 45

    indicator_color: Color = field(default_factory=Color.white)
    indicator_glow_color: Color = field(
        default_factory=lambda: Color.white().with_opacity(0.3)
    )
    indicator_glow_blur: float = 3

    readout_color: Color = field(default_factory=Color.white)

    face_color: Color = field(default_factory=Color.black)
    face_glow_color: Color = field(
        default_factory=lambda: Color.white().with_opacity(0.1)
    )
    face_glow_blur: float = 10
    face_glow_spread: float = 1

    @property
    def numeral_font(self) -> FontSpec:
        return FontSpec(name=self.font_name, size=self.numeral_size)

    @property
    def readout_font(self) -> FontSpec:
        return FontSpec(name=self.font_name, size=self.readout_size)


class ClockRenderer:
    """Lay out one clock frame as a sequence of drawing commands.

    ``render`` depends only on the face, the timestamp and the text measurer,
    so identical inputs always yield an identical frame.
    """

    def __init__(self, measurer: TextMeasurer, style: ClockStyle | None = None) -> None:
        self._measurer = measurer
        self._style = style or ClockStyle()

    def render(self, face: FaceGeometry, timestamp: datetime) -> tuple[DrawCommand, ...]:
        return (
            *self.draw_rotating_seconds(face, timestamp),
            *self.draw_fixed_indicator(face),
            *self.draw_center_time(face, timestamp),
        )

    def draw_rotating_seconds(
        self, face: FaceGeometry, timestamp: datetime
    ) -> list[DrawCommand]:
        style = self._style
        rotation = base_rotation_degrees(timestamp)
        commands: list[DrawCommand] = []

        for slot in range(TICK_SLOTS):
            angle = slot_angle(rotation, slot)
            emphasized = is_emphasized(slot)

            commands.append(
                LineCommand(
                    start=polar(face.center, face.radius - style.tick_inner_inset, angle),
                    end=polar(face.center, face.radius - style.tick_outer_inset, angle),
                    color=style.tick_color,
                    width=style.emphasized_tick_width if emphasized else style.tick_width,
                )
            )

            if emphasized:
                commands.append(
                    self._centered_text(
                        numeral_for_slot(slot),
                        polar(face.center, face.radius - style.numeral_inset, angle),
                        style.numeral_font,
                        style.numeral_color,
                    )
                )

        return commands

    def draw_fixed_indicator(self, face: FaceGeometry) -> list[DrawCommand]:
        style = self._style
        vertices = indicator_vertices(face)
        return [
            PolygonCommand(
                points=vertices,
                color=style.indicator_glow_color,
                blur_radius=style.indicator_glow_blur,
            ),
            PolygonCommand(points=vertices, color=style.indicator_color),
        ]

    def draw_center_time(
        self, face: FaceGeometry, timestamp: datetime
    ) -> list[DrawCommand]:
        style = self._style
        font = style.readout_font
        runs = readout_runs(timestamp)
        sizes = [self._measurer.measure(run, font) for run in runs]

        total_width = sum(width for width, _ in sizes)
        cx, cy = face.center
        cursor_x = cx - total_width / 2
        top = cy - sizes[0][1] / 2

        commands: list[DrawCommand] = []
        for run, size in zip(runs, sizes):
            commands.append(
                TextCommand(
                    text=run,
                    position=(cursor_x, top),
                    font=font,
                    color=style.readout_color,
                    size=size,
                )
            )
            cursor_x += size[0]
        return commands

    def _centered_text(
        self, text: str, anchor: Point, font: FontSpec, color: Color
    ) -> TextCommand:
        width, height = self._measurer.measure(text, font)
        ax, ay = anchor
        return TextCommand(
            text=text,
            position=(ax - width / 2, ay - height / 2),
            font=font,
            color=color,
            size=(width, height),
        )


def face_backdrop(center: Point, radius: float, style: ClockStyle) -> tuple[DrawCommand, ...]:
    """Static disc the face sits on, with a soft glow around its rim."""
    return (
        CircleCommand(
            center=center,
            radius=radius + style.face_glow_spread,
            color=style.face_glow_color,
            blur_radius=style.face_glow_blur,
        ),
        CircleCommand(center=center, radius=radius, color=style.face_color),
    )
