from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True, frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: int = 255

    @staticmethod
    def white() -> "Color":
        return Color(r=255, g=255, b=255)

    @staticmethod
    def black() -> "Color":
        return Color(r=0, g=0, b=0)

    def __post_init__(self) -> None:
        for channel in self.rgba():
            assert 0 <= channel <= 255, (
                f"Expected all color channels to be between 0 and 255. Found {self.rgba()}"
            )

    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def __iter__(self) -> Iterator[int]:
        return iter(self.rgba())

    @property
    def is_opaque(self) -> bool:
        return self.a == 255

    def with_opacity(self, fraction: float) -> "Color":
        """Return this color with its alpha set to ``fraction`` of fully opaque."""
        return Color(
            r=self.r,
            g=self.g,
            b=self.b,
            a=self.__clamp_channel(255 * fraction),
        )

    @staticmethod
    def __clamp_channel(value: float) -> int:
        return min(255, max(0, int(round(value))))
