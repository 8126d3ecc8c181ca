import pygame
import pytest
from hypothesis import HealthCheck, settings

from tickring.display.geometry import FaceGeometry
from tickring.renderers.commands import FontSpec

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


class FixedWidthMeasurer:
    """Deterministic stand-in for font metrics.

    Digits advance ``advance`` pixels, colons half that, so readout runs have
    unequal widths the way real glyphs do.
    """

    def __init__(self, advance: int = 10) -> None:
        self.advance = advance
        self.calls: list[tuple[str, FontSpec]] = []

    def measure(self, text: str, font: FontSpec) -> tuple[int, int]:
        self.calls.append((text, font))
        width = sum(self.advance // 2 if char == ":" else self.advance for char in text)
        return (width, font.size + 4)


@pytest.fixture(autouse=True, scope="session")
def configure_sdl_video_driver() -> None:
    """Force pygame to use the dummy SDL driver so headless tests remain stable."""

    patcher = pytest.MonkeyPatch()
    patcher.setenv("SDL_VIDEODRIVER", "dummy")
    patcher.setenv("SDL_AUDIODRIVER", "dummy")
    try:
        yield
    finally:
        patcher.undo()


@pytest.fixture(autouse=True)
def isolated_log_dir(monkeypatch: pytest.MonkeyPatch, tmp_path_factory) -> None:
    monkeypatch.setenv("TICKRING_LOG_DIR", str(tmp_path_factory.mktemp("logs")))
    yield


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def measurer() -> FixedWidthMeasurer:
    return FixedWidthMeasurer()


@pytest.fixture
def face() -> FaceGeometry:
    return FaceGeometry(300)
