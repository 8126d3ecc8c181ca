"""Tests for :mod:`tickring.utilities.env`."""

from __future__ import annotations

import pytest

from tickring.utilities.env import (Configuration, FrameExportStrategy,
                                    WindowMode)

_ENV_VARS = (
    "TICKRING_SURFACE_SIZE",
    "TICKRING_WINDOW_PADDING",
    "TICKRING_FRAME_INTERVAL_MS",
    "TICKRING_WINDOW_MODE",
    "TICKRING_FONT",
    "TICKRING_FRAME_EXPORT_STRATEGY",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


class TestConfigurationDefaults:
    def test_defaults(self) -> None:
        assert Configuration.surface_size() == 300
        assert Configuration.window_padding() == 50
        assert Configuration.frame_interval_ms() == 16
        assert Configuration.window_mode() == WindowMode.WINDOWED
        assert Configuration.font_name() == "Roboto"
        assert Configuration.frame_export_strategy() == FrameExportStrategy.BUFFER


class TestConfigurationParsing:
    """Validate environment parsing so bad settings fail loudly at startup."""

    def test_reads_integers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TICKRING_SURFACE_SIZE", "480")
        monkeypatch.setenv("TICKRING_FRAME_INTERVAL_MS", "33")

        assert Configuration.surface_size() == 480
        assert Configuration.frame_interval_ms() == 33

    def test_rejects_non_integer(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TICKRING_SURFACE_SIZE", "large")

        with pytest.raises(ValueError, match="TICKRING_SURFACE_SIZE must be an integer"):
            Configuration.surface_size()

    @pytest.mark.parametrize(
        ("name", "value", "minimum"),
        [
            ("TICKRING_SURFACE_SIZE", "99", 100),
            ("TICKRING_FRAME_INTERVAL_MS", "0", 1),
            ("TICKRING_WINDOW_PADDING", "-1", 0),
        ],
    )
    def test_enforces_minimums(
        self, monkeypatch: pytest.MonkeyPatch, name: str, value: str, minimum: int
    ) -> None:
        monkeypatch.setenv(name, value)
        getters = {
            "TICKRING_SURFACE_SIZE": Configuration.surface_size,
            "TICKRING_FRAME_INTERVAL_MS": Configuration.frame_interval_ms,
            "TICKRING_WINDOW_PADDING": Configuration.window_padding,
        }

        with pytest.raises(ValueError, match=f"{name} must be at least {minimum}"):
            getters[name]()

    def test_enum_values_are_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TICKRING_WINDOW_MODE", " FullScreen ")
        monkeypatch.setenv("TICKRING_FRAME_EXPORT_STRATEGY", "ARRAY")

        assert Configuration.window_mode() == WindowMode.FULLSCREEN
        assert Configuration.frame_export_strategy() == FrameExportStrategy.ARRAY

    def test_rejects_unknown_enum_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TICKRING_WINDOW_MODE", "borderless")

        with pytest.raises(ValueError, match="TICKRING_WINDOW_MODE must be one of"):
            Configuration.window_mode()

    def test_blank_font_falls_back_to_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TICKRING_FONT", "   ")

        assert Configuration.font_name() == "Roboto"

    def test_font_is_trimmed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TICKRING_FONT", " DejaVu Sans ")

        assert Configuration.font_name() == "DejaVu Sans"
