from tickring.utilities.env.enums import WindowMode
from tickring.utilities.env.parsing import _env_enum, _env_int

DEFAULT_WINDOW_PADDING = 50


class DisplayConfiguration:
    @classmethod
    def window_padding(cls) -> int:
        return _env_int(
            "TICKRING_WINDOW_PADDING",
            default=DEFAULT_WINDOW_PADDING,
            minimum=0,
        )

    @classmethod
    def window_mode(cls) -> WindowMode:
        return _env_enum(
            "TICKRING_WINDOW_MODE",
            WindowMode,
            default=WindowMode.WINDOWED,
        )
