from tickring.utilities.env.enums import FrameExportStrategy
from tickring.utilities.env.parsing import _env_enum, _env_int, _env_str

DEFAULT_SURFACE_SIZE = 300
MIN_SURFACE_SIZE = 100
DEFAULT_FRAME_INTERVAL_MS = 16
DEFAULT_FONT_NAME = "Roboto"


class RenderingConfiguration:
    @classmethod
    def surface_size(cls) -> int:
        return _env_int(
            "TICKRING_SURFACE_SIZE",
            default=DEFAULT_SURFACE_SIZE,
            minimum=MIN_SURFACE_SIZE,
        )

    @classmethod
    def frame_interval_ms(cls) -> int:
        return _env_int(
            "TICKRING_FRAME_INTERVAL_MS",
            default=DEFAULT_FRAME_INTERVAL_MS,
            minimum=1,
        )

    @classmethod
    def font_name(cls) -> str:
        return _env_str("TICKRING_FONT", default=DEFAULT_FONT_NAME)

    @classmethod
    def frame_export_strategy(cls) -> FrameExportStrategy:
        return _env_enum(
            "TICKRING_FRAME_EXPORT_STRATEGY",
            FrameExportStrategy,
            default=FrameExportStrategy.BUFFER,
        )
