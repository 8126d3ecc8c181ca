from enum import StrEnum


class FrameExportStrategy(StrEnum):
    BUFFER = "buffer"
    ARRAY = "array"


class WindowMode(StrEnum):
    WINDOWED = "windowed"
    FULLSCREEN = "fullscreen"
    HIDDEN = "hidden"
