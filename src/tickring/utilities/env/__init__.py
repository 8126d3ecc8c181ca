"""Environment configuration helpers."""

from tickring.utilities.env.config import Configuration as Configuration
from tickring.utilities.env.enums import \
    FrameExportStrategy as FrameExportStrategy
from tickring.utilities.env.enums import WindowMode as WindowMode
