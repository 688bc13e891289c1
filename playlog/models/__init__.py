from .enums import DestinationKind
from .common import Instant, to_epoch_seconds
from .markup import (
    MarkupPair, MarkupScheme,
    INFO_PLAIN, ERROR_PLAIN, INFO_COLOR, ERROR_COLOR,
    PLAIN_SCHEME, COLOR_SCHEME,
)
from .destination import Destination, STDERR_FILENO
from .record import LogRecord
from .playback import PlaybackSpan
from .config import LogSettings

__all__ = [
    "DestinationKind",
    "Instant",
    "to_epoch_seconds",
    "MarkupPair",
    "MarkupScheme",
    "INFO_PLAIN",
    "ERROR_PLAIN",
    "INFO_COLOR",
    "ERROR_COLOR",
    "PLAIN_SCHEME",
    "COLOR_SCHEME",
    "Destination",
    "STDERR_FILENO",
    "LogRecord",
    "PlaybackSpan",
    "LogSettings"
]
