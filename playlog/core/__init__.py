from .timestamp import local_timestamp, utc_timestamp, TIMESTAMP_FORMAT
from .writer import RecordWriter, WriteResult
from .registry import DestinationRegistry
from .logger import LevelGatedLogger, format_message
from .playback_state import PlaybackStateRecorder, last_played_line
from .facility import LoggingFacility
from .config_manager import Config, ConfigurationError

__all__ = [
    "local_timestamp",
    "utc_timestamp",
    "TIMESTAMP_FORMAT",
    "RecordWriter",
    "WriteResult",
    "DestinationRegistry",
    "LevelGatedLogger",
    "format_message",
    "PlaybackStateRecorder",
    "last_played_line",
    "LoggingFacility",
    "Config",
    "ConfigurationError"
]
