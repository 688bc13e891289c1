"""
playlog: logging and playback-state files for a UPnP media renderer.
"""

from .api import (
    initialize,
    initialize_from_env,
    shutdown,
    get_facility,
    is_color_enabled,
    is_info_enabled,
    is_error_enabled,
    log_info,
    log_error,
    log_at_level,
    record_last_played,
    record_playback_duration,
)
from .core import DestinationRegistry, LevelGatedLogger, LoggingFacility, PlaybackStateRecorder
from .utils.logger import FacilityHandler

__version__ = "1.0.0"

__all__ = [
    "initialize",
    "initialize_from_env",
    "shutdown",
    "get_facility",
    "is_color_enabled",
    "is_info_enabled",
    "is_error_enabled",
    "log_info",
    "log_error",
    "log_at_level",
    "record_last_played",
    "record_playback_duration",
    "DestinationRegistry",
    "LevelGatedLogger",
    "LoggingFacility",
    "PlaybackStateRecorder",
    "FacilityHandler"
]
