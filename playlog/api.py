# File: playlog/api.py
"""
Module-level entry points backed by one process-wide facility.

Until ``initialize`` is called every destination is absent: info logging
is a no-op and errors go to standard error.
"""

import threading
from pathlib import Path
from typing import Optional

from playlog.core.config_manager import Config
from playlog.core.facility import LoggingFacility
from playlog.core.registry import PathLike
from playlog.models.common import Instant
from playlog.models.config import LogSettings

_facility: LoggingFacility = LoggingFacility()
_init_lock = threading.Lock()


def get_facility() -> LoggingFacility:
    """Get the process-wide facility."""
    return _facility


def initialize(
    log_path: Optional[PathLike] = None,
    last_played_path: Optional[PathLike] = None,
    playback_time_path: Optional[PathLike] = None,
    *,
    debug_level: int = 0,
    timezone: Optional[str] = None,
) -> LoggingFacility:
    """Open the destinations and make them the process-wide facility."""
    settings = LogSettings(
        log_file=log_path,
        last_played_file=last_played_path,
        playback_time_file=playback_time_path,
        debug_level=debug_level,
        timezone=timezone,
    )
    return _install(LoggingFacility.from_settings(settings))


def initialize_from_env(env_file: Optional[Path] = None) -> LoggingFacility:
    """Initialize from PLAYLOG_* environment variables (and .env)."""
    return _install(LoggingFacility.from_settings(Config.load_settings(env_file)))


def _install(facility: LoggingFacility) -> LoggingFacility:
    global _facility
    with _init_lock:
        _facility = facility
    return facility


def shutdown() -> None:
    """
    Close the destinations and return to the uninitialized state.

    Call only once no other thread is logging. A thread still holding the
    old facility may write to a descriptor number that a later open has
    reused, landing its record in the wrong file.
    """
    global _facility
    with _init_lock:
        old, _facility = _facility, LoggingFacility()
    old.close()


def is_color_enabled() -> bool:
    return _facility.is_color_enabled()


def is_info_enabled() -> bool:
    return _facility.is_info_enabled()


def is_error_enabled() -> bool:
    return _facility.is_error_enabled()


def log_info(category: str, fmt: str, *args) -> None:
    _facility.log_info(category, fmt, *args)


def log_error(category: str, fmt: str, *args) -> None:
    _facility.log_error(category, fmt, *args)


def log_at_level(priority: int, category: str, fmt: str, *args) -> None:
    _facility.log_at_level(priority, category, fmt, *args)


def record_last_played(play_start: Instant) -> None:
    _facility.record_last_played(play_start)


def record_playback_duration(play_start: Instant, play_end: Instant) -> None:
    _facility.record_playback_duration(play_start, play_end)
