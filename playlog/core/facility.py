# File: playlog/core/facility.py

from typing import Optional

from playlog.core.logger import LevelGatedLogger
from playlog.core.playback_state import PlaybackStateRecorder
from playlog.core.registry import DestinationRegistry
from playlog.models.common import Instant
from playlog.models.config import LogSettings
from playlog.utils.logger import setup_logger

logger = setup_logger(__name__)


class LoggingFacility:
    """Registry, logger and state recorder sharing one configuration."""

    def __init__(self, registry: Optional[DestinationRegistry] = None):
        self.registry = registry or DestinationRegistry.uninitialized()
        self.logger = LevelGatedLogger(self.registry)
        self.playback = PlaybackStateRecorder(self.registry, self.logger)

    @classmethod
    def from_settings(cls, settings: LogSettings) -> 'LoggingFacility':
        """Open the destinations named in ``settings``."""
        registry = DestinationRegistry.initialize(
            settings.log_file,
            settings.last_played_file,
            settings.playback_time_file,
            debug_level=settings.debug_level,
            timezone=settings.timezone,
        )
        logger.debug(f"Initialized {registry!r}")
        return cls(registry)

    # -------------------- Queries --------------------

    def is_color_enabled(self) -> bool:
        return self.registry.color_enabled

    def is_info_enabled(self) -> bool:
        return self.registry.info_enabled

    def is_error_enabled(self) -> bool:
        return self.registry.error_enabled

    # -------------------- Emit --------------------

    def log_info(self, category: str, fmt: str, *args) -> None:
        self.logger.info(category, fmt, *args)

    def log_error(self, category: str, fmt: str, *args) -> None:
        self.logger.error(category, fmt, *args)

    def log_at_level(self, priority: int, category: str, fmt: str, *args) -> None:
        self.logger.log_at_level(priority, category, fmt, *args)

    # -------------------- Playback state --------------------

    def record_last_played(self, play_start: Instant) -> None:
        self.playback.record_last_played(play_start)

    def record_playback_duration(self, play_start: Instant, play_end: Instant) -> None:
        self.playback.record_playback_duration(play_start, play_end)

    def close(self) -> None:
        self.registry.close()
