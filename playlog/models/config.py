# File: playlog/models/config.py
"""
Data models for playlog configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def _optional_path(value) -> Optional[Path]:
    if value is None or value == "":
        return None
    return Path(value)


@dataclass
class LogSettings:
    """Destinations and threshold used to initialize the facility."""
    log_file: Optional[Path] = None
    last_played_file: Optional[Path] = None
    playback_time_file: Optional[Path] = None
    debug_level: int = 0
    timezone: Optional[str] = None  # None = system local time

    def __post_init__(self):
        """Normalize path-like values."""
        self.log_file = _optional_path(self.log_file)
        self.last_played_file = _optional_path(self.last_played_file)
        self.playback_time_file = _optional_path(self.playback_time_file)

    def to_dict(self) -> dict:
        return {
            'log_file': str(self.log_file) if self.log_file else None,
            'last_played_file': str(self.last_played_file) if self.last_played_file else None,
            'playback_time_file': str(self.playback_time_file) if self.playback_time_file else None,
            'debug_level': self.debug_level,
            'timezone': self.timezone,
        }
