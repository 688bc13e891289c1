# File: playlog/core/registry.py
"""
Destination registry: the output handles and markup chosen at startup.

A registry is built once and read-only afterwards, so it can be shared by
every thread that logs.
"""

import os
from pathlib import Path
from typing import Optional, Union

import pytz

from playlog.core.timestamp import resolve_timezone
from playlog.models.destination import Destination
from playlog.models.enums import DestinationKind
from playlog.models.markup import MarkupScheme
from playlog.utils.logger import setup_logger

logger = setup_logger(__name__)

PathLike = Union[str, Path]


class DestinationRegistry:
    """Primary log, last-played and playback-time destinations."""

    def __init__(
        self,
        log: Optional[Destination] = None,
        last_played: Optional[Destination] = None,
        playback_time: Optional[Destination] = None,
        debug_level: int = 0,
        tz: Optional[pytz.BaseTzInfo] = None,
    ):
        self._log = log or Destination.absent(DestinationKind.LOG)
        self._last_played = last_played or Destination.absent(DestinationKind.LAST_PLAYED)
        self._playback_time = playback_time or Destination.absent(DestinationKind.PLAYBACK_TIME)
        self._stderr = Destination.stderr()
        self._debug_level = debug_level
        self._tz = tz

        # Color follows the primary log only.
        self._color_enabled = self._log.is_live and self._log.is_terminal
        self._markup = MarkupScheme.select(self._color_enabled)

    @classmethod
    def uninitialized(cls) -> 'DestinationRegistry':
        """State before initialization: everything absent, no color."""
        return cls()

    @classmethod
    def initialize(
        cls,
        log_path: Optional[PathLike] = None,
        last_played_path: Optional[PathLike] = None,
        playback_time_path: Optional[PathLike] = None,
        *,
        debug_level: int = 0,
        timezone: Optional[str] = None,
    ) -> 'DestinationRegistry':
        """
        Open the configured destinations.

        A path that cannot be opened is reported on standard error and its
        destination stays absent; the remaining paths are still opened.

        Args:
            log_path: Primary log file (or terminal device)
            last_played_path: File receiving UPNP_LAST_PLAYED
            playback_time_path: File receiving UPNP_TOTAL
            debug_level: Threshold for leveled logging
            timezone: Timezone name for log timestamps (default: local time)

        Returns:
            Initialized registry
        """
        tz = cls._timezone(timezone)
        return cls(
            log=cls._open(DestinationKind.LOG, log_path),
            last_played=cls._open(DestinationKind.LAST_PLAYED, last_played_path),
            playback_time=cls._open(DestinationKind.PLAYBACK_TIME, playback_time_path),
            debug_level=debug_level,
            tz=tz,
        )

    @staticmethod
    def _timezone(name: Optional[str]) -> Optional[pytz.BaseTzInfo]:
        """Look up ``name``; an unknown zone is reported and local time used."""
        try:
            return resolve_timezone(name)
        except pytz.UnknownTimeZoneError:
            logger.error(f"Unknown timezone {name!r}, using local time")
            return None

    @staticmethod
    def _open(kind: DestinationKind, path: Optional[PathLike]) -> Destination:
        if path is None:
            return Destination.absent(kind)
        try:
            return Destination.open(kind, path)
        except OSError as e:
            logger.error(f"Cannot open {kind.description}: {e.strerror or e} ({path})")
            return Destination.absent(kind)

    # -------------------- Queries --------------------

    @property
    def log(self) -> Destination:
        return self._log

    @property
    def last_played(self) -> Destination:
        return self._last_played

    @property
    def playback_time(self) -> Destination:
        return self._playback_time

    @property
    def stderr(self) -> Destination:
        return self._stderr

    @property
    def markup(self) -> MarkupScheme:
        return self._markup

    @property
    def debug_level(self) -> int:
        return self._debug_level

    @property
    def tz(self) -> Optional[pytz.BaseTzInfo]:
        return self._tz

    @property
    def color_enabled(self) -> bool:
        return self._color_enabled

    @property
    def info_enabled(self) -> bool:
        return self._log.is_live

    @property
    def error_enabled(self) -> bool:
        return True

    def log_or_stderr(self) -> Destination:
        """Primary log if present, otherwise standard error."""
        return self._log if self._log.is_live else self._stderr

    def close(self) -> None:
        """Release the descriptors this registry opened."""
        for destination in (self._log, self._last_played, self._playback_time):
            if destination.is_live:
                try:
                    os.close(destination.fd)
                except OSError as e:
                    logger.warning(f"Closing {destination.kind.description} failed: {e}")

    def __repr__(self) -> str:
        return (
            f"DestinationRegistry(log={self._log.path}, last_played={self._last_played.path}, "
            f"playback_time={self._playback_time.path}, color={self._color_enabled}, "
            f"debug_level={self._debug_level})"
        )
