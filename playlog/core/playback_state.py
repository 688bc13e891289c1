# File: playlog/core/playback_state.py
"""
Single-line state files polled by external tools.

Both files are truncated before every write, so they always hold exactly
one shell-assignment line.
"""

from playlog.core.logger import LevelGatedLogger
from playlog.core.registry import DestinationRegistry
from playlog.core.timestamp import utc_timestamp
from playlog.models.common import Instant
from playlog.models.playback import PlaybackSpan

TRANSPORT_CATEGORY = "transport"


def last_played_line(play_start: Instant) -> str:
    """UPNP_LAST_PLAYED line for ``play_start``, in UTC."""
    return f"UPNP_LAST_PLAYED='{utc_timestamp(play_start)}'\n"


class PlaybackStateRecorder:
    """Writes the last-played and total-duration state files."""

    def __init__(self, registry: DestinationRegistry, logger: LevelGatedLogger):
        self.registry = registry
        self.logger = logger

    def record_last_played(self, play_start: Instant) -> None:
        """Overwrite the last-played file with the start instant."""
        _ = self.logger.writer.write_state_line(self.registry.last_played, last_played_line(play_start))

    def record_playback_duration(self, play_start: Instant, play_end: Instant) -> None:
        """
        Overwrite the playback time file with the elapsed whole seconds and
        log the total as HH:MM:SS.

        A span whose end precedes its start is recorded as zero seconds.
        """
        span = PlaybackSpan(play_start, play_end)
        if span.is_reversed:
            self.logger.error(
                TRANSPORT_CATEGORY,
                "Playback end precedes start by %d seconds; recording 0",
                -span.raw_seconds,
            )

        _ = self.logger.writer.write_state_line(self.registry.playback_time, span.to_state_line())

        hours, minutes, seconds = span.hours_minutes_seconds
        self.logger.log_at_level(
            0, TRANSPORT_CATEGORY, "Total playing time %02d:%02d:%02d\n", hours, minutes, seconds
        )
