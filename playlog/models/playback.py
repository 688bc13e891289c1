# File: playlog/models/playback.py
"""
Playback timing values written to the state files.
"""

from dataclasses import dataclass

from .common import Instant, to_epoch_seconds


@dataclass(frozen=True)
class PlaybackSpan:
    """A single play-start/play-end pair supplied by the transport."""
    start: Instant
    end: Instant

    @property
    def raw_seconds(self) -> int:
        """Elapsed whole seconds, truncated; negative if end precedes start."""
        return int(to_epoch_seconds(self.end) - to_epoch_seconds(self.start))

    @property
    def is_reversed(self) -> bool:
        return self.raw_seconds < 0

    @property
    def elapsed_seconds(self) -> int:
        """Elapsed whole seconds, clamped to zero."""
        return max(0, self.raw_seconds)

    @property
    def hours_minutes_seconds(self) -> tuple[int, int, int]:
        total = self.elapsed_seconds
        return total // 3600, (total // 60) % 60, total % 60

    def to_state_line(self) -> str:
        """Line stored in the playback time file."""
        return f"UPNP_TOTAL={self.elapsed_seconds}\n"
