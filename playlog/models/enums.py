# File: playlog/models/enums.py

from enum import Enum


class DestinationKind(Enum):
    """Output targets known to the logging facility."""
    LOG = "log"                      # primary log file (or terminal)
    LAST_PLAYED = "last_played"      # UPNP_LAST_PLAYED state file
    PLAYBACK_TIME = "playback_time"  # UPNP_TOTAL state file
    STDERR = "stderr"                # fallback stream, never opened by us

    @property
    def description(self) -> str:
        """Human readable name used in error reports."""
        return {
            DestinationKind.LOG: "logfile",
            DestinationKind.LAST_PLAYED: "last played file",
            DestinationKind.PLAYBACK_TIME: "playback time file",
            DestinationKind.STDERR: "standard error",
        }[self]
