# File: playlog/models/common.py

from datetime import datetime
from typing import Union

# A point in time: a datetime (naive values are local time) or POSIX seconds.
Instant = Union[datetime, int, float]


def to_epoch_seconds(instant: Instant) -> float:
    """Convert an instant to seconds since the epoch."""
    if isinstance(instant, datetime):
        return instant.timestamp()
    return float(instant)
