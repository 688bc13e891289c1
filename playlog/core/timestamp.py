# File: playlog/core/timestamp.py

from datetime import datetime
from typing import Optional

import pytz

from playlog.models.common import Instant, to_epoch_seconds

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def local_timestamp(tz: Optional[pytz.BaseTzInfo] = None) -> str:
    """Current wall-clock time, in local time unless ``tz`` is given."""
    now = datetime.now(tz) if tz is not None else datetime.now()
    return now.strftime(TIMESTAMP_FORMAT)


def utc_timestamp(instant: Instant) -> str:
    """Render ``instant`` in UTC with the same pattern as log records."""
    return datetime.fromtimestamp(to_epoch_seconds(instant), pytz.utc).strftime(TIMESTAMP_FORMAT)


def resolve_timezone(name: Optional[str]) -> Optional[pytz.BaseTzInfo]:
    """
    Look up a timezone by name.

    Raises:
        pytz.UnknownTimeZoneError: if the name is not in the tz database
    """
    if not name:
        return None
    return pytz.timezone(name)
