# File: playlog/core/writer.py
"""
Atomic record and state-line writes.

Every record goes out in a single system-level write so that records from
concurrent callers never interleave. Write failures are returned, never
raised.
"""

import os
from dataclasses import dataclass
from typing import Callable, List, Optional

import pytz

from playlog.core.timestamp import local_timestamp
from playlog.models.destination import Destination
from playlog.models.markup import MarkupPair
from playlog.models.record import LogRecord, ENCODING

HAS_WRITEV = hasattr(os, "writev")


@dataclass(frozen=True)
class WriteResult:
    """Outcome of one write. Callers drop it on purpose."""
    bytes_written: int = 0
    error: Optional[OSError] = None
    skipped: bool = False


SKIPPED = WriteResult(skipped=True)


class RecordWriter:
    """Formats log records and writes them to a destination."""

    def __init__(self, tz: Optional[pytz.BaseTzInfo] = None, clock: Optional[Callable[[], str]] = None):
        self.tz = tz
        self._clock = clock or (lambda: local_timestamp(self.tz))

    def make_record(self, markup: MarkupPair, category: str, message: str) -> LogRecord:
        return LogRecord(category=category, message=message, timestamp=self._clock(), markup=markup)

    def write(self, destination: Destination, markup: MarkupPair, category: str, message: str) -> WriteResult:
        """Write one ``[timestamp | category]`` record with a single trailing newline."""
        if not destination.is_live:
            return SKIPPED
        record = self.make_record(markup, category, message)
        return self._write_segments(destination, record.segments())

    def write_state_line(self, destination: Destination, line: str) -> WriteResult:
        """Replace the contents of a state file with ``line``."""
        if not destination.is_live:
            return SKIPPED
        try:
            os.ftruncate(destination.fd, 0)
        except OSError as e:
            return WriteResult(error=e)
        return self._write_segments(destination, [line.encode(ENCODING)])

    @staticmethod
    def _write_segments(destination: Destination, segments: List[bytes]) -> WriteResult:
        try:
            if HAS_WRITEV:
                written = os.writev(destination.fd, segments)
            else:
                with destination.lock:
                    written = os.write(destination.fd, b"".join(segments))
        except OSError as e:
            # Logging trouble; the caller decides to ignore it.
            return WriteResult(error=e)
        return WriteResult(bytes_written=written)
