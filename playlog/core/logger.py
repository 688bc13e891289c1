# File: playlog/core/logger.py
"""
Level-gated entry points: info, error and numeric-priority logging.
"""

from collections.abc import Mapping
from typing import Optional

from playlog.core.registry import DestinationRegistry
from playlog.core.writer import RecordWriter
from playlog.models.destination import Destination
from playlog.models.markup import MarkupPair


def format_message(fmt: str, args: tuple) -> str:
    """
    Substitute ``args`` into a printf-style format string.

    With no arguments the format is used verbatim, so a literal ``%`` is
    safe. A single non-empty mapping is used for ``%(name)s`` keys, as the
    logging module does. A failed substitution never raises; the raw format
    and arguments are kept.
    """
    if not args:
        return fmt
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]
    try:
        return fmt % args
    except Exception:
        return f"{fmt} {args!r}"


class LevelGatedLogger:
    """Decides whether and where a message is written."""

    def __init__(self, registry: DestinationRegistry, writer: Optional[RecordWriter] = None):
        self.registry = registry
        self.writer = writer or RecordWriter(tz=registry.tz)

    def info(self, category: str, fmt: str, *args) -> None:
        """Write to the primary log; a no-op when there is none."""
        if not self.registry.info_enabled:
            return
        self._emit(self.registry.log, self.registry.markup.info, category, fmt, args)

    def error(self, category: str, fmt: str, *args) -> None:
        """Write to the primary log, or to standard error without one."""
        self._emit(self.registry.log_or_stderr(), self.registry.markup.error, category, fmt, args)

    def log_at_level(self, priority: int, category: str, fmt: str, *args) -> None:
        """
        Write if ``priority`` does not exceed the debug level.

        Lower numbers are more important. Falls back to standard error like
        ``error`` but keeps the info markup.
        """
        if priority > self.registry.debug_level:
            return
        self._emit(self.registry.log_or_stderr(), self.registry.markup.info, category, fmt, args)

    def _emit(self, destination: Destination, markup: MarkupPair, category: str, fmt: str, args: tuple) -> None:
        _ = self.writer.write(destination, markup, category, format_message(fmt, args))
