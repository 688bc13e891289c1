# File: playlog/models/markup.py
"""
Markup strings that highlight the category tag of a log record.
"""

from dataclasses import dataclass

BOLD = "\033[1m"
RED = "\033[31m"
RESET = "\033[0m"


@dataclass(frozen=True)
class MarkupPair:
    """Prefix/suffix wrapped around the ``[timestamp | category]`` tag."""
    prefix: str
    suffix: str = ""


INFO_PLAIN = MarkupPair("INFO  ")
ERROR_PLAIN = MarkupPair("ERROR ")
INFO_COLOR = MarkupPair(BOLD + "INFO  ", RESET)
ERROR_COLOR = MarkupPair(BOLD + RED + "ERROR ", RESET)


@dataclass(frozen=True)
class MarkupScheme:
    """The info and error pairs active for one registry."""
    info: MarkupPair
    error: MarkupPair

    @classmethod
    def select(cls, color_enabled: bool) -> "MarkupScheme":
        """Pick the colorized or the plain variant."""
        if color_enabled:
            return COLOR_SCHEME
        return PLAIN_SCHEME


PLAIN_SCHEME = MarkupScheme(info=INFO_PLAIN, error=ERROR_PLAIN)
COLOR_SCHEME = MarkupScheme(info=INFO_COLOR, error=ERROR_COLOR)
