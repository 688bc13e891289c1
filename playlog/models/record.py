# File: playlog/models/record.py

from dataclasses import dataclass
from typing import List

from .markup import MarkupPair

ENCODING = "utf-8"


@dataclass
class LogRecord:
    """One formatted log line; lives only for the duration of an emit call."""
    category: str
    message: str
    timestamp: str
    markup: MarkupPair

    @property
    def header(self) -> str:
        """Markup, timestamp and category, followed by a single space."""
        return f"{self.markup.prefix}[{self.timestamp} | {self.category}]{self.markup.suffix} "

    @property
    def needs_newline(self) -> bool:
        return not self.message.endswith("\n")

    def segments(self) -> List[bytes]:
        """Byte segments of the record, in write order."""
        parts = [
            self.header.encode(ENCODING, errors="replace"),
            self.message.encode(ENCODING, errors="replace"),
        ]
        if self.needs_newline:
            parts.append(b"\n")
        return parts