# File: playlog/models/destination.py

import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .enums import DestinationKind

OPEN_FLAGS = os.O_CREAT | os.O_APPEND | os.O_WRONLY
OPEN_MODE = 0o644
STDERR_FILENO = 2


@dataclass(frozen=True)
class Destination:
    """A single output target, fixed for the lifetime of the process."""
    kind: DestinationKind
    fd: Optional[int] = None
    path: Optional[Path] = None
    is_terminal: bool = False
    # Only taken by writers that cannot issue a gathered write.
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def is_live(self) -> bool:
        """True if records sent here reach a descriptor."""
        return self.fd is not None

    @classmethod
    def absent(cls, kind: DestinationKind) -> "Destination":
        return cls(kind=kind)

    @classmethod
    def open(cls, kind: DestinationKind, path: Union[str, Path]) -> "Destination":
        """
        Open ``path`` for appending, creating it if missing.

        Raises:
            OSError: if the file cannot be opened
        """
        path = Path(path)
        fd = os.open(path, OPEN_FLAGS, OPEN_MODE)
        return cls(kind=kind, fd=fd, path=path, is_terminal=os.isatty(fd))

    @classmethod
    def stderr(cls) -> "Destination":
        """The process's standard error stream."""
        return cls(kind=DestinationKind.STDERR, fd=STDERR_FILENO)
