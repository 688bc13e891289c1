# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides temporary destinations and initialized registries for all tests.
"""

import re
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from playlog.core.registry import DestinationRegistry
from playlog.core.writer import RecordWriter
from playlog.core.logger import LevelGatedLogger
from playlog.core.facility import LoggingFacility

FIXED_TIMESTAMP = "2024-03-09 14:05:07"
TIMESTAMP_PATTERN = r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}"
RECORD_RE = re.compile(
    r"^(?P<prefix>.*?)\[(?P<ts>" + TIMESTAMP_PATTERN + r") \| (?P<category>[^\]]+)\](?P<suffix>.*?) (?P<message>.*)$"
)


# ==================== Path Fixtures ====================

@pytest.fixture
def log_file(tmp_path):
    """Path of the primary log file."""
    return tmp_path / "renderer.log"


@pytest.fixture
def last_played_file(tmp_path):
    """Path of the last-played state file."""
    return tmp_path / "last_played"


@pytest.fixture
def playback_time_file(tmp_path):
    """Path of the playback time state file."""
    return tmp_path / "playback_time"


# ==================== Registry Fixtures ====================

@pytest.fixture
def registry(log_file, last_played_file, playback_time_file):
    """Registry with all three destinations open."""
    reg = DestinationRegistry.initialize(log_file, last_played_file, playback_time_file)
    yield reg
    reg.close()


@pytest.fixture
def empty_registry():
    """Registry before initialization."""
    return DestinationRegistry.uninitialized()


@pytest.fixture
def fixed_writer():
    """Record writer with a frozen clock."""
    return RecordWriter(clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture
def gated_logger(registry, fixed_writer):
    """Logger over the fully initialized registry."""
    return LevelGatedLogger(registry, writer=fixed_writer)


@pytest.fixture
def facility(registry):
    """Facility wrapping the fully initialized registry."""
    return LoggingFacility(registry)


def read_lines(path: Path):
    """Read a file as text lines, keeping line endings."""
    return path.read_text(encoding="utf-8").splitlines(keepends=True)
