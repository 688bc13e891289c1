# File: tests/unit/test_playback_state.py
"""
Unit tests for the last-played and playback duration state files.
"""

import re
from datetime import datetime

import pytz

from playlog.core.logger import LevelGatedLogger
from playlog.core.playback_state import PlaybackStateRecorder, last_played_line
from playlog.core.registry import DestinationRegistry

from conftest import FIXED_TIMESTAMP, read_lines


def make_recorder(registry, writer):
    return PlaybackStateRecorder(registry, LevelGatedLogger(registry, writer=writer))


class TestLastPlayed:
    """Tests for record_last_played."""

    def test_line_format(self):
        moment = pytz.utc.localize(datetime(2024, 7, 14, 21, 30, 5))

        assert last_played_line(moment) == "UPNP_LAST_PLAYED='2024-07-14 21:30:05'\n"

    def test_single_line_in_utc(self, registry, fixed_writer, last_played_file):
        make_recorder(registry, fixed_writer).record_last_played(1700000000)

        assert read_lines(last_played_file) == ["UPNP_LAST_PLAYED='2023-11-14 22:13:20'\n"]

    def test_second_call_overwrites(self, registry, fixed_writer, last_played_file):
        recorder = make_recorder(registry, fixed_writer)
        recorder.record_last_played(1700000000)
        recorder.record_last_played(0)

        expected = "UPNP_LAST_PLAYED='1970-01-01 00:00:00'\n"
        assert last_played_file.read_text() == expected
        assert last_played_file.stat().st_size == len(expected)

    def test_matches_pattern(self, registry, fixed_writer, last_played_file):
        make_recorder(registry, fixed_writer).record_last_played(datetime.now())

        assert re.fullmatch(
            r"UPNP_LAST_PLAYED='\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}'\n",
            last_played_file.read_text(),
        )

    def test_absent_file_is_noop(self, empty_registry, fixed_writer, capfd):
        make_recorder(empty_registry, fixed_writer).record_last_played(0)

        assert capfd.readouterr().err == ""

    def test_does_not_touch_log(self, registry, fixed_writer, log_file):
        make_recorder(registry, fixed_writer).record_last_played(0)

        assert log_file.read_text() == ""


class TestPlaybackDuration:
    """Tests for record_playback_duration."""

    def test_total_and_summary(self, registry, fixed_writer, playback_time_file, log_file):
        t0 = 1700000000
        make_recorder(registry, fixed_writer).record_playback_duration(t0, t0 + 3725)

        assert playback_time_file.read_text() == "UPNP_TOTAL=3725\n"
        assert read_lines(log_file) == [
            f"INFO  [{FIXED_TIMESTAMP} | transport] Total playing time 01:02:05\n"
        ]

    def test_overwrites_previous_total(self, registry, fixed_writer, playback_time_file):
        recorder = make_recorder(registry, fixed_writer)
        recorder.record_playback_duration(0, 99999)
        recorder.record_playback_duration(0, 7)

        assert playback_time_file.read_text() == "UPNP_TOTAL=7\n"

    def test_reversed_span_records_zero(self, registry, fixed_writer, playback_time_file, log_file):
        make_recorder(registry, fixed_writer).record_playback_duration(200, 150)

        assert playback_time_file.read_text() == "UPNP_TOTAL=0\n"
        lines = read_lines(log_file)
        assert lines[0].startswith(f"ERROR [{FIXED_TIMESTAMP} | transport] Playback end precedes start by 50 seconds")
        assert lines[1].endswith("Total playing time 00:00:00\n")

    def test_summary_without_duration_file(self, log_file, fixed_writer):
        """The summary is logged even when no duration file is configured."""
        reg = DestinationRegistry.initialize(log_file)
        try:
            make_recorder(reg, fixed_writer).record_playback_duration(0, 61)
        finally:
            reg.close()

        assert read_lines(log_file) == [
            f"INFO  [{FIXED_TIMESTAMP} | transport] Total playing time 00:01:01\n"
        ]

    def test_summary_falls_back_to_stderr(self, playback_time_file, fixed_writer, capfd):
        reg = DestinationRegistry.initialize(None, None, playback_time_file)
        try:
            make_recorder(reg, fixed_writer).record_playback_duration(0, 3725)
        finally:
            reg.close()

        assert playback_time_file.read_text() == "UPNP_TOTAL=3725\n"
        assert "Total playing time 01:02:05" in capfd.readouterr().err

    def test_datetime_instants(self, registry, fixed_writer, playback_time_file):
        start = datetime(2024, 2, 29, 23, 59, 0)
        end = datetime(2024, 3, 1, 0, 1, 30)

        make_recorder(registry, fixed_writer).record_playback_duration(start, end)

        assert playback_time_file.read_text() == "UPNP_TOTAL=150\n"
