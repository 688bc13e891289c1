# File: playlog/core/config_manager.py
"""
Centralized configuration management for playlog.
Loads settings from environment variables and an optional .env file.
"""

import os
from pathlib import Path
from typing import List, Optional

import pytz
from dotenv import load_dotenv

from playlog.models.config import LogSettings
from playlog.utils.logger import setup_logger

logger = setup_logger(__name__)


class ConfigurationError(ValueError):
    """Raised when the environment holds an unusable setting."""


class Config:
    """Environment variable names and loading helpers."""

    ENV_FILE = Path.cwd() / ".env"

    LOG_FILE_VAR = "PLAYLOG_LOG_FILE"
    LAST_PLAYED_FILE_VAR = "PLAYLOG_LAST_PLAYED_FILE"
    PLAYBACK_TIME_FILE_VAR = "PLAYLOG_PLAYBACK_TIME_FILE"
    DEBUG_LEVEL_VAR = "PLAYLOG_DEBUG_LEVEL"
    TIMEZONE_VAR = "PLAYLOG_TIMEZONE"

    DEFAULT_DEBUG_LEVEL = 0

    @classmethod
    def load_settings(cls, env_file: Optional[Path] = None) -> LogSettings:
        """
        Build LogSettings from the environment.

        Values already set in the environment win over the .env file.

        Raises:
            ConfigurationError: if the debug level or timezone is invalid
        """
        load_dotenv(env_file or cls.ENV_FILE, override=False)

        errors = cls.validate()
        if errors:
            raise ConfigurationError("; ".join(errors))

        settings = LogSettings(
            log_file=os.getenv(cls.LOG_FILE_VAR),
            last_played_file=os.getenv(cls.LAST_PLAYED_FILE_VAR),
            playback_time_file=os.getenv(cls.PLAYBACK_TIME_FILE_VAR),
            debug_level=int(os.getenv(cls.DEBUG_LEVEL_VAR, cls.DEFAULT_DEBUG_LEVEL)),
            timezone=os.getenv(cls.TIMEZONE_VAR) or None,
        )
        logger.debug(f"Loaded settings: {settings.to_dict()}")
        return settings

    @classmethod
    def validate(cls) -> List[str]:
        """Return a list of problems with the current environment."""
        errors = []

        raw_level = os.getenv(cls.DEBUG_LEVEL_VAR)
        if raw_level is not None:
            try:
                int(raw_level)
            except ValueError:
                errors.append(f"{cls.DEBUG_LEVEL_VAR} must be an integer, got {raw_level!r}")

        tz_name = os.getenv(cls.TIMEZONE_VAR)
        if tz_name:
            try:
                pytz.timezone(tz_name)
            except pytz.UnknownTimeZoneError:
                errors.append(f"{cls.TIMEZONE_VAR} is not a known timezone: {tz_name!r}")

        for error in errors:
            logger.error(f"Configuration Error: {error}")
        return errors
