"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from file_manager.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings:
    """Application settings loaded from environment variables.

    None of these change the command contract; they only control diagnostic
    logging and the tokenizer mode.
    """

    def __init__(self, load_env_file: bool = True):
        if load_env_file:
            # Load environment variables from .env file
            _ = load_dotenv(find_dotenv(usecwd=True))
        self.log_level: int = self._parse_log_level(
            self._get_env("FILE_MANAGER_LOG_LEVEL", "WARNING")
        )
        self.log_file: Optional[str] = os.getenv("FILE_MANAGER_LOG_FILE") or None
        self.collapse_whitespace: bool = self._get_flag(
            "FILE_MANAGER_COLLAPSE_WHITESPACE"
        )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_flag(self, key: str) -> bool:
        value = self._get_env(key, "0").strip().lower()
        return value in ("1", "true", "yes", "on")

    def _parse_log_level(self, name: str) -> int:
        level = logging.getLevelName(name.strip().upper())
        if not isinstance(level, int):
            raise ConfigurationError(f"Invalid log level: {name}")
        return level


def configure_logging(settings: Settings) -> None:
    """
    Configure root logging from settings.

    Diagnostics go to the configured log file; without one a NullHandler is
    installed so standard output and standard error stay reserved for the shell.
    """
    handler: logging.Handler
    if settings.log_file:
        handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    else:
        handler = logging.NullHandler()
    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )
