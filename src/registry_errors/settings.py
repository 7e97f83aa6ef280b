"""
Settings and configuration for registry-errors tooling.

Centralizes configuration values and provides validation with fail-fast behavior.
Loads settings from environment variables when the CLI starts.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

__all__ = ["Settings", "create_settings_from_env"]

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """
    Configuration settings for the registry-errors CLI.

        log_level: Logging level name applied to the root logger
        json_indent: Indentation used when emitting error envelopes (0 = compact)
    """
    log_level: str = "WARNING"
    json_indent: int = 2

    def __post_init__(self):
        """Validate settings on construction."""
        if not self.log_level or self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}. Must be one of {', '.join(_LOG_LEVELS)}")

        if self.json_indent < 0:
            raise ValueError(f"json_indent must be non-negative, got {self.json_indent}")

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level.upper())


def create_settings_from_env() -> Settings:
    """
    Load settings from environment variables.

    Environment Variables:
        - REGISTRY_ERRORS_LOG_LEVEL (default: WARNING)
        - REGISTRY_ERRORS_JSON_INDENT (default: 2)

    Returns:
        Settings object with validated configuration

    Raises:
        ValueError: If configuration is invalid

    Note:
        Creates a fresh Settings instance every time (no caching).
    """
    log_level = os.getenv("REGISTRY_ERRORS_LOG_LEVEL", "WARNING")

    indent_value = os.getenv("REGISTRY_ERRORS_JSON_INDENT")
    try:
        json_indent = int(indent_value) if indent_value else 2
    except ValueError:
        raise ValueError(f"REGISTRY_ERRORS_JSON_INDENT must be an integer, got {indent_value!r}") from None

    return Settings(log_level=log_level, json_indent=json_indent)
