"""Configuration management for plotweave."""

from __future__ import annotations

import os

_FALSE_VALUES = {"0", "false", "no", "off"}


class Config:
    """Configuration class for plotweave."""

    def __init__(self):
        self.log_level = self._get_log_level()
        self.notices_enabled = self._get_notices_enabled()

    def _get_log_level(self) -> str:
        """Get the log level from environment or use default."""
        value = os.getenv("PLOTWEAVE_LOG_LEVEL", "WARNING").strip().upper()
        return value or "WARNING"

    def _get_notices_enabled(self) -> bool:
        """Whether console notices (e.g. coordinate replacement) are shown."""
        value = os.getenv("PLOTWEAVE_NOTICES")
        if value is None:
            return True
        return value.strip().lower() not in _FALSE_VALUES


_config: Config | None = None


def get_config() -> Config:
    """Return the process configuration, reading the environment once."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the environment is read again."""
    global _config
    _config = None
