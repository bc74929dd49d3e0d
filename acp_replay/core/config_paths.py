"""Centralized configuration path management for acp-replay.

All configuration and session data lives under ~/.config/acp-replay/,
following the XDG Base Directory layout.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ConfigPaths:
    """Single source of truth for acp-replay file locations."""

    BASE_DIR = Path.home() / ".config" / "acp-replay"

    @classmethod
    def get_base_dir(cls) -> Path:
        """Get base configuration directory, creating if needed.

        Returns:
            Path to ~/.config/acp-replay/
        """
        cls.BASE_DIR.mkdir(parents=True, exist_ok=True)
        return cls.BASE_DIR

    @classmethod
    def get_config_file(cls) -> Path:
        """Get path to main configuration file.

        Returns:
            Path to config.json
        """
        cls.get_base_dir()  # Ensure directory exists
        return cls.BASE_DIR / "config.json"

    @classmethod
    def get_sessions_dir(cls) -> Path:
        """Get path to the default transcript directory.

        Returns:
            Path to sessions/
        """
        sessions_dir = cls.BASE_DIR / "sessions"
        sessions_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Using default sessions directory {sessions_dir}")
        return sessions_dir
