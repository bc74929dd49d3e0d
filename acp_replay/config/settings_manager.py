"""Centralized settings management for acp-replay.

Settings Schema:
    {
        "sessions_dir": str,   # Directory holding <session_id>.jsonl transcripts
        "log_level": str,      # Logging level name (e.g., "WARNING", "DEBUG")
        "format": str,         # Default output format ("jsonrpc" or "pretty")
    }

The ACP_REPLAY_SESSIONS_DIR environment variable (also read from a .env
file) takes precedence over the saved "sessions_dir" setting.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict
import logging

from dotenv import find_dotenv, load_dotenv

from acp_replay.core.config_paths import ConfigPaths

LOGGER = logging.getLogger(__name__)

SESSIONS_DIR_ENV_VAR = "ACP_REPLAY_SESSIONS_DIR"

DEFAULT_LOG_LEVEL = "WARNING"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

DEFAULT_FORMAT = "jsonrpc"

VALID_FORMATS = ("jsonrpc", "pretty")


def load_config_data() -> Dict[str, Any]:
    """Loads configuration data from config.json."""
    config_file = ConfigPaths.get_config_file()
    if not config_file.exists():
        return {}
    try:
        content = config_file.read_text(encoding="utf-8")
        if not content.strip():
            return {}
        return json.loads(content)
    except (json.JSONDecodeError, IOError) as e:
        LOGGER.warning(
            f"Failed to load config file: {e}. Using empty configuration.",
            exc_info=True,
        )
        return {}


def _save_config_data(data: Dict[str, Any]) -> None:
    """Saves the configuration data to config.json."""
    config_file = ConfigPaths.get_config_file()
    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text(json.dumps(data, indent=4), encoding="utf-8")
    except IOError as e:
        LOGGER.error(f"Failed to save config file: {e}", exc_info=True)


def get_setting(key: str, default: Any = None) -> Any:
    """Retrieve a setting from the config file."""
    data = load_config_data()
    return data.get(key, default)


def set_settings(updates: Dict[str, Any]) -> None:
    """Load existing settings, apply updates, and save back."""
    data = load_config_data()
    data.update(updates)
    _save_config_data(data)


def validate_log_level(level: Any) -> bool:
    """Check if a value names a standard logging level."""
    return isinstance(level, str) and level.upper() in VALID_LOG_LEVELS


def get_log_level_setting() -> str:
    """Retrieve the saved log level, falling back to default.

    Returns:
        An upper-case level name. Invalid saved values yield DEFAULT_LOG_LEVEL.
    """
    level = get_setting("log_level", DEFAULT_LOG_LEVEL)
    return level.upper() if validate_log_level(level) else DEFAULT_LOG_LEVEL


def get_format_setting() -> str:
    """Retrieve the saved output format, falling back to default."""
    fmt = get_setting("format", DEFAULT_FORMAT)
    return fmt if fmt in VALID_FORMATS else DEFAULT_FORMAT


def get_sessions_dir_setting() -> Path:
    """Resolve the transcript directory.

    Precedence: environment (including .env), then config.json, then
    ConfigPaths default.
    """
    load_dotenv(find_dotenv(usecwd=True))
    env_value = os.environ.get(SESSIONS_DIR_ENV_VAR)
    if env_value:
        return Path(env_value).expanduser()

    saved = get_setting("sessions_dir")
    if saved:
        return Path(saved).expanduser()

    return ConfigPaths.get_sessions_dir()
