"""Configuration utilities for acp-replay."""

from .settings_manager import (
    get_setting,
    set_settings,
    load_config_data,
    validate_log_level,
    get_log_level_setting,
    get_format_setting,
    get_sessions_dir_setting,
    DEFAULT_LOG_LEVEL,
    VALID_LOG_LEVELS,
    DEFAULT_FORMAT,
    VALID_FORMATS,
    SESSIONS_DIR_ENV_VAR,
)

__all__ = [
    "get_setting",
    "set_settings",
    "load_config_data",
    "validate_log_level",
    "get_log_level_setting",
    "get_format_setting",
    "get_sessions_dir_setting",
    "DEFAULT_LOG_LEVEL",
    "VALID_LOG_LEVELS",
    "DEFAULT_FORMAT",
    "VALID_FORMATS",
    "SESSIONS_DIR_ENV_VAR",
]
