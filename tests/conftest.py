"""Shared fixtures."""

import pytest

from acp_replay.config.settings_manager import SESSIONS_DIR_ENV_VAR
from acp_replay.core.config_paths import ConfigPaths


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.config/acp-replay."""
    base_dir = tmp_path / "config"
    monkeypatch.setattr(ConfigPaths, "BASE_DIR", base_dir)
    monkeypatch.delenv(SESSIONS_DIR_ENV_VAR, raising=False)
    # Keep load_dotenv from picking up a developer's .env
    monkeypatch.chdir(tmp_path)
    return base_dir
