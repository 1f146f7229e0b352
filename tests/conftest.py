"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config, state,
history and log files.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from tomato_cli.config import Config


# ---------------------------------------------------------------------------
# Logging isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Send the application log into tmp_path and reset the singleton."""
    import tomato_cli.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("tomato_cli").handlers.clear()
    with patch("tomato_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "log")):
        yield
    for handler in logging.getLogger("tomato_cli").handlers:
        handler.close()
    logging.getLogger("tomato_cli").handlers.clear()
    logger_mod._logger = None


# ---------------------------------------------------------------------------
# Config isolation helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def config(tmp_path) -> Config:
    """A Config whose files all live under tmp_path."""
    return Config(
        hooks_directory=tmp_path / "hooks",
        state_file_path=tmp_path / "state" / "current.toml",
        history_file_path=tmp_path / "data" / "history.toml",
    )


@pytest.fixture()
def tmp_dirs(tmp_path, monkeypatch):
    """Patch platformdirs so default config/state/data paths land in tmp_path.

    Also clears the lru_cache so each test gets a fresh ConfigService.
    """
    from tomato_cli.config import get_config_service, set_config_path

    monkeypatch.delenv("TOMATO_CONFIG", raising=False)
    set_config_path(None)
    with patch("tomato_cli.config.user_config_dir", return_value=str(tmp_path / "config")):
        with patch("tomato_cli.config.user_state_dir", return_value=str(tmp_path / "state")):
            with patch("tomato_cli.config.user_data_dir", return_value=str(tmp_path / "data")):
                yield tmp_path
    set_config_path(None)
    get_config_service.cache_clear()
