"""Smoke tests for platypor/config.py."""

import os

from platypor.config import (
    DEFAULT_BALANCE_PATH,
    DEFAULT_CATALOG_PATH,
    DEFAULT_DEATH_EXIT_CODE,
    DEFAULT_DIALOGUE_INTERVAL,
    DEFAULT_DIALOGUES_PATH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_TICK_DELTA,
    DEFAULT_TICK_INTERVAL_MS,
)
from platypor.models.balance import GameBalance


class TestConfigSmoke:
    """Smoke tests to validate the configuration defaults are usable."""

    def test_config_imports_successfully(self):
        """Test that all config constants can be imported without errors."""
        assert DEFAULT_LOG_LEVEL is not None
        assert DEFAULT_TICK_INTERVAL_MS > 0
        assert DEFAULT_MAX_TICK_DELTA > 0
        assert DEFAULT_DIALOGUE_INTERVAL > 0

    def test_death_exit_code(self):
        """The death status is the heart-attack code unless overridden."""
        if "PLATYPOR_DEATH_EXIT_CODE" not in os.environ:
            assert DEFAULT_DEATH_EXIT_CODE == 666

    def test_bundled_content_paths_exist(self):
        """Default content files ship with the package."""
        if "PLATYPOR_CATALOG_PATH" not in os.environ:
            assert os.path.isfile(DEFAULT_CATALOG_PATH)
        if "PLATYPOR_DIALOGUES_PATH" not in os.environ:
            assert os.path.isfile(DEFAULT_DIALOGUES_PATH)

    def test_balance_picks_up_tick_defaults(self):
        """GameBalance takes its tick clamp and dialogue interval from config."""
        balance = GameBalance()
        assert balance.max_tick_delta == DEFAULT_MAX_TICK_DELTA
        assert balance.dialogue_interval == DEFAULT_DIALOGUE_INTERVAL
        if DEFAULT_BALANCE_PATH is None:
            assert balance.read_level_requirement == 7
