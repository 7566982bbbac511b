"""
Tests for AppConfig environment loading and setup_logging.
"""

import logging

import pytest

from nursery.config import AppConfig, load_config, setup_logging
from nursery.domain.exceptions import ConfigurationError


class TestAppConfig:
    def test_defaults(self, monkeypatch):
        for name in ("NURSERY_RESTOCK_BATCH_SIZE", "NURSERY_LOW_STOCK_THRESHOLD", "NURSERY_AUDIT_ENABLED"):
            monkeypatch.delenv(name, raising=False)
        config = AppConfig()
        assert config.restock_batch_size == 10
        assert config.low_stock_threshold == 2
        assert config.audit_enabled is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("NURSERY_RESTOCK_BATCH_SIZE", "4")
        monkeypatch.setenv("NURSERY_SECONDS_PER_SIM_DAY", "0.5")
        monkeypatch.setenv("NURSERY_AUDIT_ENABLED", "off")
        config = load_config()
        assert config.restock_batch_size == 4
        assert config.seconds_per_sim_day == 0.5
        assert config.audit_enabled is False

    def test_non_numeric_value(self, monkeypatch):
        monkeypatch.setenv("NURSERY_MAX_ORDERS_PER_STAFF", "many")
        with pytest.raises(ValueError, match="NURSERY_MAX_ORDERS_PER_STAFF"):
            AppConfig()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"seconds_per_sim_day": 0},
            {"tick_interval_seconds": -1},
            {"restock_batch_size": 0},
            {"low_stock_threshold": -1},
            {"max_orders_per_staff": 0},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ConfigurationError):
            AppConfig(**overrides)


@pytest.fixture()
def root_logger(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_idempotent(self, root_logger):
        setup_logging(level="warning")
        setup_logging(debug=True)
        names = [getattr(h, "name", "") for h in root_logger.handlers]
        assert names.count("nursery_console") == 1
        assert names.count("nursery_file") == 1
        assert root_logger.level == logging.DEBUG
