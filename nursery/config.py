"""
Configuration for the Nursery Simulation
========================================
Runtime settings for the greenhouse lifecycle, stock coordination and the
staff command log. Every value can be overridden through an environment
variable. Sets up the logging configuration as well.
"""

import os
from contextlib import suppress
from dataclasses import dataclass, field

from nursery.domain.exceptions import ConfigurationError


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer.") from None


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be a number.") from None


@dataclass
class AppConfig:
    """Runtime configuration loaded from environment variables."""

    environment: str = field(default_factory=lambda: os.getenv("NURSERY_ENV", "development"))

    # Simulation clock: real seconds that make up one simulated day.
    seconds_per_sim_day: float = field(default_factory=lambda: _env_float("NURSERY_SECONDS_PER_SIM_DAY", 10.0))
    tick_interval_seconds: float = field(default_factory=lambda: _env_float("NURSERY_TICK_INTERVAL_SECONDS", 10.0))

    # Stock coordination
    restock_batch_size: int = field(default_factory=lambda: _env_int("NURSERY_RESTOCK_BATCH_SIZE", 10))
    low_stock_threshold: int = field(default_factory=lambda: _env_int("NURSERY_LOW_STOCK_THRESHOLD", 2))
    max_orders_per_staff: int = field(default_factory=lambda: _env_int("NURSERY_MAX_ORDERS_PER_STAFF", 5))

    # Audit trail for staff commands
    audit_enabled: bool = field(default_factory=lambda: _env_bool("NURSERY_AUDIT_ENABLED", True))
    audit_log_path: str = field(default_factory=lambda: os.getenv("NURSERY_AUDIT_LOG_PATH", "logs/commands.log"))

    log_level: str = field(default_factory=lambda: os.getenv("NURSERY_LOG_LEVEL", "INFO"))
    DEBUG: bool = field(default_factory=lambda: _env_bool("NURSERY_DEBUG", False))

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.seconds_per_sim_day <= 0:
            raise ConfigurationError(
                "seconds_per_sim_day must be positive",
                detail={"seconds_per_sim_day": self.seconds_per_sim_day},
            )
        if self.tick_interval_seconds <= 0:
            raise ConfigurationError(
                "tick_interval_seconds must be positive",
                detail={"tick_interval_seconds": self.tick_interval_seconds},
            )
        if self.restock_batch_size < 1:
            raise ConfigurationError(
                "restock_batch_size must be at least 1",
                detail={"restock_batch_size": self.restock_batch_size},
            )
        if self.low_stock_threshold < 0:
            raise ConfigurationError(
                "low_stock_threshold cannot be negative",
                detail={"low_stock_threshold": self.low_stock_threshold},
            )
        if self.max_orders_per_staff < 1:
            raise ConfigurationError(
                "max_orders_per_staff must be at least 1",
                detail={"max_orders_per_staff": self.max_orders_per_staff},
            )


def setup_logging(debug: bool = False, level: str | None = None) -> None:
    """Setup logging configuration."""
    import logging
    import sys
    from logging.handlers import RotatingFileHandler

    if debug:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(log_level)

    # Avoid adding duplicates when setup_logging is called more than once
    has_console = any(getattr(h, "name", "") == "nursery_console" for h in root.handlers)
    has_file = any(getattr(h, "name", "") == "nursery_file" for h in root.handlers)
    added_handler = False

    stream = sys.stdout
    with suppress(AttributeError, ValueError):
        stream.reconfigure(encoding="utf-8", errors="replace")
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not has_console:
        console_handler = logging.StreamHandler(stream=stream)
        console_handler.name = "nursery_console"
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)
        added_handler = True

    if not has_file:
        os.makedirs("logs", exist_ok=True)
        file_handler = RotatingFileHandler(
            "logs/nursery.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.name = "nursery_file"
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        added_handler = True

    for handler in root.handlers:
        if getattr(handler, "name", "") in {"nursery_console", "nursery_file"}:
            handler.setLevel(log_level)

    if added_handler:
        root.info("Logging initialized at level: %s", logging.getLevelName(log_level))


def load_config() -> AppConfig:
    """Helper for callers to load and validate configuration."""
    return AppConfig()
