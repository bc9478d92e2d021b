"""Core services for settings and diagnostics logging."""

from .config import (
    AppConfig,
    DiagnosticsConfig,
    DisplayConfig,
    NetworkConfig,
    SensorConfig,
    config_dir,
    config_path,
    load_config,
)
from .logging_setup import configure_logging, get_logger, install_crash_hooks

__all__ = [
    "AppConfig",
    "DiagnosticsConfig",
    "DisplayConfig",
    "NetworkConfig",
    "SensorConfig",
    "config_dir",
    "config_path",
    "configure_logging",
    "get_logger",
    "install_crash_hooks",
    "load_config",
]
