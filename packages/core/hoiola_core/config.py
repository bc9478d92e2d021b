"""Settings schema and loader for the snapshot tool."""

from __future__ import annotations

import json
import logging
import math
import os
import platform
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from hoiola_renderer import DEFAULT_THEME_NAME, DEFAULT_TITLE, list_themes
from hoiola_telemetry.network import DEFAULT_SAMPLE_INTERVAL_S, LOOPBACK_INTERFACE
from hoiola_telemetry.thermal import (
    CPU_TEMP_FILES,
    DEFAULT_COMMAND_TIMEOUT_S,
    GPU_COMMAND,
    GPU_TEMP_FILES,
    SENSORS_COMMAND,
)


CONFIG_VERSION = 1


@dataclass
class SensorConfig:
    cpu_temp_files: list[str] = field(default_factory=lambda: list(CPU_TEMP_FILES))
    gpu_temp_files: list[str] = field(default_factory=lambda: list(GPU_TEMP_FILES))
    sensors_command: list[str] = field(default_factory=lambda: list(SENSORS_COMMAND))
    gpu_command: list[str] = field(default_factory=lambda: list(GPU_COMMAND))
    command_timeout_s: float = DEFAULT_COMMAND_TIMEOUT_S


@dataclass
class NetworkConfig:
    sample_interval_s: float = DEFAULT_SAMPLE_INTERVAL_S
    excluded_interfaces: list[str] = field(default_factory=lambda: [LOOPBACK_INTERFACE])


@dataclass
class DisplayConfig:
    title: str = DEFAULT_TITLE
    theme: str = DEFAULT_THEME_NAME


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7
    log_level: str = "INFO"


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    sensors: SensorConfig = field(default_factory=SensorConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def config_dir() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Hoiola"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Hoiola"
    return Path.home() / ".config" / "hoiola"


def config_path() -> Path:
    override = os.environ.get("HOIOLA_CONFIG")
    if override:
        return Path(override).expanduser()
    return config_dir() / "config.json"


def _merge(dataclass_type, raw: Any):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _str_list(value: Any, fallback: list[str]) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        return list(fallback)
    return list(value)


def _finite_float(value: Any, fallback: float) -> float:
    try:
        result = float(value)
    except (TypeError, ValueError):
        return fallback
    return result if math.isfinite(result) else fallback


def _normalize_sensors(cfg: AppConfig) -> None:
    s = cfg.sensors
    s.cpu_temp_files = _str_list(s.cpu_temp_files, list(CPU_TEMP_FILES))
    s.gpu_temp_files = _str_list(s.gpu_temp_files, list(GPU_TEMP_FILES))
    s.sensors_command = _str_list(s.sensors_command, list(SENSORS_COMMAND)) or list(SENSORS_COMMAND)
    s.gpu_command = _str_list(s.gpu_command, list(GPU_COMMAND)) or list(GPU_COMMAND)
    timeout = _finite_float(s.command_timeout_s, DEFAULT_COMMAND_TIMEOUT_S)
    s.command_timeout_s = max(0.5, min(30.0, timeout))


def _normalize_network(cfg: AppConfig) -> None:
    n = cfg.network
    interval = _finite_float(n.sample_interval_s, DEFAULT_SAMPLE_INTERVAL_S)
    n.sample_interval_s = max(0.1, min(10.0, interval))
    excluded = _str_list(n.excluded_interfaces, [LOOPBACK_INTERFACE])
    if LOOPBACK_INTERFACE not in excluded:
        excluded.insert(0, LOOPBACK_INTERFACE)
    n.excluded_interfaces = excluded


def _normalize_display(cfg: AppConfig) -> None:
    if not isinstance(cfg.display.title, str) or not cfg.display.title:
        cfg.display.title = DEFAULT_TITLE
    if cfg.display.theme not in list_themes():
        cfg.display.theme = DEFAULT_THEME_NAME


def _normalize_diagnostics(cfg: AppConfig) -> None:
    try:
        keep = int(cfg.diagnostics.keep_log_files)
    except (TypeError, ValueError, OverflowError):
        keep = DiagnosticsConfig.keep_log_files
    cfg.diagnostics.keep_log_files = max(2, keep)
    level = str(cfg.diagnostics.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    cfg.diagnostics.log_level = level


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=CONFIG_VERSION,
        sensors=_merge(SensorConfig, raw.get("sensors", {})),
        network=_merge(NetworkConfig, raw.get("network", {})),
        display=_merge(DisplayConfig, raw.get("display", {})),
        diagnostics=_merge(DiagnosticsConfig, raw.get("diagnostics", {})),
    )

    _normalize_sensors(cfg)
    _normalize_network(cfg)
    _normalize_display(cfg)
    _normalize_diagnostics(cfg)
    return cfg
