"""CLI entrypoint: take one telemetry snapshot and print it."""

from __future__ import annotations

import argparse
import sys

from hoiola_core import AppConfig, configure_logging, get_logger, install_crash_hooks, load_config
from hoiola_renderer import ReportRenderer
from hoiola_telemetry import TelemetryProvider


def build_provider(cfg: AppConfig) -> TelemetryProvider:
    return TelemetryProvider(
        cpu_temp_files=cfg.sensors.cpu_temp_files,
        gpu_temp_files=cfg.sensors.gpu_temp_files,
        sensors_command=cfg.sensors.sensors_command,
        gpu_command=cfg.sensors.gpu_command,
        command_timeout_s=cfg.sensors.command_timeout_s,
        sample_interval_s=cfg.network.sample_interval_s,
        excluded_interfaces=cfg.network.excluded_interfaces,
    )


def cmd_snapshot(cfg: AppConfig) -> int:
    snapshot = build_provider(cfg).poll()
    report = ReportRenderer(title=cfg.display.title).render(snapshot, cfg.display.theme)
    sys.stdout.write(report)
    sys.stdout.flush()
    # Missing sensors are placeholders in the report, never a failed run.
    return 0


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="hoiola",
        description="Print a one-shot snapshot of RAM usage, CPU/GPU temperature and network throughput",
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    parser.parse_args(argv)

    cfg = load_config()
    configure_logging(
        keep_files=cfg.diagnostics.keep_log_files,
        console=False,
        level=cfg.diagnostics.log_level,
    )
    install_crash_hooks()
    get_logger("app").debug("snapshot requested", extra={"event": "snapshot_requested"})
    return cmd_snapshot(cfg)


if __name__ == "__main__":
    raise SystemExit(main())
