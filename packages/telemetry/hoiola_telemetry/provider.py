"""One-shot telemetry provider with graceful per-probe fallbacks."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Sequence

import psutil

from .models import NetworkRates, Snapshot
from .network import DEFAULT_SAMPLE_INTERVAL_S, LOOPBACK_INTERFACE, sample_network_rates
from .thermal import (
    CPU_TEMP_FILES,
    DEFAULT_COMMAND_TIMEOUT_S,
    GPU_COMMAND,
    GPU_TEMP_FILES,
    SENSORS_COMMAND,
    cpu_temperature,
    gpu_temperature,
)


logger = logging.getLogger("hoiola.telemetry.provider")

RAM_UNAVAILABLE = 0.0


def ram_usage_percent() -> float:
    try:
        return float(psutil.virtual_memory().percent)
    except (OSError, psutil.Error) as exc:
        logger.warning("memory usage unavailable: %s", exc)
        return RAM_UNAVAILABLE


class TelemetryProvider:
    """Collects a single Snapshot, probing RAM, CPU, GPU and network in order."""

    def __init__(
        self,
        cpu_temp_files: Sequence[str] = CPU_TEMP_FILES,
        gpu_temp_files: Sequence[str] = GPU_TEMP_FILES,
        sensors_command: Sequence[str] = SENSORS_COMMAND,
        gpu_command: Sequence[str] = GPU_COMMAND,
        command_timeout_s: float = DEFAULT_COMMAND_TIMEOUT_S,
        sample_interval_s: float = DEFAULT_SAMPLE_INTERVAL_S,
        excluded_interfaces: Sequence[str] = (LOOPBACK_INTERFACE,),
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.cpu_temp_files = tuple(cpu_temp_files)
        self.gpu_temp_files = tuple(gpu_temp_files)
        self.sensors_command = tuple(sensors_command)
        self.gpu_command = tuple(gpu_command)
        self.command_timeout_s = command_timeout_s
        self.sample_interval_s = sample_interval_s
        self.excluded_interfaces = tuple(excluded_interfaces)
        self._clock = clock or (lambda: datetime.now().astimezone())

    def poll(self) -> Snapshot:
        timestamp = self._clock()
        ram = ram_usage_percent()
        cpu = cpu_temperature(self.cpu_temp_files, self.sensors_command, self.command_timeout_s)
        gpu = gpu_temperature(self.gpu_command, self.gpu_temp_files, self.command_timeout_s)
        network: NetworkRates = sample_network_rates(self.sample_interval_s, self.excluded_interfaces)

        logger.info(
            "snapshot ram=%.2f cpu=%.2f gpu=%.2f rx=%s tx=%s",
            ram,
            cpu,
            gpu,
            network.rx,
            network.tx,
            extra={"event": "snapshot_collected"},
        )
        return Snapshot(
            timestamp=timestamp,
            ram_percent=ram,
            cpu_temp_c=cpu,
            gpu_temp_c=gpu,
            network=network,
        )
