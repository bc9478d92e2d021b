"""Typed telemetry models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class InterfaceCounters:
    bytes_recv: int
    bytes_sent: int


# Interface name -> cumulative counters at one instant.
CounterSample = dict[str, InterfaceCounters]


@dataclass(frozen=True)
class NetworkRates:
    rx: str
    tx: str


@dataclass(frozen=True)
class Snapshot:
    timestamp: datetime
    ram_percent: float
    cpu_temp_c: float
    gpu_temp_c: float
    network: NetworkRates

    @property
    def gpu_available(self) -> bool:
        return self.gpu_temp_c >= 0
