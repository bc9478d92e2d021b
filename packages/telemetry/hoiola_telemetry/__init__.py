"""Host telemetry probes for the hoiola snapshot tool."""

from .models import CounterSample, InterfaceCounters, NetworkRates, Snapshot
from .network import compute_rates, format_rate, sample_network_rates, sum_deltas, take_counter_sample
from .provider import TelemetryProvider, ram_usage_percent
from .thermal import (
    GPU_UNAVAILABLE,
    cpu_temperature,
    gpu_temperature,
    parse_sensors_output,
    read_temperature_file,
)

__all__ = [
    "CounterSample",
    "GPU_UNAVAILABLE",
    "InterfaceCounters",
    "NetworkRates",
    "Snapshot",
    "TelemetryProvider",
    "compute_rates",
    "cpu_temperature",
    "format_rate",
    "gpu_temperature",
    "parse_sensors_output",
    "ram_usage_percent",
    "read_temperature_file",
    "sample_network_rates",
    "sum_deltas",
    "take_counter_sample",
]
