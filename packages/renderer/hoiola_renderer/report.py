"""Fixed-layout text report for a telemetry snapshot."""

from __future__ import annotations

from hoiola_telemetry.models import Snapshot

from .themes import get_theme

DEFAULT_TITLE = "hoi-ola System Monitor"
CLOCK_FORMAT = "%H:%M:%S %Z"


class ReportRenderer:
    """Formats a Snapshot into the colored multi-line terminal report."""

    def __init__(self, title: str = DEFAULT_TITLE) -> None:
        self.title = title

    def render(self, snapshot: Snapshot, theme_name: str | None = None) -> str:
        t = get_theme(theme_name)
        lines = [
            f"{t.header}=== {self.title} ==={t.reset}",
            "",
            f"{t.clock}[{self._fmt_clock(snapshot)}]{t.reset}",
            f"{t.ram}RAM Usage:{t.reset}     {snapshot.ram_percent:.2f}%",
            f"{t.cpu}CPU Temp:{t.reset}      {self._fmt_temp(snapshot.cpu_temp_c)}",
            f"{t.gpu}GPU Temp:{t.reset}      {self._fmt_gpu(snapshot)}",
            f"{t.network}Network:{t.reset}       RX: {snapshot.network.rx} TX: {snapshot.network.tx}",
            "",
        ]
        return "\n".join(lines) + "\n"

    @staticmethod
    def _fmt_clock(snapshot: Snapshot) -> str:
        return snapshot.timestamp.strftime(CLOCK_FORMAT).strip()

    @staticmethod
    def _fmt_temp(value: float) -> str:
        return f"{value:.2f}°C"

    @classmethod
    def _fmt_gpu(cls, snapshot: Snapshot) -> str:
        if not snapshot.gpu_available:
            return "Not available"
        return cls._fmt_temp(snapshot.gpu_temp_c)
