"""Network throughput sampling from per-interface byte counters."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable

import psutil

from .models import CounterSample, InterfaceCounters, NetworkRates


logger = logging.getLogger("hoiola.telemetry.network")

LOOPBACK_INTERFACE = "lo"
DEFAULT_SAMPLE_INTERVAL_S = 1.0

RATE_UNAVAILABLE = "N/A"
RATE_ZERO = "0 KB/s"


def take_counter_sample() -> CounterSample:
    counters = psutil.net_io_counters(pernic=True)
    return {
        name: InterfaceCounters(bytes_recv=int(c.bytes_recv), bytes_sent=int(c.bytes_sent))
        for name, c in counters.items()
    }


def sum_deltas(
    before: CounterSample,
    after: CounterSample,
    excluded: Iterable[str] = (LOOPBACK_INTERFACE,),
) -> tuple[int, int]:
    """Total received/sent bytes between two samples.

    Interfaces missing from `before` are skipped, not diffed against zero.
    Loopback is always excluded. A counter that went backwards (interface
    reset) contributes nothing.
    """

    skip = set(excluded)
    skip.add(LOOPBACK_INTERFACE)
    total_rx = 0
    total_tx = 0
    for name, final in after.items():
        if name in skip:
            continue
        initial = before.get(name)
        if initial is None:
            continue
        total_rx += max(final.bytes_recv - initial.bytes_recv, 0)
        total_tx += max(final.bytes_sent - initial.bytes_sent, 0)
    return total_rx, total_tx


def format_rate(kb_per_s: float) -> str:
    if kb_per_s < 1024:
        return f"{kb_per_s:.1f} KB/s"
    return f"{kb_per_s / 1024:.1f} MB/s"


def compute_rates(
    before: CounterSample,
    after: CounterSample,
    elapsed_s: float,
    excluded: Iterable[str] = (LOOPBACK_INTERFACE,),
) -> NetworkRates:
    if elapsed_s <= 0:
        return NetworkRates(rx=RATE_ZERO, tx=RATE_ZERO)

    total_rx, total_tx = sum_deltas(before, after, excluded)
    rx_kb_s = total_rx / elapsed_s / 1024.0
    tx_kb_s = total_tx / elapsed_s / 1024.0
    return NetworkRates(rx=format_rate(rx_kb_s), tx=format_rate(tx_kb_s))


def sample_network_rates(
    interval_s: float = DEFAULT_SAMPLE_INTERVAL_S,
    excluded: Iterable[str] = (LOOPBACK_INTERFACE,),
    sampler: Callable[[], CounterSample] = take_counter_sample,
    sleep: Callable[[float], None] | None = None,
    clock: Callable[[], float] | None = None,
) -> NetworkRates:
    """Measure RX/TX throughput over one blocking interval.

    Elapsed time is taken from the same instants as the counter reads.
    """

    sleep = sleep or time.sleep
    clock = clock or time.monotonic
    try:
        before = sampler()
        started = clock()
        sleep(interval_s)
        after = sampler()
        finished = clock()
    except (OSError, psutil.Error) as exc:
        logger.warning("network counters unavailable: %s", exc)
        return NetworkRates(rx=RATE_UNAVAILABLE, tx=RATE_UNAVAILABLE)

    elapsed = finished - started
    if elapsed <= 0:
        logger.warning("non-positive sampling interval %.6fs", elapsed)
    return compute_rates(before, after, elapsed, excluded)
