"""CPU and GPU temperature probes backed by sysfs files and vendor tools."""

from __future__ import annotations

import logging
import re
import subprocess
from typing import Iterable, Sequence


logger = logging.getLogger("hoiola.telemetry.thermal")

MIN_PLAUSIBLE_C = 10.0
MAX_PLAUSIBLE_C = 100.0

CPU_TEMP_UNAVAILABLE = 0.0
GPU_UNAVAILABLE = -1.0

CPU_LABELS = ("CPU", "Package", "Tdie", "Core")
DEGREE_MARKER = "°C"
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

CPU_TEMP_FILES = (
    "/sys/class/hwmon/hwmon5/temp1_input",  # usually the package sensor
    *(f"/sys/class/thermal/thermal_zone{i}/temp" for i in range(10)),
)

GPU_TEMP_FILES = (
    "/sys/class/drm/card0/device/hwmon/hwmon2/temp1_input",
    "/sys/class/drm/card1/device/hwmon/hwmon3/temp1_input",
)

SENSORS_COMMAND = ("sensors",)
GPU_COMMAND = (
    "nvidia-smi",
    "--query-gpu=temperature.gpu",
    "--format=csv,noheader,nounits",
)

DEFAULT_COMMAND_TIMEOUT_S = 5.0


def read_temperature_file(path: str) -> float | None:
    """Read a millidegree sensor file and return degrees Celsius.

    Returns None when the file is missing or unreadable, when its first line
    is not an integer, or when the converted value is outside the plausible
    (10, 100) range. Nothing is raised to the caller.
    """

    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            first_line = fh.readline()
    except OSError:
        return None

    text = first_line.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    millidegrees = int(text)

    celsius = millidegrees / 1000.0
    if MIN_PLAUSIBLE_C < celsius < MAX_PLAUSIBLE_C:
        return celsius
    return None


def _first_file_reading(paths: Iterable[str]) -> float | None:
    for path in paths:
        value = read_temperature_file(path)
        if value is not None:
            logger.debug("temperature from %s: %.1f", path, value)
            return value
    return None


def run_command(argv: Sequence[str], timeout_s: float = DEFAULT_COMMAND_TIMEOUT_S) -> str | None:
    """Run a diagnostic command and return its stdout, or None on any failure."""
    try:
        result = subprocess.run(
            list(argv),
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout_s,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("command %s failed to run: %s", argv[0], exc)
        return None
    if result.returncode != 0:
        logger.debug("command %s exited with %s", argv[0], result.returncode)
        return None
    return result.stdout


def parse_sensors_output(text: str) -> float | None:
    """Find the first labeled CPU temperature in `sensors` style output.

    A line qualifies when it contains one of CPU_LABELS; the first
    whitespace-delimited token carrying the degree marker that parses as a
    float (after dropping the marker and any "+") is returned.
    """

    for line in text.splitlines():
        if not any(label in line for label in CPU_LABELS):
            continue
        for token in line.split():
            if DEGREE_MARKER not in token:
                continue
            cleaned = token.replace(DEGREE_MARKER, "").replace("+", "")
            try:
                return float(cleaned)
            except ValueError:
                continue
    return None


def cpu_temperature(
    temp_files: Iterable[str] = CPU_TEMP_FILES,
    sensors_command: Sequence[str] = SENSORS_COMMAND,
    timeout_s: float = DEFAULT_COMMAND_TIMEOUT_S,
) -> float:
    value = _first_file_reading(temp_files)
    if value is not None:
        return value

    output = run_command(sensors_command, timeout_s)
    if output is None:
        logger.warning("cpu temperature unavailable: no sensor file and %s failed", sensors_command[0])
        return CPU_TEMP_UNAVAILABLE

    value = parse_sensors_output(output)
    if value is None:
        logger.warning("cpu temperature unavailable: no labeled reading in %s output", sensors_command[0])
        return CPU_TEMP_UNAVAILABLE
    return value


def _parse_gpu_query(output: str) -> float | None:
    lines = output.strip().splitlines()
    if not lines or not lines[0].strip():
        return None
    try:
        return float(lines[0].strip())
    except ValueError:
        return None


def gpu_temperature(
    gpu_command: Sequence[str] = GPU_COMMAND,
    temp_files: Iterable[str] = GPU_TEMP_FILES,
    timeout_s: float = DEFAULT_COMMAND_TIMEOUT_S,
) -> float:
    """Return the GPU temperature, or GPU_UNAVAILABLE when no source answers."""
    output = run_command(gpu_command, timeout_s)
    if output is not None:
        value = _parse_gpu_query(output)
        if value is not None:
            return value
        logger.debug("unparseable %s output: %r", gpu_command[0], output[:80])

    value = _first_file_reading(temp_files)
    if value is not None:
        return value

    logger.info("gpu temperature not available")
    return GPU_UNAVAILABLE
