"""File logging for the snapshot tool: JSON lines, crash hook, faulthandler."""

from __future__ import annotations

import faulthandler
import json
import logging
import logging.handlers
import os
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import config_dir


_LOGGER_NAME = "hoiola"

# LogRecord attributes passed through `extra=` that end up in the JSON line.
_EXTRA_FIELDS = ("event", "crash_id")


def log_dir() -> Path:
    override = os.environ.get("HOIOLA_LOG_DIR")
    path = Path(override).expanduser() if override else config_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def configure_logging(keep_files: int = 7, console: bool = True, level: str = "INFO") -> logging.Logger:
    """Attach handlers to the `hoiola` logger once; later calls are no-ops.

    An unwritable log directory leaves only a NullHandler so the report is
    still printed.
    """

    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    handler: logging.Handler
    try:
        handler = logging.handlers.TimedRotatingFileHandler(
            filename=str(log_dir() / "hoiola.log"),
            when="midnight",
            backupCount=max(2, keep_files),
            encoding="utf-8",
        )
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s %(message)s"))
        logger.addHandler(stream_handler)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    if not name:
        return logging.getLogger(_LOGGER_NAME)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def install_crash_hooks() -> None:
    logger = get_logger()

    def _log_uncaught(exc_type, exc_value, exc_tb) -> None:
        crash_id = str(uuid.uuid4())
        logger.critical(
            "uncaught exception",
            exc_info=(exc_type, exc_value, exc_tb),
            extra={"event": "uncaught_exception", "crash_id": crash_id},
        )
        sys.__excepthook__(exc_type, exc_value, exc_tb)

    sys.excepthook = _log_uncaught
    try:
        fault_file = (log_dir() / "fault.log").open("a", encoding="utf-8")
    except OSError:
        return
    faulthandler.enable(file=fault_file)
