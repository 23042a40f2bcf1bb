"""
Location : timedlog/core/logging.py
Purpose  : JSON logs to console AND (optionally) a rotating file.
Notes    : log_event(...) is the one diagnostic channel for record/save/load/replay.
"""
import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import TimedRotatingFileHandler
from typing import IO, Any


def _iso_utc(ts: float) -> str:
    """ISO-8601 with milliseconds in UTC, e.g. 2025-08-30T10:12:05.123Z"""
    return (
        datetime.fromtimestamp(ts, tz=timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = {
            "time": _iso_utc(record.created),
            "lvl": record.levelname,
            "component": getattr(record, "component", record.name),
            "event": getattr(record, "event", None),
            "msg": record.getMessage(),
        }
        fields = getattr(record, "fields", None)
        if isinstance(fields, dict):
            base.update(fields)
        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False, default=str)


def configure_logging(cfg: Any = None, stream: IO[str] = sys.stdout) -> None:
    """
    Configure root logger from the `logging` section of a ConfigSnapshot (or a plain dict):
      - Always emit JSON logs to `stream` (stdout by default).
      - If file_path is set, also write a daily-rotating file kept for 'retention_days'.
    """
    section = getattr(cfg, "logging", cfg) or {}
    level = str(section.get("level", "INFO")).upper()
    file_path = section.get("file_path")
    retention_days = int(section.get("retention_days", 14))

    logger = logging.getLogger()
    logger.setLevel(level)
    fmt = JsonFormatter()

    sh = logging.StreamHandler(stream)
    sh.setFormatter(fmt)
    logger.handlers[:] = [sh]

    if file_path:
        log_dir = os.path.dirname(file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        fh = TimedRotatingFileHandler(
            file_path, when="midnight", backupCount=retention_days, encoding="utf-8"
        )
        fh.setFormatter(fmt)
        logger.addHandler(fh)


def log_event(component: str, event: str, msg: str, level: int = logging.INFO, **fields) -> None:
    """Emit a structured JSON log with rich fields (paths, names, counts, reasons)."""
    logging.getLogger(component).log(
        level, msg, extra={"component": component, "event": event, "fields": fields}
    )
