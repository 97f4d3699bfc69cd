"""
Logging setup.

Everything goes to stdout (gunicorn captures it alongside its own access log).
Development gets a plain one-line format; every other APP_ENV gets JSON lines
so the hosting platform can index fields such as `correlation_id`.
"""
from __future__ import annotations

import logging
import sys
from typing import Any

from pythonjsonlogger import jsonlogger

from habitlog.core.config import settings

_PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class _JsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["env"] = settings.APP_ENV
        if hasattr(record, "correlation_id"):
            log_record["correlation_id"] = record.correlation_id


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Install a single stdout handler on the `habitlog` logger tree."""
    level = (level or settings.LOG_LEVEL).upper()
    if json_logs is None:
        json_logs = settings.json_logs

    handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        handler.setFormatter(_JsonFormatter(
            fmt=_JSON_FORMAT,
            rename_fields={"levelname": "level", "name": "logger", "asctime": "timestamp"},
        ))
    else:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    logger = logging.getLogger("habitlog")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level, logging.INFO))
    logger.propagate = False
