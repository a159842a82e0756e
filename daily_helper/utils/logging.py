"""
Root logger setup for the daily-helper CLI.

``configure_logging(config)`` runs once per command, before any engine code.
Library modules only ever call ``logging.getLogger(__name__)``.

Log records go to stderr so that stdout carries nothing but the command's
report. With ``json_format = true`` each record becomes one JSON line::

    {"ts": "2026-10-19T12:00:00", "level": "DEBUG", "logger": "daily_helper.recommendations.rule_engine",
     "msg": "rule applied", "rule": "weekday lunch"}

Timestamps are local wall-clock time, like every other time in the app.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from daily_helper.config import LoggingConfig

TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s | %(message)s"
TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Keys every LogRecord carries; the rest were passed through ``extra=``.
_RESERVED = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def _extras(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: val
        for key, val in record.__dict__.items()
        if key not in _RESERVED and not key.startswith("_")
    }


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created).strftime(TIME_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            **_extras(record),
        }
        if record.exc_info:
            line["exc"] = self.formatException(record.exc_info)
        # Korean menu names and reasons stay readable in the log file.
        return json.dumps(line, default=str, ensure_ascii=False)


def build_formatter(json_format: bool) -> logging.Formatter:
    """Text formatter by default, JSON lines when ``json_format`` is set."""
    return _JsonFormatter() if json_format else logging.Formatter(TEXT_FORMAT, TIME_FORMAT)


def configure_logging(config: "LoggingConfig") -> None:
    """Replace the root logger's handlers according to ``config``.

    Always attaches a stderr handler. When ``config.log_file`` is set, also
    appends to that file, creating its directory first.
    """
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    formatter = build_formatter(config.json_format)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        path = Path(config.log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)
