# env_detector/log.py
from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone


class ColorFormatter(logging.Formatter):
    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[1;41m",
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        c = self.COLORS.get(record.levelname, "")
        return f"{c}{base}{self.COLORS['RESET']}"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        obj = {
            "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            obj["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(obj)


def setup_logging(debug: bool = False, style: str = "color") -> None:
    """
    Route the env_detector loggers to stderr. The root logger and the host
    application's handlers are left alone.
    """
    style = (os.getenv("LOG_STYLE") or style).lower()
    handler = logging.StreamHandler(sys.stderr)
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    if style == "json":
        handler.setFormatter(JsonFormatter())
    elif style == "plain" or not sys.stderr.isatty():
        handler.setFormatter(logging.Formatter(fmt))
    else:
        handler.setFormatter(ColorFormatter(fmt))

    logger = logging.getLogger("env_detector")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
