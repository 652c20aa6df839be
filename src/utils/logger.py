"""Logging for the SmartChef recipe service.

One shared `logger` ("smartchef") writes to stdout. Environment variables:
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
- LOG_TYPE: text, json (default: text)

Records logged with `extra={"provenance": ...}` are tagged with the path that
produced the recipes ("model" or "fallback") in both formats.
"""

import json
import logging
import os
import sys
from typing import Any, Optional

# Library loggers that announce every outbound request at INFO
NOISY_LIBRARIES = ("httpx", "httpcore")


def _provenance(record: logging.LogRecord) -> Optional[str]:
    return getattr(record, "provenance", None)


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        provenance = _provenance(record)
        if provenance:
            log_data["provenance"] = provenance
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class RichTextFormatter(logging.Formatter):
    """Colored single-line output with a level icon, for terminals."""

    RESET = "\033[0m"
    STYLES = {
        "DEBUG": ("\033[36m", "🔍"),
        "INFO": ("\033[32m", "ℹ️"),
        "WARNING": ("\033[33m", "⚠️"),
        "ERROR": ("\033[31m", "❌"),
    }

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        color, icon = self.STYLES.get(level, (self.RESET, ""))
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")

        tag = f"[{_provenance(record)}] " if _provenance(record) else ""
        message = f"{color}{icon} {timestamp} {level:<8} {record.name:<10} {tag}{record.getMessage()}{self.RESET}"

        if record.exc_info:
            message += f"\n{self.formatException(record.exc_info)}"
        return message


def get_logger(name: str, level: Optional[str] = None, log_type: Optional[str] = None) -> logging.Logger:
    """Return a configured logger, adding a stdout handler on first use.

    Args:
        name: Logger name.
        level: Level name; defaults to LOG_LEVEL. Unknown names fall back to INFO.
        log_type: "json" or "text"; defaults to LOG_TYPE.
    """
    logger_instance = logging.getLogger(name)
    if logger_instance.handlers:
        return logger_instance

    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    output = (log_type or os.getenv("LOG_TYPE", "text")).lower()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(JSONFormatter() if output == "json" else RichTextFormatter())

    logger_instance.setLevel(log_level)
    logger_instance.addHandler(handler)
    return logger_instance


logger = get_logger("smartchef")

for _library in NOISY_LIBRARIES:
    logging.getLogger(_library).setLevel(logging.WARNING)
