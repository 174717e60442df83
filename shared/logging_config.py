"""
Logging setup for the login-app backend.

Modules log through ``logging.getLogger(__name__)``; this module only
configures the root logger once at process start.
"""

import json
import logging
from datetime import datetime, timezone


class ColoredFormatter(logging.Formatter):
    """Formatter with colors for different log levels."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record):
        levelname = record.levelname
        if levelname in self.COLORS:
            record.colored_levelname = (
                f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
            )
        else:
            record.colored_levelname = levelname
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log shippers."""

    def format(self, record):
        entry = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def parse_log_level(level: str) -> int:
    """Map a level name such as ``"warn"`` or ``"debug"`` to a logging level."""
    name = level.strip().upper()
    if name == "WARN":
        name = "WARNING"
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def setup_logging(level: str = "info", log_format: str = "text") -> None:
    """
    Configure the root logger.

    Args:
        level: Level name (debug, info, warn/warning, error, critical)
        log_format: "text" for colored console output, "json" for JSON lines
    """
    root = logging.getLogger()
    root.setLevel(parse_log_level(level))

    # Only add a handler if none exist to avoid duplicates
    if root.hasHandlers():
        return

    handler = logging.StreamHandler()
    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            ColoredFormatter(
                "%(asctime)s | %(colored_levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    root.addHandler(handler)
