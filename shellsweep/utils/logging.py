"""Centralized logging configuration using Loguru.

Usage:
    from shellsweep.utils.logging import logger
    logger.info("Message")
    logger.debug("Debug message")  # Only shows if SHELLSWEEP_LOG_LEVEL=DEBUG

Environment Variables:
    SHELLSWEEP_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: WARNING)
    SHELLSWEEP_LOG_JSON: 0|1 (default: 0, human-readable)
    SHELLSWEEP_LOG_FILE: path to log file (optional, NDJSON lines)

The default level is WARNING so a plain run prints nothing but the
"Processing" headers and shellcheck's own output.
"""

import json
import os
import sys

from loguru import logger

# Remove default handler
logger.remove()

# Numeric levels for NDJSON output
JSON_LEVELS = {
    "TRACE": 10,
    "DEBUG": 20,
    "INFO": 30,
    "WARNING": 40,
    "ERROR": 50,
    "CRITICAL": 60,
}

_log_level = os.environ.get("SHELLSWEEP_LOG_LEVEL", "WARNING").upper()
_json_mode = os.environ.get("SHELLSWEEP_LOG_JSON", "0") == "1"
_log_file = os.environ.get("SHELLSWEEP_LOG_FILE")


def _to_json_line(record) -> str:
    """Render a loguru record as a single NDJSON line."""
    payload = {
        "level": JSON_LEVELS.get(record["level"].name, 30),
        "time": int(record["time"].timestamp() * 1000),
        "msg": record["message"],
        "pid": record["process"].id,
    }

    for key, value in record["extra"].items():
        payload[key] = value

    if record["exception"]:
        payload["err"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }

    return json.dumps(payload, default=str)


def json_sink(message):
    """Write NDJSON log lines to stderr.

    stdout is reserved for shellcheck output and the Processing headers.
    Never call logger.* inside a sink - causes infinite recursion.
    """
    sys.stderr.write(_to_json_line(message.record) + "\n")
    sys.stderr.flush()


# Human-readable format (no emojis - Windows CP1252 compatibility)
_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)

logger.level("DEBUG", color="<blue>")
logger.level("INFO", color="<white>")
logger.level("WARNING", color="<yellow>")
logger.level("ERROR", color="<red>")
logger.level("CRITICAL", color="<red><bold>")

if _json_mode:
    logger.add(
        json_sink,
        level=_log_level,
        colorize=False,
    )
else:
    logger.add(
        sys.stderr,
        level=_log_level,
        format=_human_format,
        colorize=None,  # Auto-detect: colors if TTY, plain if piped
    )

if _log_file:
    def _file_sink(message):
        """Append NDJSON to the configured log file."""
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(_to_json_line(message.record) + "\n")

    logger.add(
        _file_sink,
        level="DEBUG",  # File always captures everything
    )


__all__ = [
    "logger",
    "json_sink",
]
