"""Centralized logging configuration using Loguru.

Usage:
    from propsguard.utils.logging import logger
    logger.info("Message")
    logger.debug("Debug message")  # Only shows if PROPSGUARD_LOG_LEVEL=DEBUG

Environment Variables:
    PROPSGUARD_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: WARNING)
    PROPSGUARD_LOG_JSON: 0|1 (default: 0, human-readable)
    PROPSGUARD_LOG_FILE: path to log file (optional)
"""

import json
import os
import sys

from loguru import logger

# Remove default handler
logger.remove()

_log_level = os.environ.get("PROPSGUARD_LOG_LEVEL", "WARNING").upper()
_json_mode = os.environ.get("PROPSGUARD_LOG_JSON", "0") == "1"
_log_file = os.environ.get("PROPSGUARD_LOG_FILE")


def _ndjson_record(message) -> str:
    """Render a loguru message as a single JSON line."""
    record = message.record

    payload = {
        "level": record["level"].name,
        "time": int(record["time"].timestamp() * 1000),
        "msg": record["message"],
        "module": record["name"],
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


def ndjson_sink(message):
    """Write log records to stderr as NDJSON.

    CRITICAL: Never call logger.* inside a sink - causes infinite recursion
    """
    sys.stderr.write(_ndjson_record(message) + "\n")
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

if _json_mode:
    logger.add(ndjson_sink, level=_log_level, colorize=False)
else:
    logger.add(
        sys.stderr,
        level=_log_level,
        format=_human_format,
        colorize=None,  # Auto-detect: colors if TTY, plain if piped
    )

if _log_file:

    def _file_sink(message):
        """Append NDJSON records to the configured log file."""
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(_ndjson_record(message) + "\n")

    logger.add(_file_sink, level="DEBUG")


__all__ = ["logger"]
