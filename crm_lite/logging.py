"""Logging setup for the crm-lite command line.

Log records go to stderr so that JSON printed by commands on stdout can be
piped. ``CRM_LOG_FORMAT=json`` switches to one JSON object per line.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from crm_lite.storage.serialization import serialize_value

ROOT_LOGGER = "crm_lite"
STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Install a single root handler for crm-lite.

    Parameters
    ----------
    level : str
        Level name; unknown names fall back to INFO.
    format_type : str
        ``"standard"`` or ``"json"``.
    stream : TextIO | None
        Destination (default: stderr).
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)
    if format_type == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_level)

    logging.getLogger(ROOT_LOGGER).setLevel(log_level)
    # locale loading is logged at DEBUG on every Faker instance
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Values passed as ``extra={"extra": {...}}`` are merged into the object;
    money amounts and timestamps among them are written as strings.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            entry.update(serialize_value(extra))

        return json.dumps(entry, ensure_ascii=False)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``crm_lite`` namespace.

    ``get_logger("cli")`` and ``get_logger("crm_lite.cli")`` name the same
    logger.
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
