"""Logging setup for the FARS toolkit: plain or single-line JSON output."""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RESERVED = {
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
}

_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per line: ``ts``, ``level``, ``logger``, ``msg``.

    The FARS modules attach context through ``extra=`` and it lands at the
    top level of the object:

    - ``year`` and ``reason`` on a year that failed to load
    - ``path`` and ``rows`` on each file read
    - ``state`` and ``year`` when a map has nothing to plot
    - ``years`` on the summary table, ``data_dir`` on directory lookup

    Non-JSON values are written with ``str()``.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED:
                payload[key] = value

        return json.dumps(payload, default=str)


def configure_logging(level: str = "INFO", json_output: bool = False) -> logging.Handler:
    """Attach a stderr handler to the ``fars`` and ``py.warnings`` loggers.

    ``warnings.warn`` calls (e.g. ``invalid year: 2012``) are routed through
    logging so the CLI reports them with the same formatter.

    Args:
        level: Logging level name, e.g. ``'INFO'`` or ``'DEBUG'``.
        json_output: Use :class:`JsonFormatter` instead of plain text.

    Returns:
        The installed handler.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter() if json_output else logging.Formatter(_PLAIN_FORMAT))
    handler.set_name("fars")

    logging.captureWarnings(True)
    for name in ("fars", "py.warnings"):
        logger = logging.getLogger(name)
        # Repeated calls replace the handler rather than stacking copies.
        logger.handlers = [h for h in logger.handlers if h.get_name() != "fars"]
        logger.addHandler(handler)
        logger.setLevel(level.upper())

    return handler
