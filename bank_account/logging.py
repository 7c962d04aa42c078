"""Structured logging configuration for bank_account.

Account operations log under ``bank_account.*``. Notifications written by
:class:`bank_account.notifications.LoggingNotificationSink` carry their
fields in ``record.extra``, which :class:`JsonFormatter` merges into the
emitted object.
"""

import logging
import sys
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, TextIO

PACKAGE_LOGGER = "bank_account"


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Configure logging for bank_account.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    stream : TextIO | None
        Destination of the single handler. Defaults to stdout.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger(PACKAGE_LOGGER).setLevel(log_level)

    # Faker logs locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


def _json_default(value: Any) -> Any:
    # Amounts stay exact: Decimal is written as its string form, not a float
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with notification fields flattened in."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        import json
        from datetime import timezone

        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            for key, value in extra.items():
                # never let a field shadow the record's own keys
                log_data.setdefault(key, value)

        return json.dumps(log_data, default=_json_default)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``bank_account`` hierarchy.

    Parameters
    ----------
    name : str
        Logger name, usually ``__name__``. Names outside the package are
        nested under it, so ``"audit"`` becomes ``"bank_account.audit"``.

    Returns
    -------
    logging.Logger
        Logger whose level follows :func:`setup_logging`.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
