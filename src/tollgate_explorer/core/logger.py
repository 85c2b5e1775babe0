"""
Structured logging with key=value and JSON output support.

Wraps the standard library ``logging`` module so the release store and its
collaborators emit machine-greppable records: an event name followed by
``key=value`` pairs (default), or one JSON object per record.

Values containing spaces, equals signs, or quotes are escaped and wrapped
in double quotes. Long values (event content, error strings from relays)
are truncated to a configurable maximum length.

``StructuredFormatter`` reads the ``structured_kv`` extra attached by
[Logger][tollgate_explorer.core.logger.Logger]. Installed on the root handler
by [setup_logging][tollgate_explorer.core.logger.setup_logging], it unifies
output from ``Logger`` and the plain ``logging.getLogger(__name__)`` calls
used in the models, nips and utils layers.

Examples:
    ```python
    from tollgate_explorer.core.logger import Logger

    logger = Logger("release_store")
    logger.info("subscription_opened", generation=1, limit=500)
    # Output: subscription_opened generation=1 limit=500

    json_logger = Logger("release_store", json_output=True)
    json_logger.info("end_of_stored_events", received=0)
    # Output: {"timestamp": "...", "level": "info", "service": "release_store",
    #          "message": "end_of_stored_events", "received": 0}
    ```
"""

import datetime
import json
import logging
from typing import Any, ClassVar


def _truncate_value(value: Any, max_value_length: int | None) -> str:
    s = str(value)
    if max_value_length and len(s) > max_value_length:
        return s[:max_value_length] + f"...<truncated {len(s) - max_value_length} chars>"
    return s


def format_kv_pairs(
    kwargs: dict[str, Any],
    max_value_length: int | None = 1000,
    prefix: str = " ",
) -> str:
    """Format a dictionary as space-separated key=value pairs.

    Args:
        kwargs: Key-value pairs to format.
        max_value_length: Maximum characters per value before truncation.
            Pass None to disable truncation.
        prefix: String prepended to the output (default: single space).

    Returns:
        Formatted string, e.g. ' key1=value1 key2="value with spaces"'.
        Returns empty string if kwargs is empty.
    """
    if not kwargs:
        return ""

    parts = []
    for k, v in kwargs.items():
        s = _truncate_value(v, max_value_length)
        # Quote values that would break key=value parsing
        if not s or " " in s or "=" in s or '"' in s or "'" in s:
            escaped = s.replace("\\", "\\\\").replace('"', '\\"')
            parts.append(f'{k}="{escaped}"')
        else:
            parts.append(f"{k}={s}")

    return prefix + " ".join(parts)


class StructuredFormatter(logging.Formatter):
    """Formats all log records as ``level name message key=value ...``."""

    def format(self, record: logging.LogRecord) -> str:
        base = f"{record.levelname.lower()} {record.name} {record.getMessage()}"
        extra: dict[str, Any] = getattr(record, "structured_kv", {})
        if extra:
            base += format_kv_pairs(extra)
        return base


def setup_logging(level: str = "INFO") -> None:
    """Install a ``StructuredFormatter`` handler on the root logger.

    Idempotent: a second call only updates the level.
    """
    root = logging.getLogger()
    if not any(isinstance(h.formatter, StructuredFormatter) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper()))


class Logger:
    """Structured logger that appends keyword arguments as extra fields.

    All public methods mirror the standard logging API with an added
    ``**kwargs`` parameter.

    Examples:
        ```python
        logger = Logger("release_store")
        logger.info("release_received", id="ab12cd34", created_at=1700000000)
        # Output: release_received id=ab12cd34 created_at=1700000000
        ```
    """

    _DEFAULT_MAX_VALUE_LENGTH: ClassVar[int] = 1000

    def __init__(
        self,
        name: str,
        *,
        json_output: bool = False,
        max_value_length: int | None = None,
    ) -> None:
        """Initialize a structured logger.

        Args:
            name: Logger name, mapped to ``logging.getLogger(name)``.
            json_output: If True, emit JSON objects instead of key=value pairs.
            max_value_length: Maximum character length for individual values
                before truncation. Defaults to 1000.
        """
        if max_value_length is None:
            max_value_length = self._DEFAULT_MAX_VALUE_LENGTH
        self._logger = logging.getLogger(name)
        self._json_output = json_output
        self._max_value_length = max_value_length

    @property
    def name(self) -> str:
        return self._logger.name

    def _format_json(self, msg: str, level: str, kwargs: dict[str, Any]) -> str:
        record = {
            "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
            "level": level,
            "service": self._logger.name,
            "message": msg,
            **kwargs,
        }
        return json.dumps(record, default=str)

    def _make_extra(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        """Build the ``extra`` dict, pre-truncating long values."""
        if not kwargs:
            return {}
        return {
            "structured_kv": {
                k: _truncate_value(v, self._max_value_length) for k, v in kwargs.items()
            }
        }

    def _log(self, level: int, msg: str, kwargs: dict[str, Any], *, exc_info: bool = False) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if self._json_output:
            level_name = logging.getLevelName(level).lower()
            self._logger.log(level, self._format_json(msg, level_name, kwargs), exc_info=exc_info)
        else:
            self._logger.log(level, msg, extra=self._make_extra(kwargs), exc_info=exc_info)

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log at ERROR level with the active exception traceback."""
        self._log(logging.ERROR, msg, kwargs, exc_info=True)
