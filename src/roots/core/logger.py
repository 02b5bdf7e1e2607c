"""
Structured logging with key=value and JSON output support.

Wraps the standard library ``logging`` module so that keyword arguments
become structured fields: human-readable ``key=value`` pairs by default,
or one JSON object per record for log aggregators.

The lower layers (``models``, ``utils``, ``nips``) log through plain
``logging.getLogger(__name__)`` calls. Installing
[StructuredFormatter][roots.core.logger.StructuredFormatter] on the root
handler via [configure_logging()][roots.core.logger.configure_logging]
gives both paths the same ``level name message key=value`` layout.

Examples:
    ```python
    from roots.core.logger import Logger, configure_logging

    configure_logging("DEBUG")
    logger = Logger("roots.validator").bind(relay="wss://relay.example.com")
    logger.debug("event_rejected", event_id="c7a7...", reason="invalid signature")
    # debug roots.validator event_rejected relay=wss://relay.example.com event_id=c7a7... reason="invalid signature"
    ```
"""

from __future__ import annotations

import datetime
import json
import logging
from typing import Any, ClassVar


_TRUNCATED = "...<truncated {} chars>"


def _truncate(value: str, max_value_length: int | None) -> str:
    if max_value_length and len(value) > max_value_length:
        return value[:max_value_length] + _TRUNCATED.format(len(value) - max_value_length)
    return value


def format_kv_pairs(
    kwargs: dict[str, Any],
    max_value_length: int | None = 1000,
    prefix: str = " ",
) -> str:
    """Format a dictionary as space-separated key=value pairs.

    Values are truncated to ``max_value_length`` characters. Values that are
    empty or contain whitespace, equals signs, or quotes are escaped and
    wrapped in double quotes.

    Args:
        kwargs: Key-value pairs to format.
        max_value_length: Maximum characters per value. ``None`` disables
            truncation.
        prefix: String prepended to a non-empty result.

    Returns:
        Formatted string such as ``' id=c7a7 reason="bad sig"'``, or ``""``
        when *kwargs* is empty.
    """
    if not kwargs:
        return ""

    parts = []
    for k, v in kwargs.items():
        s = _truncate(str(v), max_value_length)
        if not s or any(ch in s for ch in " ='\""):
            escaped = s.replace("\\", "\\\\").replace('"', '\\"')
            parts.append(f'{k}="{escaped}"')
        else:
            parts.append(f"{k}={s}")
    return prefix + " ".join(parts)


class StructuredFormatter(logging.Formatter):
    """Formats log records as ``level name message key=value ...``.

    Reads structured fields from the ``structured_kv`` extra attached by
    [Logger][roots.core.logger.Logger]. Records without it (plain
    ``logging.getLogger()`` calls) are emitted with the same prefix.
    """

    def format(self, record: logging.LogRecord) -> str:
        base = f"{record.levelname.lower()} {record.name} {record.getMessage()}"
        extra: dict[str, Any] = getattr(record, "structured_kv", {})
        if extra:
            base += format_kv_pairs(extra)
        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)
        return base


def configure_logging(level: int | str = logging.INFO, *, json_output: bool = False) -> None:
    """Install a [StructuredFormatter][roots.core.logger.StructuredFormatter] on the root logger.

    In JSON mode the formatter is left as a bare ``%(message)s`` because
    [Logger][roots.core.logger.Logger] already renders the whole record.

    Args:
        level: Root log level, as an int or a name such as ``"DEBUG"``.
        json_output: Use a pass-through formatter for JSON records.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(message)s") if json_output else StructuredFormatter()
    )
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level.upper() if isinstance(level, str) else level)


class Logger:
    """Structured logger that appends keyword arguments as extra fields.

    All public methods mirror the standard logging API with an added
    ``**kwargs`` parameter. Fields bound with
    [bind()][roots.core.logger.Logger.bind] are prepended to every record.

    Examples:
        ```python
        logger = Logger("roots.validator")
        logger.info("batch_validated", accepted=98, rejected=2)
        # batch_validated accepted=98 rejected=2
        ```
    """

    _DEFAULT_MAX_VALUE_LENGTH: ClassVar[int] = 1000

    def __init__(
        self,
        name: str,
        *,
        json_output: bool = False,
        max_value_length: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize a structured logger.

        Args:
            name: Logger name passed to ``logging.getLogger(name)``.
            json_output: Emit JSON objects instead of key=value pairs.
            max_value_length: Maximum characters per value before
                truncation. Defaults to 1000.
            context: Fields included in every record.
        """
        if max_value_length is None:
            max_value_length = self._DEFAULT_MAX_VALUE_LENGTH
        self._logger = logging.getLogger(name)
        self._json_output = json_output
        self._max_value_length = max_value_length
        self._context = dict(context or {})

    @property
    def name(self) -> str:
        return self._logger.name

    def bind(self, **context: Any) -> Logger:
        """Return a logger with the same name that always includes *context*."""
        return Logger(
            self._logger.name,
            json_output=self._json_output,
            max_value_length=self._max_value_length,
            context={**self._context, **context},
        )

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def _format_json(self, msg: str, level: str, fields: dict[str, Any]) -> str:
        record = {
            "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
            "level": level,
            "logger": self._logger.name,
            "message": msg,
            **fields,
        }
        return json.dumps(record, default=str, ensure_ascii=False)

    def _emit(self, level: int, msg: str, kwargs: dict[str, Any], *, exc_info: bool = False) -> None:
        if not self._logger.isEnabledFor(level):
            return
        fields = {**self._context, **kwargs}
        if self._json_output:
            level_name = logging.getLevelName(level).lower()
            self._logger.log(level, self._format_json(msg, level_name, fields), exc_info=exc_info)
            return
        truncated = {
            k: _truncate(str(v), self._max_value_length) if isinstance(v, str) else v
            for k, v in fields.items()
        }
        extra = {"structured_kv": truncated} if truncated else {}
        self._logger.log(level, msg, extra=extra, exc_info=exc_info)

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log a DEBUG level message with optional key=value pairs."""
        self._emit(logging.DEBUG, msg, kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log an INFO level message with optional key=value pairs."""
        self._emit(logging.INFO, msg, kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log a WARNING level message with optional key=value pairs."""
        self._emit(logging.WARNING, msg, kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log an ERROR level message with optional key=value pairs."""
        self._emit(logging.ERROR, msg, kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log an ERROR level message with the active exception's traceback."""
        self._emit(logging.ERROR, msg, kwargs, exc_info=True)
