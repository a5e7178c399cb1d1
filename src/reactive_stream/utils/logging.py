"""
Logging for subscription lifecycles.

Every record emitted through a subscription logger carries the subscription
id, the observer state at the time of the event and, where relevant, the
notification channel. StructuredFormatter groups those under a
"subscription" object so one subscription can be followed through a log.
"""

import json
import logging
import sys
from typing import Any, Dict, Optional, Union

from ..core.config import StreamConfig

ROOT_LOGGER = "reactive_stream"
SUBSCRIPTION_FIELDS = ("subscription_id", "state", "channel")

AnyLogger = Union[logging.Logger, logging.LoggerAdapter]


class StructuredFormatter(logging.Formatter):
    """JSON lines with the subscription fields pulled into their own object."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        subscription = {
            field: getattr(record, field)
            for field in SUBSCRIPTION_FIELDS
            if getattr(record, field, None) is not None
        }
        if subscription:
            log_data["subscription"] = subscription

        context = getattr(record, "context", None)
        if context:
            log_data["context"] = context

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class SubscriptionLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter bound to one observer.

    The observer's state is read when each record is made, so an event
    logged during termination reports the state the observer is in at
    that moment.
    """

    def __init__(self, logger: logging.Logger, observer: Any):
        super().__init__(logger, {"subscription_id": observer.subscription_id})
        self._observer = observer

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra = dict(kwargs.get("extra") or {})
        extra["subscription_id"] = self.extra["subscription_id"]
        extra["state"] = self._observer.state.value
        kwargs["extra"] = extra
        return msg, kwargs


def subscription_logger(observer: Any) -> SubscriptionLoggerAdapter:
    """Return the lifecycle logger for an observer."""
    return SubscriptionLoggerAdapter(logging.getLogger(f"{ROOT_LOGGER}.subscription"), observer)


def log_stream_event(
    logger: AnyLogger,
    level: int,
    message: str,
    channel: Optional[str] = None,
    **context: Any,
) -> None:
    """
    Log a subscription lifecycle event.

    Args:
        logger: Subscription logger (or any logger)
        level: Log level
        message: Log message
        channel: Notification channel involved (next/error/complete), if any
        **context: Additional fields, emitted under "context"
    """
    if not logger.isEnabledFor(level):
        return
    extra: Dict[str, Any] = {}
    if channel:
        extra["channel"] = channel
    if context:
        extra["context"] = context
    logger.log(level, message, extra=extra)


def setup_logging(config: Optional[StreamConfig] = None, stream: Optional[Any] = None) -> None:
    """
    Configure the package logger from a StreamConfig.

    Args:
        config: Level and format settings (default: StreamConfig())
        stream: Output stream (default: sys.stdout)
    """
    config = config or StreamConfig()
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(config.log_level)

    # Remove existing handlers
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(config.log_level)
    if config.structured_logging:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
    root_logger.addHandler(handler)
