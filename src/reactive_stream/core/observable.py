"""
Cold observable: every subscription re-runs the bound producer.
"""

import logging
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from ..utils.logging import log_stream_event
from .config import StreamConfig
from .handlers import CompleteHandler, ErrorHandler, Handlers, NextHandler
from .observer import Observer, UnsubscribeHook
from .subscription import Subscription

Producer = Callable[[Observer], Optional[UnsubscribeHook]]

logger = logging.getLogger(__name__)


class Observable:
    """
    Binds a producer routine and materializes independent subscriptions.

    The producer is called once per subscribe(), synchronously, with a fresh
    Observer. It returns a cleanup routine (or None) that runs when the
    subscription ends.
    """

    __slots__ = ("_producer", "_config")

    def __init__(self, producer: Producer, config: Optional[StreamConfig] = None):
        if not callable(producer):
            raise TypeError(f"Producer must be callable, got {type(producer).__name__}")
        self._producer = producer
        self._config = config or StreamConfig()

    @property
    def config(self) -> StreamConfig:
        return self._config

    @classmethod
    def from_sequence(cls, values: Iterable[Any], config: Optional[StreamConfig] = None) -> "Observable":
        """
        Create an observable that emits each value in order, then completes.

        The values are copied at construction, so every subscription
        replays the same elements even if an iterator was passed in.

        Args:
            values: Finite iterable of payload values.
            config: Optional StreamConfig for the new observable.

        Returns:
            An Observable over a snapshot of values.
        """
        snapshot = tuple(values)

        def produce(observer: Observer) -> UnsubscribeHook:
            for value in snapshot:
                observer.next(value)
            observer.complete()

            def cleanup() -> None:
                logger.debug("unsubscribed")

            return cleanup

        return cls(produce, config)

    def subscribe(
        self,
        handlers: Union[Handlers, Mapping[str, Any], None] = None,
        *,
        on_next: Optional[NextHandler] = None,
        on_error: Optional[ErrorHandler] = None,
        on_complete: Optional[CompleteHandler] = None,
    ) -> Subscription:
        """
        Subscribe to the stream.

        Args:
            handlers: Handlers record or a mapping with next/error/complete.
            on_next: Keyword override for the next handler.
            on_error: Keyword override for the error handler.
            on_complete: Keyword override for the complete handler.

        Returns:
            A Subscription handle exposing unsubscribe().

        Raises:
            Exception: Whatever a handler raised while the producer ran,
                unchanged. Whatever the producer itself raised, after it was
                delivered through the error channel, unless
                config.raise_producer_errors is False.
        """
        resolved = Handlers.coerce(handlers).with_overrides(on_next, on_error, on_complete)
        observer = Observer(resolved)
        log_stream_event(observer.logger, logging.DEBUG, "Subscribing")

        try:
            cleanup = self._producer(observer)
        except Exception as exc:
            if observer.raised_by_handler(exc):
                log_stream_event(observer.logger, logging.DEBUG, "Handler raised during subscribe", error=repr(exc))
                raise
            log_stream_event(
                observer.logger,
                logging.WARNING,
                "Producer raised, terminating subscription",
                error=repr(exc),
            )
            observer.error(exc)
            if self._config.raise_producer_errors:
                raise
            return Subscription(observer)

        observer.set_unsubscribe_hook(cleanup)
        return Subscription(observer)
