"""
Observer: the per-subscription gate between a producer and its handlers.
"""

import itertools
import logging
from enum import Enum
from typing import Any, Callable, Optional

from ..utils.logging import log_stream_event, subscription_logger
from .handlers import Handlers

UnsubscribeHook = Callable[[], None]

_subscription_ids = itertools.count(1)


class ObserverState(str, Enum):
    """Observer lifecycle states."""
    ACTIVE = "active"
    UNSUBSCRIBED = "unsubscribed"  # Terminal


class Observer:
    """
    Delivers notifications to a subscriber's handlers until the stream ends.

    States:
    - ACTIVE: next() reaches the handler, error()/complete() terminate
    - UNSUBSCRIBED: every notification is dropped, nothing leaves this state

    The unsubscribe hook (the producer's cleanup routine) runs at most once,
    whichever path ends the subscription.
    """

    def __init__(
        self,
        handlers: Optional[Handlers] = None,
        unsubscribe_hook: Optional[UnsubscribeHook] = None,
    ):
        self.handlers = handlers or Handlers()
        self.subscription_id = next(_subscription_ids)
        self._is_unsubscribed = False
        self._hook_ran = False
        self._unsubscribe_hook = unsubscribe_hook
        self._handler_fault: Optional[BaseException] = None
        self.logger = subscription_logger(self)

    @property
    def is_unsubscribed(self) -> bool:
        """Whether the observer has reached its terminal state."""
        return self._is_unsubscribed

    @property
    def state(self) -> ObserverState:
        """Current lifecycle state."""
        return ObserverState.UNSUBSCRIBED if self._is_unsubscribed else ObserverState.ACTIVE

    def next(self, value: Any) -> None:
        """Deliver a value to the next handler while active."""
        if self._is_unsubscribed:
            self._log_dropped("next")
            return
        if self.handlers.next is not None:
            self._deliver(self.handlers.next, value)

    def error(self, err: Any) -> None:
        """
        Deliver a terminal error, then unsubscribe.

        Unsubscription happens even if the error handler raises; the
        handler's exception is propagated to the caller.
        """
        if self._is_unsubscribed:
            self._log_dropped("error")
            return
        log_stream_event(self.logger, logging.DEBUG, "Stream errored", channel="error", error=repr(err))
        try:
            if self.handlers.error is not None:
                self._deliver(self.handlers.error, err)
        finally:
            self.unsubscribe()

    def complete(self) -> None:
        """Signal successful termination, then unsubscribe."""
        if self._is_unsubscribed:
            self._log_dropped("complete")
            return
        log_stream_event(self.logger, logging.DEBUG, "Stream completed", channel="complete")
        try:
            if self.handlers.complete is not None:
                self._deliver(self.handlers.complete)
        finally:
            self.unsubscribe()

    def unsubscribe(self) -> None:
        """
        Stop delivery and run the cleanup hook.

        The hook runs at most once. A hook stored after the observer already
        terminated is run by the next call, so a later unsubscribe still
        releases it.
        """
        self._is_unsubscribed = True
        self._run_hook()

    def set_unsubscribe_hook(self, hook: Optional[UnsubscribeHook]) -> None:
        """
        Store the producer's cleanup routine.

        A producer that finishes synchronously has already terminated the
        observer by the time its cleanup is known. The hook is then held
        until the subscription handle is unsubscribed.

        Args:
            hook: Cleanup routine returned by the producer, or None.

        Raises:
            TypeError: If hook is neither None nor callable.
        """
        if hook is not None and not callable(hook):
            raise TypeError(f"Producer must return a callable or None, got {type(hook).__name__}")
        self._unsubscribe_hook = hook

    @property
    def cleanup_pending(self) -> bool:
        """Whether a stored cleanup hook has not run yet."""
        return self._unsubscribe_hook is not None and not self._hook_ran

    def raised_by_handler(self, exc: BaseException) -> bool:
        """Whether exc was raised by one of this observer's handlers."""
        return exc is self._handler_fault

    def _deliver(self, callback: Callable[..., Any], *args: Any) -> None:
        try:
            callback(*args)
        except Exception as exc:
            self._handler_fault = exc
            raise

    def _run_hook(self) -> None:
        if not self.cleanup_pending:
            return
        self._hook_ran = True
        log_stream_event(self.logger, logging.DEBUG, "Running cleanup")
        self._unsubscribe_hook()

    def _log_dropped(self, channel: str) -> None:
        log_stream_event(self.logger, logging.DEBUG, "Dropped notification after unsubscribe", channel=channel)

    def __repr__(self) -> str:
        return f"Observer(subscription_id={self.subscription_id}, state={self.state.value})"
