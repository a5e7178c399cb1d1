"""
Caller-facing handle for a single subscription.
"""

from .observer import Observer


class Subscription:
    """
    Returned by Observable.subscribe.

    Only exposes unsubscribe(); the underlying observer stays private.
    """

    __slots__ = ("_observer",)

    def __init__(self, observer: Observer):
        self._observer = observer

    @property
    def closed(self) -> bool:
        """Whether the subscription has ended."""
        return self._observer.is_unsubscribed

    def unsubscribe(self) -> None:
        """Stop receiving notifications and release the producer's resources."""
        self._observer.unsubscribe()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.unsubscribe()
        return False  # Don't suppress exceptions

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"Subscription(id={self._observer.subscription_id}, {state})"
