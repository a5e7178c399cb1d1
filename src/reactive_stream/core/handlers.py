"""
Optional callback triple supplied by a subscriber.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping, Optional, Union

NextHandler = Callable[[Any], Any]
ErrorHandler = Callable[[Any], Any]
CompleteHandler = Callable[[], Any]

HANDLER_SLOTS = ("next", "error", "complete")


@dataclass(frozen=True)
class Handlers:
    """
    Callbacks for the three notification channels.

    Every slot is optional; a missing slot means the channel is a no-op.
    Whatever ``next`` or ``error`` return is ignored by the stream.
    """

    next: Optional[NextHandler] = None
    error: Optional[ErrorHandler] = None
    complete: Optional[CompleteHandler] = None

    def __post_init__(self) -> None:
        for slot in HANDLER_SLOTS:
            callback = getattr(self, slot)
            if callback is not None and not callable(callback):
                raise TypeError(f"Handler '{slot}' must be callable, got {type(callback).__name__}")

    @classmethod
    def coerce(cls, value: Union["Handlers", Mapping[str, Any], None]) -> "Handlers":
        """
        Build a Handlers record from whatever the subscriber passed in.

        Args:
            value: None, an existing Handlers instance, or a mapping with any
                subset of the keys ``next``, ``error`` and ``complete``.

        Returns:
            A Handlers instance.

        Raises:
            ValueError: If the mapping has keys other than the three slots.
            TypeError: If a slot is not callable or value has an unsupported type.
        """
        if value is None:
            return cls()
        if isinstance(value, Handlers):
            return value
        if isinstance(value, Mapping):
            unknown = set(value) - set(HANDLER_SLOTS)
            if unknown:
                raise ValueError(f"Unknown handler slots: {', '.join(sorted(map(repr, unknown)))}")
            return cls(**value)
        raise TypeError(f"Cannot build handlers from {type(value).__name__}")

    def with_overrides(
        self,
        on_next: Optional[NextHandler] = None,
        on_error: Optional[ErrorHandler] = None,
        on_complete: Optional[CompleteHandler] = None,
    ) -> "Handlers":
        """Return a copy with any supplied keyword callbacks replacing their slot."""
        overrides = {
            slot: callback
            for slot, callback in zip(HANDLER_SLOTS, (on_next, on_error, on_complete))
            if callback is not None
        }
        if not overrides:
            return self
        return replace(self, **overrides)
