"""
Sample wiring: push a fixed batch of requests through an Observable.
"""

import logging
from typing import Any, Callable, List, Optional, Sequence

from .api.models import HttpMethod, Request, Status, User
from .core.config import StreamConfig
from .core.handlers import Handlers
from .core.observable import Observable

logger = logging.getLogger(__name__)


def build_user() -> User:
    """Build the sample user attached to POST requests."""
    return User(name="User Name", age=26, roles=["user", "admin"])


def build_requests() -> List[Request]:
    """Build the sample request batch."""
    return [
        Request(
            method=HttpMethod.POST,
            host="service.example",
            path="user",
            body=build_user(),
        ),
        Request(
            method=HttpMethod.GET,
            host="service.example",
            path="user",
            params={"id": "3f5h67s4s"},
        ),
    ]


def handle_request(request: Request) -> Status:
    """Answer a request with an ok status."""
    logger.info("Handling %s %s/%s", request.method.value, request.host, request.path)
    return Status.ok()


def handle_error(error: Any) -> Status:
    """Log a stream failure and answer with an internal error status."""
    logger.error("Request stream failed: %r", error)
    return Status.internal_error()


def handle_complete() -> None:
    """Log the end of the request stream."""
    logger.info("complete")


def _collecting(handler: Callable[[Any], Status], results: List[Status]) -> Callable[[Any], None]:
    def wrapper(value: Any) -> None:
        results.append(handler(value))
    return wrapper


def run_demo(
    requests: Optional[Sequence[Request]] = None,
    config: Optional[StreamConfig] = None,
) -> List[Status]:
    """
    Stream requests through the sample handlers.

    Args:
        requests: Requests to stream (default: build_requests())
        config: Optional StreamConfig for the observable

    Returns:
        The statuses returned by the handlers, in delivery order.
    """
    if requests is None:
        requests = build_requests()

    results: List[Status] = []
    requests_stream = Observable.from_sequence(requests, config)
    subscription = requests_stream.subscribe(
        Handlers(
            next=_collecting(handle_request, results),
            error=_collecting(handle_error, results),
            complete=handle_complete,
        )
    )
    subscription.unsubscribe()
    return results
