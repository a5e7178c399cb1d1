"""
Test fixtures for reactive streams.
"""

from typing import Any, Dict, List

import pytest

from reactive_stream.api.models import HttpMethod, Request, User
from reactive_stream.core.handlers import Handlers


class Recorder:
    """Collects every notification a subscriber receives."""

    def __init__(self) -> None:
        self.values: List[Any] = []
        self.errors: List[Any] = []
        self.completions = 0

    def on_next(self, value: Any) -> None:
        self.values.append(value)

    def on_error(self, err: Any) -> None:
        self.errors.append(err)

    def on_complete(self) -> None:
        self.completions += 1

    @property
    def handlers(self) -> Handlers:
        return Handlers(next=self.on_next, error=self.on_error, complete=self.on_complete)

    @property
    def handler_dict(self) -> Dict[str, Any]:
        return {"next": self.on_next, "error": self.on_error, "complete": self.on_complete}


class CleanupCounter:
    """Cleanup routine that counts how often it ran."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.fixture
def recorder() -> Recorder:
    """Fixture providing a fresh notification recorder."""
    return Recorder()


@pytest.fixture
def other_recorder() -> Recorder:
    """Fixture providing a second, independent recorder."""
    return Recorder()


@pytest.fixture
def cleanup() -> CleanupCounter:
    """Fixture providing a counting cleanup routine."""
    return CleanupCounter()


@pytest.fixture
def sample_user() -> User:
    """Fixture providing a sample user."""
    return User(name="User Name", age=26, roles=["user", "admin"])


@pytest.fixture
def sample_requests(sample_user) -> List[Request]:
    """Fixture providing a POST and a GET request."""
    return [
        Request(method=HttpMethod.POST, host="service.example", path="user", body=sample_user),
        Request(method=HttpMethod.GET, host="service.example", path="user", params={"id": "3f5h67s4s"}),
    ]
