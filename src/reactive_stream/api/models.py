"""
Payload models for the sample request stream.
"""

from datetime import datetime, timezone
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class HttpMethod(str, Enum):
    """Enumeration for supported HTTP methods."""

    GET = "GET"
    POST = "POST"


class HttpCode(IntEnum):
    """Status codes returned by the sample handlers."""

    STATUS_OK = 200
    STATUS_INTERNAL_SERVER_ERROR = 500


class User(BaseModel):
    """User record carried in a request body."""

    name: str
    age: int
    roles: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    is_deleted: bool = False


class Request(BaseModel):
    """Request-like payload pushed through a stream."""

    method: HttpMethod
    host: str
    path: str
    body: Optional[User] = None
    params: Dict[str, Any] = Field(default_factory=dict)


class Status(BaseModel):
    """Status marker returned by a handler."""

    status: HttpCode

    @classmethod
    def ok(cls) -> "Status":
        return cls(status=HttpCode.STATUS_OK)

    @classmethod
    def internal_error(cls) -> "Status":
        return cls(status=HttpCode.STATUS_INTERNAL_SERVER_ERROR)

    @property
    def is_ok(self) -> bool:
        return self.status == HttpCode.STATUS_OK
