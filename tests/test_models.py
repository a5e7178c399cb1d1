"""Tests for the sample payload models."""

import pytest
from pydantic import ValidationError

from reactive_stream.api.models import HttpCode, HttpMethod, Request, Status, User


class TestHttpEnums:
    """Test HttpMethod and HttpCode enums."""

    def test_method_values(self):
        """Test that HttpMethod has correct values."""
        assert HttpMethod.GET == "GET"
        assert HttpMethod.POST == "POST"
        assert len(HttpMethod) == 2

    def test_code_values(self):
        """Test that HttpCode has correct values."""
        assert HttpCode.STATUS_OK == 200
        assert HttpCode.STATUS_INTERNAL_SERVER_ERROR == 500


class TestUser:
    """Test User model."""

    def test_defaults(self):
        """Test that optional user fields get defaults."""
        user = User(name="User Name", age=26)
        assert user.roles == []
        assert user.is_deleted is False
        assert user.created_at.tzinfo is not None

    def test_invalid_age(self):
        """Test that a non-numeric age is rejected."""
        with pytest.raises(ValidationError):
            User(name="User Name", age="old")


class TestRequest:
    """Test Request model."""

    def test_get_request_without_body(self):
        """Test a GET request with params and no body."""
        request = Request(method="GET", host="service.example", path="user", params={"id": "3f5h67s4s"})
        assert request.method == HttpMethod.GET
        assert request.body is None
        assert request.params == {"id": "3f5h67s4s"}

    def test_post_request_with_body(self, sample_user):
        """Test a POST request carrying a user."""
        request = Request(method=HttpMethod.POST, host="service.example", path="user", body=sample_user)
        assert request.body.roles == ["user", "admin"]
        assert request.params == {}

    def test_invalid_method(self):
        """Test that unsupported methods are rejected."""
        with pytest.raises(ValidationError):
            Request(method="DELETE", host="service.example", path="user")


class TestStatus:
    """Test Status model."""

    def test_ok(self):
        """Test the ok status marker."""
        assert Status.ok().status == HttpCode.STATUS_OK
        assert Status.ok().is_ok is True

    def test_internal_error(self):
        """Test the error status marker."""
        status = Status.internal_error()
        assert status.status == HttpCode.STATUS_INTERNAL_SERVER_ERROR
        assert status.is_ok is False
