"""Tests for users module models."""

import pytest
from pydantic import ValidationError

from modules.users.models import (
    MembershipTier,
    RegisterUserRequest,
    ResolutionOutcome,
    ResolvedUser,
    User,
)
from shared.models import utc_now


class TestUser:
    def test_defaults_to_free(self):
        user = User(email="alice@example.com", created_at=utc_now())
        assert user.membership == MembershipTier.FREE
        assert user.name == ""
        assert user.image == ""

    def test_serializes_camel_case(self):
        user = User(email="alice@example.com", created_at=utc_now())
        data = user.model_dump(mode="json", by_alias=True)
        assert "createdAt" in data
        assert data["membership"] == "free"


class TestResolvedUser:
    def test_created_flag(self):
        user = User(email="alice@example.com", created_at=utc_now())
        assert ResolvedUser(user=user, outcome=ResolutionOutcome.CREATED).created is True
        assert ResolvedUser(user=user, outcome=ResolutionOutcome.EXISTING).created is False


class TestRegisterUserRequest:
    def test_valid(self):
        request = RegisterUserRequest(email="alice@example.com", name="Alice")
        assert request.image == ""

    def test_rejects_invalid_email(self):
        with pytest.raises(ValidationError):
            RegisterUserRequest(email="not-an-email")
