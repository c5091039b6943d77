"""Tests for the user directory service."""

import pytest
from unittest.mock import MagicMock

from modules.users.exceptions import UserNotFoundError
from modules.users.models import MembershipTier, ResolutionOutcome, User
from modules.users.repository import InMemoryUserRepository
from modules.users.service import UserDirectory
from shared.models import utc_now


class TestResolveOrCreate:
    @pytest.fixture
    def directory(self):
        """Create a fresh directory for each test."""
        return UserDirectory(InMemoryUserRepository())

    @pytest.mark.asyncio
    async def test_creates_free_user(self, directory, alice_email):
        """First reference to an email creates a free-tier user."""
        resolved = await directory.resolve_or_create(alice_email, "Alice", "https://img/a.png")

        assert resolved.created is True
        assert resolved.outcome == ResolutionOutcome.CREATED
        assert resolved.user.email == alice_email
        assert resolved.user.name == "Alice"
        assert resolved.user.image == "https://img/a.png"
        assert resolved.user.membership == MembershipTier.FREE

    @pytest.mark.asyncio
    async def test_returns_existing_user(self, directory, alice_email):
        """Later references return the stored user unchanged."""
        await directory.resolve_or_create(alice_email, "Alice")
        resolved = await directory.resolve_or_create(alice_email, "Someone Else")

        assert resolved.created is False
        assert resolved.outcome == ResolutionOutcome.EXISTING
        assert resolved.user.name == "Alice"

    @pytest.mark.asyncio
    async def test_repeated_calls_keep_one_record(self, directory, alice_email, bob_email):
        for _ in range(3):
            await directory.resolve_or_create(alice_email)
        await directory.resolve_or_create(bob_email)

        assert await directory.other_member_emails(bob_email) == [alice_email]

    @pytest.mark.asyncio
    async def test_lost_insert_race_returns_stored_user(self, alice_email):
        """A concurrent insert for the same email yields the stored record."""
        stored = User(
            email=alice_email,
            name="Winner",
            membership=MembershipTier.PREMIUM,
            created_at=utc_now(),
        )
        repo = MagicMock()
        repo.get_by_email.side_effect = [None, stored]
        repo.insert_if_absent.return_value = False

        resolved = await UserDirectory(repo).resolve_or_create(alice_email, "Loser")

        assert resolved.created is False
        assert resolved.user.name == "Winner"
        assert resolved.user.membership == MembershipTier.PREMIUM

    @pytest.mark.asyncio
    async def test_email_case_does_not_split_identity(self, directory, alice_email):
        first = await directory.resolve_or_create("Alice@Example.COM", "Alice")
        second = await directory.resolve_or_create(alice_email)

        assert first.created is True
        assert first.user.email == alice_email
        assert second.created is False
        assert await directory.upgrade("ALICE@EXAMPLE.COM") is True
        assert (await directory.get_user(alice_email)).membership == MembershipTier.PREMIUM


class TestGetUser:
    @pytest.mark.asyncio
    async def test_get_existing(self, alice_email):
        directory = UserDirectory(InMemoryUserRepository())
        await directory.resolve_or_create(alice_email, "Alice")

        user = await directory.get_user(alice_email)
        assert user.name == "Alice"

    @pytest.mark.asyncio
    async def test_get_unknown_raises(self):
        directory = UserDirectory(InMemoryUserRepository())
        with pytest.raises(UserNotFoundError) as exc_info:
            await directory.get_user("ghost@example.com")
        assert exc_info.value.details["email"] == "ghost@example.com"
        assert exc_info.value.code == "USER_NOT_FOUND"


class TestUpgrade:
    @pytest.fixture
    def directory(self):
        return UserDirectory(InMemoryUserRepository())

    @pytest.mark.asyncio
    async def test_upgrade_sets_premium(self, directory, alice_email):
        await directory.resolve_or_create(alice_email)

        assert await directory.upgrade(alice_email) is True
        user = await directory.get_user(alice_email)
        assert user.membership == MembershipTier.PREMIUM

    @pytest.mark.asyncio
    async def test_upgrade_is_idempotent(self, directory, alice_email):
        await directory.resolve_or_create(alice_email)
        await directory.upgrade(alice_email)

        assert await directory.upgrade(alice_email) is True
        user = await directory.get_user(alice_email)
        assert user.membership == MembershipTier.PREMIUM

    @pytest.mark.asyncio
    async def test_upgrade_unknown_is_noop(self, directory):
        """Upgrading an email with no user creates nothing."""
        assert await directory.upgrade("ghost@example.com") is False
        with pytest.raises(UserNotFoundError):
            await directory.get_user("ghost@example.com")


class TestOtherMemberEmails:
    @pytest.mark.asyncio
    async def test_excludes_given_email(self, alice_email, bob_email):
        directory = UserDirectory(InMemoryUserRepository())
        await directory.resolve_or_create(alice_email)
        await directory.resolve_or_create(bob_email)
        await directory.resolve_or_create("carol@example.com")

        others = await directory.other_member_emails(alice_email)
        assert sorted(others) == [bob_email, "carol@example.com"]

    @pytest.mark.asyncio
    async def test_empty_when_alone(self, alice_email):
        directory = UserDirectory(InMemoryUserRepository())
        await directory.resolve_or_create(alice_email)
        assert await directory.other_member_emails(alice_email) == []
