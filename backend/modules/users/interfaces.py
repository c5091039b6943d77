"""
Users module interfaces.

Other modules should depend on IUserDirectory, not the concrete implementation.
IUserRepository is the storage seam; the container picks the Supabase or
in-memory implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import User, MembershipTier, ResolvedUser


@runtime_checkable
class IUserRepository(Protocol):
    """Storage operations for user records."""

    def get_by_email(self, email: str) -> Optional[User]:
        ...

    def insert_if_absent(self, user: User) -> bool:
        """
        Insert the user unless one with the same email exists.

        Returns:
            True if this call created the record
        """
        ...

    def set_membership(self, email: str, tier: MembershipTier) -> bool:
        """Returns True if a user matched the email."""
        ...

    def list_emails_except(self, email: str) -> list[str]:
        """Emails of every user other than the given one."""
        ...


@runtime_checkable
class IUserDirectory(Protocol):
    """
    Interface for user directory operations.

    Used by the membership policy (resolve-or-create during posting)
    and by the users routes.
    """

    async def resolve_or_create(
        self,
        email: str,
        name: str = "",
        image: str = "",
    ) -> ResolvedUser:
        """
        Look up a user by email, creating a free-tier user if absent.

        Args:
            email: Identity key
            name: Display name used only when creating
            image: Avatar used only when creating

        Returns:
            ResolvedUser tagged CREATED or EXISTING
        """
        ...

    async def get_user(self, email: str) -> User:
        """
        Raises:
            UserNotFoundError: If no user has this email
        """
        ...

    async def upgrade(self, email: str) -> bool:
        """
        Move a user to the premium tier.

        Returns:
            True if a user matched; False means there was nothing to upgrade
        """
        ...

    async def other_member_emails(self, email: str) -> list[str]:
        """Emails of all users except the given one."""
        ...
