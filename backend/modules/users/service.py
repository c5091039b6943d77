"""
User directory service.

Resolves users by email (creating them on first reference) and applies
membership upgrades.
"""

import logging

from shared.models import normalize_email, utc_now

from .interfaces import IUserDirectory, IUserRepository
from .models import User, MembershipTier, ResolutionOutcome, ResolvedUser
from .exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class UserDirectory(IUserDirectory):
    """Implementation of IUserDirectory on top of an IUserRepository."""

    def __init__(self, repository: IUserRepository):
        self._repo = repository

    async def resolve_or_create(
        self,
        email: str,
        name: str = "",
        image: str = "",
    ) -> ResolvedUser:
        """Find the user, or create a free-tier one."""
        email = normalize_email(email)
        existing = self._repo.get_by_email(email)
        if existing is not None:
            return ResolvedUser(user=existing, outcome=ResolutionOutcome.EXISTING)

        user = User(
            email=email,
            name=name,
            image=image,
            membership=MembershipTier.FREE,
            created_at=utc_now(),
        )
        if self._repo.insert_if_absent(user):
            logger.info(f"Created user {email}")
            return ResolvedUser(user=user, outcome=ResolutionOutcome.CREATED)

        # Lost a race with a concurrent insert for the same email
        stored = self._repo.get_by_email(email)
        return ResolvedUser(user=stored or user, outcome=ResolutionOutcome.EXISTING)

    async def get_user(self, email: str) -> User:
        email = normalize_email(email)
        user = self._repo.get_by_email(email)
        if user is None:
            raise UserNotFoundError(email)
        return user

    async def upgrade(self, email: str) -> bool:
        """Set membership to premium. Unknown emails are a no-op."""
        email = normalize_email(email)
        matched = self._repo.set_membership(email, MembershipTier.PREMIUM)
        if matched:
            logger.info(f"Upgraded {email} to premium")
        else:
            logger.info(f"Upgrade requested for unknown user {email}, nothing to do")
        return matched

    async def other_member_emails(self, email: str) -> list[str]:
        return self._repo.list_emails_except(normalize_email(email))
