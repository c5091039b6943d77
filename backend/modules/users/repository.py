"""
User repositories.

SupabaseUserRepository persists to the ``users`` table (primary key: email).
InMemoryUserRepository keeps records in a dict for development and tests.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import User, MembershipTier


class SupabaseUserRepository(BaseRepository[User]):
    """Repository for the ``users`` table."""

    def get_by_email(self, email: str) -> Optional[User]:
        with self._guard("get user"):
            result = self._db.table("users").select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def insert_if_absent(self, user: User) -> bool:
        """
        Insert relying on the unique email key.

        ``ignore_duplicates`` turns a conflicting insert into a no-op,
        in which case PostgREST returns no rows.
        """
        data = {
            "email": user.email,
            "name": user.name,
            "image": user.image,
            "membership": user.membership.value,
            "created_at": user.created_at.isoformat(),
        }
        with self._guard("create user"):
            result = self._db.table("users").upsert(
                data, on_conflict="email", ignore_duplicates=True
            ).execute()
        return bool(result.data)

    def set_membership(self, email: str, tier: MembershipTier) -> bool:
        with self._guard("update membership"):
            result = self._db.table("users").update(
                {"membership": tier.value}
            ).eq("email", email).execute()
        return bool(result.data)

    def list_emails_except(self, email: str) -> list[str]:
        with self._guard("list users"):
            result = self._db.table("users").select("email").neq("email", email).execute()
        return [row["email"] for row in result.data]

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            email=data["email"],
            name=data.get("name") or "",
            image=data.get("image") or "",
            membership=MembershipTier(data.get("membership", "free")),
            created_at=data["created_at"],
        )


class InMemoryUserRepository:
    """Dict-backed user storage."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def get_by_email(self, email: str) -> Optional[User]:
        user = self._users.get(email)
        return user.model_copy() if user else None

    def insert_if_absent(self, user: User) -> bool:
        if user.email in self._users:
            return False
        self._users[user.email] = user.model_copy()
        return True

    def set_membership(self, email: str, tier: MembershipTier) -> bool:
        user = self._users.get(email)
        if user is None:
            return False
        self._users[email] = user.model_copy(update={"membership": tier})
        return True

    def list_emails_except(self, email: str) -> list[str]:
        return [e for e in self._users if e != email]
