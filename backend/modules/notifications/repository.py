"""
Notification repositories.

SupabaseNotificationRepository persists to the ``notifications`` table.
InMemoryNotificationRepository is used for development and tests.
"""

from typing import Any

from shared.repository import BaseRepository
from .models import Notification, NotificationType


class SupabaseNotificationRepository(BaseRepository[Notification]):
    """Repository for the ``notifications`` table."""

    def insert_many(self, notifications: list[Notification]) -> None:
        rows = [
            {
                "id": n.id,
                "user_email": n.user_email,
                "type": n.type.value,
                "message": n.message,
                "read": n.read,
                "created_at": n.created_at.isoformat(),
            }
            for n in notifications
        ]
        with self._guard("insert notifications"):
            self._db.table("notifications").insert(rows).execute()

    def list_for_user(self, email: str) -> list[Notification]:
        with self._guard("list notifications"):
            result = self._db.table("notifications").select("*").eq(
                "user_email", email
            ).order("created_at", desc=True).execute()
        return [self._map_to_notification(row) for row in result.data]

    def mark_all_read(self, email: str) -> int:
        with self._guard("mark notifications read"):
            result = self._db.table("notifications").update(
                {"read": True}
            ).eq("user_email", email).eq("read", False).execute()
        return len(result.data)

    def _map_to_notification(self, data: dict[str, Any]) -> Notification:
        """Map database row to Notification model."""
        return Notification(
            id=str(data["id"]),
            user_email=data["user_email"],
            type=NotificationType(data.get("type", "new_post")),
            message=data["message"],
            read=data.get("read", False),
            created_at=data["created_at"],
        )


class InMemoryNotificationRepository:
    """List-backed notification storage, kept in insertion order."""

    def __init__(self) -> None:
        self._notifications: list[Notification] = []

    def insert_many(self, notifications: list[Notification]) -> None:
        self._notifications.extend(n.model_copy() for n in notifications)

    def list_for_user(self, email: str) -> list[Notification]:
        return [
            n.model_copy()
            for n in reversed(self._notifications)
            if n.user_email == email
        ]

    def mark_all_read(self, email: str) -> int:
        updated = 0
        for i, n in enumerate(self._notifications):
            if n.user_email == email and not n.read:
                self._notifications[i] = n.model_copy(update={"read": True})
                updated += 1
        return updated
