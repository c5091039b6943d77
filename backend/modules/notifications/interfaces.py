"""
Notifications module interfaces.
"""

from typing import Protocol, runtime_checkable

from .models import Notification, NotificationFeed


@runtime_checkable
class INotificationRepository(Protocol):
    """Storage operations for notifications."""

    def insert_many(self, notifications: list[Notification]) -> None:
        """Persist a batch in a single write."""
        ...

    def list_for_user(self, email: str) -> list[Notification]:
        """All notifications for a user, most recent first."""
        ...

    def mark_all_read(self, email: str) -> int:
        """Flip unread notifications to read; returns how many changed."""
        ...


@runtime_checkable
class INotificationService(Protocol):
    """
    Interface for notification operations.

    The posts module calls announce_new_post after a post is created.
    """

    async def announce_new_post(
        self,
        author_email: str,
        author_name: str,
        title: str,
    ) -> int:
        """
        Notify every user except the author about a new post.

        Returns:
            Number of notifications created (0 means no write happened)

        Raises:
            PersistenceError: If the store rejects the batch
        """
        ...

    async def list_for_user(self, email: str) -> NotificationFeed:
        ...

    async def mark_all_read(self, email: str) -> int:
        ...
