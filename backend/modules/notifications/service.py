"""
Notification fan-out service.
"""

import logging
import uuid

from shared.models import normalize_email, utc_now
from modules.users.interfaces import IUserDirectory

from .interfaces import INotificationService, INotificationRepository
from .models import Notification, NotificationType, NotificationFeed, new_post_message

logger = logging.getLogger(__name__)


class NotificationService(INotificationService):
    """
    Creates and reads notifications.

    Fan-out is synchronous and costs one user scan per new post.
    """

    def __init__(
        self,
        repository: INotificationRepository,
        users: IUserDirectory,
    ):
        self._repo = repository
        self._users = users

    async def announce_new_post(
        self,
        author_email: str,
        author_name: str,
        title: str,
    ) -> int:
        """Create one unread notification per user other than the author."""
        author_email = normalize_email(author_email)
        recipients = await self._users.other_member_emails(author_email)
        if not recipients:
            return 0

        now = utc_now()
        message = new_post_message(author_name, title)
        batch = [
            Notification(
                id=str(uuid.uuid4()),
                user_email=email,
                type=NotificationType.NEW_POST,
                message=message,
                read=False,
                created_at=now,
            )
            for email in recipients
        ]
        self._repo.insert_many(batch)
        logger.debug(f"Fanned out new post from {author_email} to {len(batch)} users")
        return len(batch)

    async def list_for_user(self, email: str) -> NotificationFeed:
        notifications = self._repo.list_for_user(normalize_email(email))
        return NotificationFeed(
            notifications=notifications,
            unread_count=sum(1 for n in notifications if not n.read),
        )

    async def mark_all_read(self, email: str) -> int:
        return self._repo.mark_all_read(normalize_email(email))
