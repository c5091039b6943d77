"""
Notifications module data models.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from shared.models import ApiModel


class NotificationType(str, Enum):
    """Kinds of notification. Only new posts generate notifications today."""

    NEW_POST = "new_post"


class Notification(ApiModel):
    """A notification addressed to one user."""

    id: str = Field(..., description="Notification ID (UUID)")
    user_email: str = Field(..., description="Recipient")
    type: NotificationType = Field(default=NotificationType.NEW_POST)
    message: str = Field(..., description="Human-readable text")
    read: bool = Field(default=False)
    created_at: datetime = Field(..., description="Creation time")


class NotificationFeed(ApiModel):
    """Response for GET /notifications/{email}."""

    notifications: list[Notification] = Field(
        ..., description="Most recent first"
    )
    unread_count: int = Field(..., ge=0)


class MarkReadResponse(ApiModel):
    """Response for PUT /notifications/{email}/read."""

    message: str
    updated: int = Field(..., ge=0, description="Notifications flipped to read")


def new_post_message(author_name: str, title: str) -> str:
    """Text announcing a new post."""
    return f'{author_name} published a new post: "{title}"'
