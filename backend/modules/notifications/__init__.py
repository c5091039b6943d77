"""
Notifications module.

Generates pull-based notifications when new posts are published.

Public API:
- INotificationService: Interface for notification operations
- Notification, NotificationType, NotificationFeed: Data models
"""

from .interfaces import INotificationService, INotificationRepository
from .models import (
    Notification,
    NotificationType,
    NotificationFeed,
    MarkReadResponse,
    new_post_message,
)

__all__ = [
    # Interfaces
    "INotificationService",
    "INotificationRepository",
    # Models
    "Notification",
    "NotificationType",
    "NotificationFeed",
    "MarkReadResponse",
    "new_post_message",
]
