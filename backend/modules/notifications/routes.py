"""
Notification API endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_notification_service

from .interfaces import INotificationService
from .models import NotificationFeed, MarkReadResponse

router = APIRouter()


@router.get("/{email}", response_model=NotificationFeed)
async def list_notifications(
    email: str,
    service: INotificationService = Depends(get_notification_service),
) -> NotificationFeed:
    """List a user's notifications, most recent first, with the unread count."""
    return await service.list_for_user(email)


@router.put("/{email}/read", response_model=MarkReadResponse)
async def mark_notifications_read(
    email: str,
    service: INotificationService = Depends(get_notification_service),
) -> MarkReadResponse:
    """Mark every unread notification of the user as read."""
    updated = await service.mark_all_read(email)
    return MarkReadResponse(message="Notifications marked as read", updated=updated)
