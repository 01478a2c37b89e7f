"""Transient user notifications"""

from .notification_service import Notification, NotificationLevel, NotificationService

__all__ = [
    "Notification",
    "NotificationLevel",
    "NotificationService",
]
