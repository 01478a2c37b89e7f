# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.camera_dto import NotificationResponse
from ...infrastructure.notifications.notification_service import NotificationService
from .dependencies import get_notification_service


router = APIRouter(tags=["notifications"])


@router.get("", response_model=List[NotificationResponse])
async def drain_notifications(
    notification_service: NotificationService = Depends(get_notification_service),
) -> List[NotificationResponse]:
    """
    Return pending transient notifications and clear them
    
    Each notification is delivered once; views poll this after an action.
    """
    return [
        NotificationResponse(
            level=notification.level.value,
            message=notification.message,
            created_at=notification.created_at,
            detail=notification.detail,
        )
        for notification in notification_service.drain()
    ]
