from typing import TYPE_CHECKING

from ...application.services.camera_data_provider import CameraDataProvider
from ...core.config import Settings
from ...domain.repositories.camera_repository import CameraRepository
from ...infrastructure.notifications.notification_service import NotificationService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CameraProvider:
    """Camera state provider - registers the session's notification sink and data provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register NotificationService and CameraDataProvider as singletons.
        One instance of each per container, i.e. per session.
        """
        settings = container.get(Settings)
        
        if not container.has(NotificationService):
            container.register_singleton(NotificationService, NotificationService())
        
        container.register_singleton(
            CameraDataProvider,
            CameraDataProvider(
                camera_repository=container.get(CameraRepository),
                notification_service=container.get(NotificationService),
                session_user=settings.session_user,
                recent_activity_limit=settings.recent_activity_limit,
                daily_count_days=settings.daily_count_days,
                log_deletions=settings.log_camera_deletions,
            ),
        )
