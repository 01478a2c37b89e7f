# External package imports
from fastapi import Depends, HTTPException, Request, status

# Local application imports
from ...application.services.camera_data_provider import CameraDataProvider
from ...di.session import DashboardSession
from ...infrastructure.notifications.notification_service import NotificationService


def get_session(request: Request) -> DashboardSession:
    """
    FastAPI dependency returning the session owned by the running application
    
    Raises:
        HTTPException: 503 if no session is active
    """
    session = getattr(request.app.state, "session", None)
    if session is None or session.provider.closed:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Dashboard session is not available"
        )
    return session


def get_camera_provider(
    session: DashboardSession = Depends(get_session),
) -> CameraDataProvider:
    return session.provider


def get_notification_service(
    session: DashboardSession = Depends(get_session),
) -> NotificationService:
    return session.notifications
