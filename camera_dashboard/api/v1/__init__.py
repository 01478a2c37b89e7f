from .camera_controller import router as camera_router
from .dashboard_controller import router as dashboard_router
from .location_controller import router as location_router
from .notifications_controller import router as notifications_router


__all__ = ["camera_router", "dashboard_router", "location_router", "notifications_router"]
