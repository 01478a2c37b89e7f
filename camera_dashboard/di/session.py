# Standard library imports
import logging
from typing import Optional

# External package imports
import httpx

# Local application imports
from ..application.services.camera_data_provider import CameraDataProvider
from ..core.config import Settings
from ..infrastructure.http_client_factory import close_http_client
from ..infrastructure.notifications.notification_service import NotificationService
from .container import DIContainer

logger = logging.getLogger(__name__)


class DashboardSession:
    """
    Owns the camera state for one dashboard session.
    
    Created at session start, it builds its own container (so nothing is
    shared between sessions), performs the initial camera fetch and, on
    close, stops the provider and releases the HTTP client.
    
    Usage:
        async with DashboardSession() as session:
            await session.provider.add_camera({...})
    """
    
    def __init__(
        self,
        settings: Optional[Settings] = None,
        container: Optional[DIContainer] = None,
        initial_fetch: bool = True,
    ) -> None:
        self.container = container or DIContainer(settings=settings)
        self.initial_fetch = initial_fetch
        self._started = False
    
    @property
    def provider(self) -> CameraDataProvider:
        return self.container.get(CameraDataProvider)
    
    @property
    def notifications(self) -> NotificationService:
        return self.container.get(NotificationService)
    
    async def start(self) -> "DashboardSession":
        if self._started:
            return self
        self._started = True
        logger.info("Dashboard session started")
        if self.initial_fetch:
            await self.provider.fetch_cameras()
        return self
    
    async def close(self) -> None:
        self.provider.close()
        if self.container.has(httpx.AsyncClient):
            await close_http_client(self.container.get(httpx.AsyncClient))
        logger.info("Dashboard session closed")
    
    async def __aenter__(self) -> "DashboardSession":
        return await self.start()
    
    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
