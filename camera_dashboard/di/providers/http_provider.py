from typing import TYPE_CHECKING

import httpx

from ...core.config import Settings
from ...domain.repositories.camera_repository import CameraRepository
from ...infrastructure.external.camera_api_client import CameraApiClient
from ...infrastructure.http_client_factory import create_http_client

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class HttpProvider:
    """Registers the session HTTP client and the remote camera repository"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the HTTP client and CameraRepository as singletons.
        An AsyncClient registered beforehand (tests) is kept as is.
        """
        settings = container.get(Settings)
        
        if not container.has(httpx.AsyncClient):
            container.register_singleton(httpx.AsyncClient, create_http_client(settings))
        
        if not container.has(CameraRepository):
            container.register_singleton(
                CameraRepository,
                CameraApiClient(
                    http_client=container.get(httpx.AsyncClient),
                    base_url=settings.camera_api_base_url,
                ),
            )
