"""External service clients for communicating with external systems"""

from .camera_api_client import CameraApiClient

__all__ = [
    "CameraApiClient",
]
