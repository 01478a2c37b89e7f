from .http_provider import HttpProvider
from .camera_provider import CameraProvider


__all__ = [
    "HttpProvider",
    "CameraProvider",
]
