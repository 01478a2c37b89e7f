from .camera_repository import CameraRepository

__all__ = ["CameraRepository"]
