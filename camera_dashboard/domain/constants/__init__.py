from .camera_fields import ActivityEvents, CameraFields

__all__ = [
    "ActivityEvents",
    "CameraFields",
]
