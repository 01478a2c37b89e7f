from .camera_dto import (
    ActivityLogResponse,
    AddCameraRequest,
    CameraRecord,
    CameraResponse,
    DailyCameraCountResponse,
    DashboardSummaryResponse,
    LocationRecord,
    NotificationResponse,
    parse_add_camera_form,
)

__all__ = [
    "ActivityLogResponse",
    "AddCameraRequest",
    "CameraRecord",
    "CameraResponse",
    "DailyCameraCountResponse",
    "DashboardSummaryResponse",
    "LocationRecord",
    "NotificationResponse",
    "parse_add_camera_form",
]
