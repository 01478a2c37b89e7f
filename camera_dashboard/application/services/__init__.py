from .camera_data_provider import CameraDataProvider
from .daily_counts import calculate_daily_camera_counts, last_n_days

__all__ = [
    "CameraDataProvider",
    "calculate_daily_camera_counts",
    "last_n_days",
]
