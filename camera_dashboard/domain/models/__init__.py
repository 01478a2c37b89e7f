from .camera import Camera, Location
from .activity_log import ActivityLogEntry
from .daily_count import DailyCount

__all__ = [
    "Camera",
    "Location",
    "ActivityLogEntry",
    "DailyCount",
]
