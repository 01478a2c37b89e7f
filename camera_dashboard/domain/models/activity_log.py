# Standard library imports
from dataclasses import dataclass


@dataclass(frozen=True)
class ActivityLogEntry:
    """
    Session-local audit note written after a confirmed camera mutation.
    
    camera_name is a snapshot taken when the entry is created, so the entry
    stays readable after the camera itself is gone.
    """
    camera_id: str
    camera_name: str
    created_at: str
    event: str
    created_by: str
