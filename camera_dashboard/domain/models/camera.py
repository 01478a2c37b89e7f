# Standard library imports
from dataclasses import dataclass

# Local application imports
from ..constants import CameraFields


@dataclass(frozen=True)
class Camera:
    """
    Pure domain model for a camera record held in the session.
    
    The identifier is assigned by the remote API; optional fields are
    normalized to empty strings before a Camera is built. Instances are
    immutable: the only way a camera changes is by being replaced on the
    next full fetch.
    """
    camera_id: str
    camera_name: str = ""
    created_at: str = ""
    ipaddress: str = ""
    location_name: str = ""
    
    def __post_init__(self) -> None:
        """Business validations"""
        if not self.camera_id:
            raise ValueError("Camera ID is required")
    
    @property
    def display_name(self) -> str:
        return self.camera_name or CameraFields.UNNAMED


@dataclass(frozen=True)
class Location:
    """A location known to the camera API."""
    location_name: str = ""
    ipaddress: str = ""
