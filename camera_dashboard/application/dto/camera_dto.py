# Standard library imports
import datetime
from typing import Any, Dict, List, Mapping, Optional, Union

# External package imports
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# Local application imports
from ...core.exceptions import CameraValidationError
from ...domain.models import ActivityLogEntry, Camera, DailyCount, Location
from ...utils.validation import has_min_length, is_valid_ipv4

MIN_FIELD_LENGTH = 2


def _blank_if_missing(value: Any) -> str:
    return "" if value is None else str(value)


class CameraRecord(BaseModel):
    """Camera record as returned by the remote API. Unknown keys are ignored."""
    model_config = ConfigDict(extra="ignore")
    
    camera_id: str = Field(min_length=1)
    camera_name: str = ""
    created_at: str = ""
    ipaddress: str = ""
    location_name: str = ""
    
    @field_validator("camera_id", mode="before")
    @classmethod
    def coerce_identifier(cls, value: Any) -> Any:
        # Identifiers are opaque; numeric ids become strings
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value
    
    @field_validator("camera_name", "created_at", "ipaddress", "location_name", mode="before")
    @classmethod
    def normalize_optional(cls, value: Any) -> str:
        return _blank_if_missing(value)
    
    def to_domain(self) -> Camera:
        return Camera(
            camera_id=self.camera_id,
            camera_name=self.camera_name,
            created_at=self.created_at,
            ipaddress=self.ipaddress,
            location_name=self.location_name,
        )


class LocationRecord(BaseModel):
    """Location record as returned by the remote API"""
    model_config = ConfigDict(extra="ignore")
    
    location_name: str = ""
    ipaddress: str = ""
    
    @field_validator("location_name", "ipaddress", mode="before")
    @classmethod
    def normalize_optional(cls, value: Any) -> str:
        return _blank_if_missing(value)
    
    def to_domain(self) -> Location:
        return Location(location_name=self.location_name, ipaddress=self.ipaddress)


class AddCameraRequest(BaseModel):
    """
    DTO for the add-camera form.
    
    Values are stripped before validation; the stripped values are what
    gets submitted to the API.
    """
    name: str
    location: str
    ip: str
    
    @field_validator("name", "location", "ip", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value
    
    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value:
            raise ValueError("Please enter the camera name")
        if not has_min_length(value, MIN_FIELD_LENGTH):
            raise ValueError(f"Camera name must be at least {MIN_FIELD_LENGTH} characters")
        return value
    
    @field_validator("location")
    @classmethod
    def validate_location(cls, value: str) -> str:
        if not value:
            raise ValueError("Please enter the location")
        if not has_min_length(value, MIN_FIELD_LENGTH):
            raise ValueError(f"Location must be at least {MIN_FIELD_LENGTH} characters")
        return value
    
    @field_validator("ip")
    @classmethod
    def validate_ip(cls, value: str) -> str:
        if not value:
            raise ValueError("Please enter the IP address")
        if not is_valid_ipv4(value):
            raise ValueError("Please enter a valid IP address")
        return value


def parse_add_camera_form(
    values: Union[AddCameraRequest, Mapping[str, Any]]
) -> AddCameraRequest:
    """
    Validate raw form values into an AddCameraRequest.
    
    Args:
        values: Either an already-validated request or a mapping with
            ``name``, ``location`` and ``ip`` keys
            
    Returns:
        Validated AddCameraRequest
        
    Raises:
        CameraValidationError: With one message per offending field
    """
    if isinstance(values, AddCameraRequest):
        return values
    try:
        return AddCameraRequest.model_validate(dict(values))
    except ValidationError as exc:
        field_errors: Dict[str, str] = {}
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "__root__"
            ctx_error = (error.get("ctx") or {}).get("error")
            field_errors.setdefault(field, str(ctx_error) if ctx_error else error["msg"])
        raise CameraValidationError(field_errors) from exc


class CameraResponse(BaseModel):
    """DTO for camera response"""
    camera_id: str
    camera_name: str
    created_at: str
    ipaddress: str
    location_name: str
    
    @classmethod
    def from_domain(cls, camera: Camera) -> "CameraResponse":
        return cls(
            camera_id=camera.camera_id,
            camera_name=camera.camera_name,
            created_at=camera.created_at,
            ipaddress=camera.ipaddress,
            location_name=camera.location_name,
        )


class ActivityLogResponse(BaseModel):
    """DTO for an activity log entry"""
    camera_id: str
    camera_name: str
    created_at: str
    event: str
    created_by: str
    
    @classmethod
    def from_domain(cls, entry: ActivityLogEntry) -> "ActivityLogResponse":
        return cls(
            camera_id=entry.camera_id,
            camera_name=entry.camera_name,
            created_at=entry.created_at,
            event=entry.event,
            created_by=entry.created_by,
        )


class DailyCameraCountResponse(BaseModel):
    """DTO for one day of the cumulative camera count"""
    date: datetime.date
    count: int
    
    @classmethod
    def from_domain(cls, daily_count: DailyCount) -> "DailyCameraCountResponse":
        return cls(date=daily_count.date, count=daily_count.count)


class DashboardSummaryResponse(BaseModel):
    """DTO for the dashboard summary view"""
    total_cameras: int
    total_locations: int
    cameras_added_today: int
    loading: bool
    adding_camera: bool
    daily_camera_counts: List[DailyCameraCountResponse]
    recent_activity: List[ActivityLogResponse]


class NotificationResponse(BaseModel):
    """DTO for a transient notification"""
    level: str
    message: str
    created_at: str
    detail: Optional[str] = None
