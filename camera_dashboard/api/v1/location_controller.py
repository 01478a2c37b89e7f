# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.camera_dto import LocationRecord
from ...application.services.camera_data_provider import CameraDataProvider
from .dependencies import get_camera_provider


router = APIRouter(tags=["locations"])


@router.get("", response_model=List[LocationRecord])
async def list_locations(
    provider: CameraDataProvider = Depends(get_camera_provider),
) -> List[LocationRecord]:
    """Fetch known locations from the remote API (empty list if it fails)"""
    locations = await provider.fetch_locations()
    return [
        LocationRecord(location_name=location.location_name, ipaddress=location.ipaddress)
        for location in locations
    ]
