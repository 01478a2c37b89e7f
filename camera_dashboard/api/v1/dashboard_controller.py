# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.camera_dto import (
    ActivityLogResponse,
    DailyCameraCountResponse,
    DashboardSummaryResponse,
)
from ...application.services.camera_data_provider import CameraDataProvider
from .dependencies import get_camera_provider


router = APIRouter(tags=["dashboard"])


@router.get("/summary", response_model=DashboardSummaryResponse)
async def get_summary(
    provider: CameraDataProvider = Depends(get_camera_provider),
) -> DashboardSummaryResponse:
    """Totals, daily counts and the recent-activity feed"""
    return provider.summary()


@router.get("/activity", response_model=List[ActivityLogResponse])
async def get_activity_log(
    provider: CameraDataProvider = Depends(get_camera_provider),
) -> List[ActivityLogResponse]:
    """Full session activity log, newest first"""
    return [ActivityLogResponse.from_domain(entry) for entry in provider.logs]


@router.get("/daily-counts", response_model=List[DailyCameraCountResponse])
async def get_daily_counts(
    provider: CameraDataProvider = Depends(get_camera_provider),
) -> List[DailyCameraCountResponse]:
    return [DailyCameraCountResponse.from_domain(count) for count in provider.daily_camera_counts]
