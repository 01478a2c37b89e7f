# Standard library imports
import logging
from datetime import date, timedelta
from typing import Iterable, List, Optional

# Local application imports
from ...domain.models import Camera, DailyCount
from ...utils.datetime_utils import local_date, parse_timestamp

logger = logging.getLogger(__name__)

DEFAULT_DAYS = 7


def last_n_days(today: date, days: int = DEFAULT_DAYS) -> List[date]:
    """Calendar days ending with ``today``, oldest first."""
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def camera_creation_date(camera: Camera) -> Optional[date]:
    """Local calendar date a camera was created on, or None when unknown or unparseable."""
    created = parse_timestamp(camera.created_at)
    if created is None:
        if camera.created_at:
            logger.debug(
                f"Camera {camera.camera_id} has unparseable created_at "
                f"{camera.created_at!r}, leaving it out of daily counts"
            )
        return None
    return local_date(created)


def calculate_daily_camera_counts(
    cameras: Iterable[Camera],
    today: date,
    days: int = DEFAULT_DAYS,
) -> List[DailyCount]:
    """
    Cumulative camera count for each of the last ``days`` calendar days.
    
    Each day counts the cameras created on or before it, so the series
    never decreases. Cameras without a creation timestamp are left out of
    every day.
    
    Args:
        cameras: Current camera set
        today: Last day of the series (local calendar date)
        days: Length of the series
        
    Returns:
        Exactly ``days`` DailyCount entries, oldest first, today last
    """
    creation_dates = [
        created for created in (camera_creation_date(camera) for camera in cameras)
        if created is not None
    ]
    return [
        DailyCount(date=day, count=sum(1 for created in creation_dates if created <= day))
        for day in last_n_days(today, days)
    ]
