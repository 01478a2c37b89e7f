"""
DateTime Utilities
==================

Consistent datetime handling for the dashboard. "Local" always means the
zone configured as LOCAL_TIMEZONE in camera_dashboard.core.config.

Functions:
- now(): timezone-aware datetime in the local zone
- now_iso(): ISO 8601 string for the current local time
- parse_iso(): safely parse an ISO 8601 string to an aware datetime
- parse_timestamp(): parse an ISO 8601 string or epoch milliseconds
- to_iso(): convert a datetime to an ISO 8601 string
- local_date(): calendar date of a datetime in the local zone
"""
# Standard library imports
import logging
import re
import zoneinfo
from datetime import date, datetime, timezone as dt_timezone, tzinfo
from typing import Optional

# Local application imports
from ..core.config import get_settings

logger = logging.getLogger(__name__)

_EPOCH_MS_RE = re.compile(r"-?\d+(\.\d+)?")


def get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().local_timezone
    
    if tz_str.upper() == "UTC":
        return dt_timezone.utc
    
    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{tz_str}', falling back to UTC")
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime in the configured local timezone.
    
    Returns:
        timezone-aware datetime object
    """
    return datetime.now(get_app_timezone())


def now_iso() -> str:
    """
    Get current local datetime as ISO 8601 string.
    
    Returns:
        ISO 8601 formatted string (e.g., "2025-12-24T10:30:00+05:30" or "2025-12-24T10:30:00Z")
    """
    return to_iso(now())


def parse_iso(dt_str: Optional[str]) -> Optional[datetime]:
    """
    Parse ISO 8601 string to datetime object.
    Handles both timezone-aware and naive strings.
    If string is naive, assumes application timezone.
    
    Args:
        dt_str: ISO 8601 string (e.g., "2025-12-24T10:30:00Z" or "2025-12-24T10:30:00+05:30")
    
    Returns:
        timezone-aware datetime object, or None if parsing fails
    """
    if not dt_str:
        return None
    
    try:
        normalized = dt_str.strip().replace("Z", "+00:00")
        dt = datetime.fromisoformat(normalized)
    except ValueError:
        return None
    
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=get_app_timezone())
    return dt


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a creation timestamp as sent by the camera API.

    Accepts ISO 8601 strings and epoch milliseconds (a bare number, which
    the DTO layer has already turned into a string).

    Returns:
        timezone-aware datetime object, or None if empty or unparseable
    """
    if not value:
        return None

    text = value.strip()
    if _EPOCH_MS_RE.fullmatch(text):
        try:
            return datetime.fromtimestamp(float(text) / 1000, tz=dt_timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    return parse_iso(text)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string.
    If datetime is naive, assumes application timezone.
    
    Args:
        dt: datetime object (timezone-aware or naive)
    
    Returns:
        ISO 8601 formatted string, or None if dt is None
    """
    if dt is None:
        return None
    
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=get_app_timezone())
    
    # 'Z' suffix for UTC, explicit offset otherwise
    if dt.tzinfo == dt_timezone.utc:
        return dt.replace(microsecond=0).isoformat().replace("+00:00", "Z")
    return dt.replace(microsecond=0).isoformat()


def local_date(dt: datetime) -> date:
    """Calendar date of ``dt`` as seen in the application timezone."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=get_app_timezone())
    return dt.astimezone(get_app_timezone()).date()
