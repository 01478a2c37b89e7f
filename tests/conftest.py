"""
Shared pytest fixtures for camera dashboard tests.
"""
import os
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from camera_dashboard.application.services.camera_data_provider import CameraDataProvider
from camera_dashboard.domain.repositories.camera_repository import CameraRepository
from camera_dashboard.infrastructure.notifications.notification_service import NotificationService

# 2025-06-15 10:30 UTC, a fixed "now" for anything date dependent
FIXED_NOW = datetime(2025, 6, 15, 10, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "CAMERA_API_BASE_URL": "http://camera-api.test/api/",
        "SESSION_USER": "operator",
        "RECENT_ACTIVITY_LIMIT": "3",
        "LOG_CAMERA_DELETIONS": "true",
        "LOCAL_TIMEZONE": "UTC",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.camera_api_base_url = "http://camera-api.test/api"
    mock.camera_api_timeout = None
    mock.session_user = "admin"
    mock.recent_activity_limit = 5
    mock.daily_count_days = 7
    mock.log_camera_deletions = False
    mock.local_timezone = "UTC"
    mock.log_level = "INFO"
    mock.cors_origins = ["http://localhost:5173"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("camera_dashboard.core.config.get_settings", return_value=mock), patch(
        "camera_dashboard.utils.datetime_utils.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def camera_repository():
    return AsyncMock(spec=CameraRepository)


@pytest.fixture
def notification_service():
    return NotificationService()


@pytest.fixture
def provider(camera_repository, notification_service, mock_settings):
    return CameraDataProvider(
        camera_repository=camera_repository,
        notification_service=notification_service,
        clock=lambda: FIXED_NOW,
    )
