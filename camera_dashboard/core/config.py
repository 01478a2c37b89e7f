# Standard library imports
import os
from typing import Final, List, Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the dashboard.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Remote Camera API Configuration
        self.camera_api_base_url: Final[str] = os.getenv(
            "CAMERA_API_BASE_URL",
            "http://localhost:3636/api"
        ).rstrip("/")
        timeout = os.getenv("CAMERA_API_TIMEOUT", "").strip()
        # None keeps the httpx transport default
        self.camera_api_timeout: Final[Optional[float]] = float(timeout) if timeout else None
        
        # Session Configuration
        self.session_user: Final[str] = os.getenv("SESSION_USER", "admin")
        self.recent_activity_limit: Final[int] = int(os.getenv("RECENT_ACTIVITY_LIMIT", "5"))
        self.daily_count_days: Final[int] = int(os.getenv("DAILY_COUNT_DAYS", "7"))
        self.log_camera_deletions: Final[bool] = _env_bool("LOG_CAMERA_DELETIONS", "false")
        self.local_timezone: Final[str] = os.getenv("LOCAL_TIMEZONE", "UTC")
        
        # Web Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:5173,http://localhost:3000"
            ).split(",")
            if origin.strip()
        ]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
