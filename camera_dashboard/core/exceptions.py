"""
Exception hierarchy for the camera dashboard.

Every error carries an internal message for the logs and a user-facing
message suitable for a transient notification or an inline form hint.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class CameraDashboardError(Exception):
    """Base exception for all camera dashboard errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


# -----------------------------------------------------------------------------
# Remote API
# -----------------------------------------------------------------------------


class CameraApiError(CameraDashboardError):
    """Raised when the camera API is unreachable, answers non-2xx, or returns a malformed body."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            user_message=user_message or "The camera service is unavailable.",
            details=details,
        )
        self.status_code = status_code


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class CameraValidationError(CameraDashboardError):
    """Raised when the add-camera form fails local validation. Never reaches the network."""

    def __init__(self, field_errors: Dict[str, str]):
        fields = ", ".join(sorted(field_errors))
        super().__init__(
            f"Invalid camera form fields: {fields}",
            user_message="Please correct the highlighted fields.",
            details={"field_errors": field_errors},
        )
        self.field_errors = field_errors


# -----------------------------------------------------------------------------
# Lifecycle
# -----------------------------------------------------------------------------


class ProviderClosedError(CameraDashboardError):
    """Raised when an operation is invoked after the owning session has ended."""
    pass
