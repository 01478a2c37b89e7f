# Standard library imports
import logging
from datetime import date, datetime
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

# Local application imports
from ..dto.camera_dto import (
    ActivityLogResponse,
    AddCameraRequest,
    DailyCameraCountResponse,
    DashboardSummaryResponse,
    parse_add_camera_form,
)
from ...core.exceptions import CameraApiError, ProviderClosedError
from ...domain.constants import ActivityEvents, CameraFields
from ...domain.models import ActivityLogEntry, Camera, DailyCount, Location
from ...domain.repositories.camera_repository import CameraRepository
from ...infrastructure.notifications.notification_service import NotificationService
from ...utils import datetime_utils
from .daily_counts import DEFAULT_DAYS, calculate_daily_camera_counts

logger = logging.getLogger(__name__)

DEFAULT_RECENT_ACTIVITY_LIMIT = 5


class CameraDataProvider:
    """
    Session-scoped owner of the camera set and the activity log.
    
    Views read the exposed state and call the async operations; every
    mutation happens on the event loop after the remote call has resolved,
    and the daily-count series is recomputed right after each change to
    the camera set. Transport failures never escape: they are logged and
    published as error notifications. Form validation errors do escape,
    since they are reported inline by the caller.
    
    After close() the provider refuses new operations, and responses that
    arrive for operations already in flight are discarded.
    """
    
    def __init__(
        self,
        camera_repository: CameraRepository,
        notification_service: NotificationService,
        session_user: str = "admin",
        recent_activity_limit: int = DEFAULT_RECENT_ACTIVITY_LIMIT,
        daily_count_days: int = DEFAULT_DAYS,
        log_deletions: bool = False,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.camera_repository = camera_repository
        self.notification_service = notification_service
        self.session_user = session_user
        self.recent_activity_limit = recent_activity_limit
        self.daily_count_days = daily_count_days
        self.log_deletions = log_deletions
        self._clock = clock or datetime_utils.now
        
        self._cameras: List[Camera] = []
        self._recent_activity: List[ActivityLogEntry] = []
        self._logs: List[ActivityLogEntry] = []
        self._locations: List[Location] = []
        self._daily_camera_counts: List[DailyCount] = []
        self._counts_day: Optional[date] = None
        self._loading = False
        self._adding_camera = False
        self._closed = False
        
        self._set_cameras([])
    
    # ------------------------------------------------------------------
    # Exposed state
    # ------------------------------------------------------------------
    
    @property
    def cameras(self) -> List[Camera]:
        return list(self._cameras)
    
    @property
    def recent_activity(self) -> List[ActivityLogEntry]:
        return list(self._recent_activity)
    
    @property
    def logs(self) -> List[ActivityLogEntry]:
        return list(self._logs)
    
    @property
    def daily_camera_counts(self) -> List[DailyCount]:
        self._refresh_counts_if_day_changed()
        return list(self._daily_camera_counts)
    
    @property
    def locations(self) -> List[Location]:
        return list(self._locations)
    
    @property
    def loading(self) -> bool:
        return self._loading
    
    @property
    def adding_camera(self) -> bool:
        return self._adding_camera
    
    @property
    def closed(self) -> bool:
        return self._closed
    
    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    
    async def fetch_cameras(self) -> None:
        """
        Replace the camera set with the full list from the API.
        
        On failure the set is reset to empty. The loading flag is cleared
        in every case.
        """
        self._ensure_open()
        self._loading = True
        try:
            cameras = await self.camera_repository.list_cameras()
        except CameraApiError as exc:
            logger.error(f"Error fetching cameras: {exc.message}")
            if not self._is_discarded("camera list"):
                self._set_cameras([])
                self.notification_service.error("Failed to load cameras", detail=exc.user_message)
            return
        finally:
            self._loading = False
        
        if self._is_discarded("camera list"):
            return
        self._set_cameras(cameras)
        logger.info(f"Loaded {len(cameras)} cameras")
    
    async def add_camera(
        self,
        values: Union[AddCameraRequest, Mapping[str, Any]],
    ) -> Optional[Camera]:
        """
        Validate the form, create the camera remotely and record the activity.
        
        Args:
            values: Form values with ``name``, ``location`` and ``ip``
            
        Returns:
            The canonical camera on success, None when the API call failed
            
        Raises:
            CameraValidationError: If the form is invalid; no request is sent
        """
        self._ensure_open()
        request = parse_add_camera_form(values)
        
        self._adding_camera = True
        try:
            camera = await self.camera_repository.create_camera(
                camera_name=request.name,
                ipaddress=request.ip,
                location_name=request.location,
            )
        except CameraApiError as exc:
            logger.error(f"Error adding camera: {exc.message}")
            if not self._is_discarded("camera create"):
                self.notification_service.error("Failed to add camera", detail=exc.user_message)
            return None
        finally:
            self._adding_camera = False
        
        if self._is_discarded("camera create"):
            return None
        self._set_cameras([*self._cameras, camera])
        self.notification_service.success("Camera added successfully")
        self._record_activity(camera.camera_id, camera.display_name, ActivityEvents.CAMERA_CREATED)
        return camera
    
    async def delete_camera(self, camera_id: str) -> bool:
        """
        Delete a camera remotely, then drop it from the local set.
        
        Deleting an ID that is not held locally leaves the set untouched
        whatever the server answers.
        
        Returns:
            True if the API confirmed the deletion
        """
        self._ensure_open()
        try:
            await self.camera_repository.delete_camera(camera_id)
        except CameraApiError as exc:
            logger.error(f"Error deleting camera {camera_id}: {exc.message}")
            if not self._is_discarded("camera delete"):
                self.notification_service.error("Failed to delete camera", detail=exc.user_message)
            return False
        
        if self._is_discarded("camera delete"):
            return False
        removed = [camera for camera in self._cameras if camera.camera_id == camera_id]
        if removed:
            self._set_cameras([camera for camera in self._cameras if camera.camera_id != camera_id])
        else:
            logger.warning(f"Deleted camera {camera_id} was not in the local set")
        self.notification_service.success("Camera deleted successfully")
        
        if self.log_deletions:
            name = removed[0].display_name if removed else CameraFields.UNNAMED
            self._record_activity(camera_id, name, ActivityEvents.CAMERA_DELETED)
        return True
    
    async def fetch_locations(self) -> List[Location]:
        """Replace the known locations with the list from the API; empty on failure."""
        self._ensure_open()
        try:
            locations = await self.camera_repository.list_locations()
        except CameraApiError as exc:
            logger.error(f"Error fetching locations: {exc.message}")
            if not self._is_discarded("location list"):
                self._locations = []
                self.notification_service.error("Failed to load locations", detail=exc.user_message)
            return []
        
        if self._is_discarded("location list"):
            return []
        self._locations = list(locations)
        return self.locations
    
    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    
    def search_cameras(self, query: str = "") -> List[Camera]:
        """Cameras whose name or location contains ``query`` (case-insensitive) or whose IP contains it."""
        needle = (query or "").strip()
        if not needle:
            return self.cameras
        lowered = needle.lower()
        return [
            camera for camera in self._cameras
            if lowered in camera.camera_name.lower()
            or lowered in camera.location_name.lower()
            or needle in camera.ipaddress
        ]
    
    def summary(self) -> DashboardSummaryResponse:
        """Aggregates shown on the dashboard landing view."""
        self._refresh_counts_if_day_changed()
        counts = self._daily_camera_counts
        if len(counts) >= 2:
            added_today = counts[-1].count - counts[-2].count
        else:
            added_today = counts[-1].count if counts else 0
        
        return DashboardSummaryResponse(
            total_cameras=len(self._cameras),
            total_locations=len({c.location_name for c in self._cameras if c.location_name}),
            cameras_added_today=added_today,
            loading=self._loading,
            adding_camera=self._adding_camera,
            daily_camera_counts=[DailyCameraCountResponse.from_domain(c) for c in counts],
            recent_activity=[ActivityLogResponse.from_domain(e) for e in self._recent_activity],
        )
    
    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    
    def close(self) -> None:
        """End the session; late responses will be dropped."""
        if not self._closed:
            self._closed = True
            logger.info("Camera data provider closed")
    
    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    
    def _ensure_open(self) -> None:
        if self._closed:
            raise ProviderClosedError("Camera data provider is closed")
    
    def _is_discarded(self, operation: str) -> bool:
        if self._closed:
            logger.debug(f"Discarding {operation} response: session already closed")
            return True
        return False
    
    def _set_cameras(self, cameras: Sequence[Camera]) -> None:
        self._cameras = list(cameras)
        self._recompute_daily_counts(datetime_utils.local_date(self._clock()))
    
    def _recompute_daily_counts(self, today: date) -> None:
        self._counts_day = today
        self._daily_camera_counts = calculate_daily_camera_counts(
            self._cameras, today, self.daily_count_days
        )
    
    def _refresh_counts_if_day_changed(self) -> None:
        # The series always ends on the current local day
        today = datetime_utils.local_date(self._clock())
        if today != self._counts_day:
            self._recompute_daily_counts(today)
    
    def _record_activity(self, camera_id: str, camera_name: str, event: str) -> None:
        entry = ActivityLogEntry(
            camera_id=camera_id,
            camera_name=camera_name,
            created_at=datetime_utils.to_iso(self._clock()),
            event=event,
            created_by=self.session_user,
        )
        self._recent_activity = [entry, *self._recent_activity][: self.recent_activity_limit]
        self._logs = [entry, *self._logs]
