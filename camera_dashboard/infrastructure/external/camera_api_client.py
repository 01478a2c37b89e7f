# Standard library imports
import logging
from typing import Any, List
from urllib.parse import quote

# External package imports
import httpx
from pydantic import ValidationError

# Local application imports
from ...application.dto.camera_dto import CameraRecord, LocationRecord
from ...core.exceptions import CameraApiError
from ...domain.constants import CameraFields
from ...domain.models import Camera, Location
from ...domain.repositories.camera_repository import CameraRepository

logger = logging.getLogger(__name__)


class CameraApiClient(CameraRepository):
    """
    HTTP client for the remote camera API.
    
    Every transport failure, non-2xx status and malformed body is raised as
    CameraApiError; callers decide how to surface it. No authentication
    header is attached and no retry is attempted.
    """
    
    def __init__(self, http_client: httpx.AsyncClient, base_url: str) -> None:
        """
        Initialize camera API client.
        
        Args:
            http_client: Session-owned async HTTP client
            base_url: Base path of the API (e.g. "http://localhost:3636/api")
        """
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")
    
    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self.base_url}{path}"
        try:
            response = await self.http_client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as e:
            logger.error(f"Timeout during {method} {url}")
            raise CameraApiError(f"Timeout during {method} {path}") from e
        except httpx.HTTPStatusError as e:
            logger.error(
                f"HTTP error during {method} {url}: "
                f"{e.response.status_code} - {e.response.text}"
            )
            raise CameraApiError(
                f"HTTP error! status: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Transport error during {method} {url}: {e}")
            raise CameraApiError(f"Transport error during {method} {path}: {e}") from e
        except Exception as e:
            logger.error(f"Unexpected error during {method} {url}: {e}", exc_info=True)
            raise CameraApiError(f"Unexpected error during {method} {path}: {e}") from e

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise CameraApiError("Camera API returned a non-JSON body") from e
    
    @staticmethod
    def _to_camera(payload: Any) -> Camera:
        try:
            return CameraRecord.model_validate(payload).to_domain()
        except (ValidationError, ValueError) as e:
            raise CameraApiError(
                f"Malformed camera record: {e}",
                details={"record": payload},
            ) from e
    
    async def list_cameras(self) -> List[Camera]:
        """
        Fetch every camera.
        
        Returns:
            Cameras in the order the API returned them
            
        Raises:
            CameraApiError: On transport failure, non-2xx status or malformed body
        """
        response = await self._request("GET", "/cameras")
        data = self._json(response)
        if not isinstance(data, list):
            raise CameraApiError("Camera list response is not an array")
        cameras = [self._to_camera(item) for item in data]
        logger.info(f"Fetched {len(cameras)} cameras from {self.base_url}")
        return cameras
    
    async def create_camera(self, camera_name: str, ipaddress: str, location_name: str) -> Camera:
        """
        Create a camera.
        
        Args:
            camera_name: Display name
            ipaddress: Dotted-quad IPv4 address
            location_name: Location the camera is installed at
            
        Returns:
            Canonical camera record with its server-assigned ID
        """
        payload = {
            CameraFields.NAME: camera_name,
            CameraFields.IP_ADDRESS: ipaddress,
            CameraFields.LOCATION_NAME: location_name,
        }
        response = await self._request("POST", "/cameras", json=payload)
        camera = self._to_camera(self._json(response))
        logger.info(f"Created camera {camera.camera_id} ({camera_name})")
        return camera
    
    async def delete_camera(self, camera_id: str) -> None:
        """Delete a camera; any response body is ignored."""
        await self._request("DELETE", f"/cameras/{quote(camera_id, safe='')}")
        logger.info(f"Deleted camera {camera_id}")
    
    async def list_locations(self) -> List[Location]:
        """Fetch known locations."""
        response = await self._request("GET", "/locations")
        data = self._json(response)
        if not isinstance(data, list):
            raise CameraApiError("Location list response is not an array")
        try:
            return [LocationRecord.model_validate(item).to_domain() for item in data]
        except ValidationError as e:
            raise CameraApiError(f"Malformed location record: {e}") from e
