from abc import ABC, abstractmethod
from typing import List
from ..models.camera import Camera, Location


class CameraRepository(ABC):
    """Repository interface - defines contract for remote camera data access"""
    
    @abstractmethod
    async def list_cameras(self) -> List[Camera]:
        """Fetch the full camera collection"""
        pass
    
    @abstractmethod
    async def create_camera(self, camera_name: str, ipaddress: str, location_name: str) -> Camera:
        """Create a camera and return the canonical record"""
        pass
    
    @abstractmethod
    async def delete_camera(self, camera_id: str) -> None:
        """Delete a camera by ID"""
        pass
    
    @abstractmethod
    async def list_locations(self) -> List[Location]:
        """Fetch known locations"""
        pass
