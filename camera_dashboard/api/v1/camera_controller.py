# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response, status

# Local application imports
from ...application.dto.camera_dto import CameraResponse
from ...application.services.camera_data_provider import CameraDataProvider
from ...core.exceptions import CameraValidationError
from .dependencies import get_camera_provider


router = APIRouter(tags=["cameras"])


@router.get("", response_model=List[CameraResponse])
async def list_cameras(
    q: Optional[str] = Query(default=None, description="Search name, location or IP"),
    provider: CameraDataProvider = Depends(get_camera_provider),
) -> List[CameraResponse]:
    """
    List cameras held by the session, optionally filtered
    
    Args:
        q: Optional search text
        provider: Session camera provider (from dependency)
        
    Returns:
        List of CameraResponse objects in fetch/insertion order
    """
    cameras = provider.search_cameras(q or "")
    return [CameraResponse.from_domain(camera) for camera in cameras]


@router.post("/refresh", response_model=List[CameraResponse])
async def refresh_cameras(
    provider: CameraDataProvider = Depends(get_camera_provider),
) -> List[CameraResponse]:
    """Re-fetch the full camera list from the remote API"""
    await provider.fetch_cameras()
    return [CameraResponse.from_domain(camera) for camera in provider.cameras]


@router.post("", response_model=CameraResponse, status_code=status.HTTP_201_CREATED)
async def add_camera(
    values: Dict[str, Any] = Body(...),
    provider: CameraDataProvider = Depends(get_camera_provider),
) -> CameraResponse:
    """
    Add a camera from the add-camera form
    
    Args:
        values: Form body with ``name``, ``location`` and ``ip``
        provider: Session camera provider (from dependency)
        
    Returns:
        CameraResponse with the canonical record
        
    Raises:
        HTTPException: 422 with field errors, or 502 if the camera API failed
    """
    try:
        camera = await provider.add_camera(values)
    except CameraValidationError as exception:
        raise HTTPException(
            status_code=422,
            detail={
                "message": exception.user_message,
                "field_errors": exception.field_errors,
            }
        )
    
    if camera is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to add camera"
        )
    return CameraResponse.from_domain(camera)


@router.delete("/{camera_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_camera(
    camera_id: str,
    provider: CameraDataProvider = Depends(get_camera_provider),
) -> Response:
    """
    Delete a camera by ID
    
    Raises:
        HTTPException: 502 if the camera API failed
    """
    deleted = await provider.delete_camera(camera_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to delete camera"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
