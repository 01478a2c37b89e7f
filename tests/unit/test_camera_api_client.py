"""
Unit tests for CameraApiClient against a stubbed transport.
"""
import json

import httpx
import pytest

from camera_dashboard.core.exceptions import CameraApiError
from camera_dashboard.domain.models import Camera, Location
from camera_dashboard.infrastructure.external.camera_api_client import CameraApiClient

BASE_URL = "http://camera-api.test/api/"


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestListCameras:
    """Tests for list_cameras"""

    @pytest.mark.asyncio
    async def test_returns_normalized_cameras_in_order(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert str(request.url) == "http://camera-api.test/api/cameras"
            return httpx.Response(
                200,
                json=[
                    {"camera_id": "cam-2", "camera_name": "Backyard"},
                    {
                        "camera_id": "cam-1",
                        "camera_name": "Front Door",
                        "created_at": "2025-06-01T10:00:00Z",
                        "ipaddress": "192.168.1.101",
                        "location_name": None,
                    },
                ],
            )

        async with _client(handler) as http:
            cameras = await CameraApiClient(http, BASE_URL).list_cameras()

        assert cameras == [
            Camera("cam-2", "Backyard", "", "", ""),
            Camera("cam-1", "Front Door", "2025-06-01T10:00:00Z", "192.168.1.101", ""),
        ]

    @pytest.mark.asyncio
    async def test_server_error_raises(self):
        async with _client(lambda request: httpx.Response(500, text="boom")) as http:
            with pytest.raises(CameraApiError) as exc_info:
                await CameraApiClient(http, BASE_URL).list_cameras()
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as http:
            with pytest.raises(CameraApiError) as exc_info:
                await CameraApiClient(http, BASE_URL).list_cameras()
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_timeout_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        async with _client(handler) as http:
            with pytest.raises(CameraApiError):
                await CameraApiClient(http, BASE_URL).list_cameras()

    @pytest.mark.asyncio
    async def test_unexpected_error_wrapped_and_logged(self, caplog):
        def handler(request: httpx.Request) -> httpx.Response:
            raise RuntimeError("handler exploded")

        async with _client(handler) as http:
            with pytest.raises(CameraApiError) as exc_info:
                await CameraApiClient(http, BASE_URL).list_cameras()

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert exc_info.value.status_code is None
        records = [r for r in caplog.records if "Unexpected error" in r.getMessage()]
        assert records and records[0].exc_info is not None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, json={"camera_id": "cam-1"}),
            httpx.Response(200, json=[{"camera_name": "No id"}]),
            httpx.Response(200, text="<html>not json</html>"),
        ],
    )
    async def test_malformed_body_raises(self, response):
        async with _client(lambda request: response) as http:
            with pytest.raises(CameraApiError):
                await CameraApiClient(http, BASE_URL).list_cameras()


class TestCreateCamera:
    """Tests for create_camera"""

    @pytest.mark.asyncio
    async def test_posts_form_fields_and_returns_record(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["method"] = request.method
            captured["path"] = request.url.path
            captured["body"] = json.loads(request.content)
            return httpx.Response(
                201,
                json={
                    "camera_id": "cam-7",
                    "camera_name": "Lobby",
                    "created_at": "2025-06-15T10:00:00Z",
                    "ipaddress": "10.0.0.5",
                    "location_name": "HQ",
                },
            )

        async with _client(handler) as http:
            camera = await CameraApiClient(http, BASE_URL).create_camera(
                camera_name="Lobby", ipaddress="10.0.0.5", location_name="HQ"
            )

        assert captured["method"] == "POST"
        assert captured["path"] == "/api/cameras"
        assert captured["body"] == {
            "camera_name": "Lobby",
            "ipaddress": "10.0.0.5",
            "location_name": "HQ",
        }
        assert camera.camera_id == "cam-7"

    @pytest.mark.asyncio
    async def test_bad_request_raises(self):
        async with _client(lambda request: httpx.Response(400, json={"detail": "dup"})) as http:
            with pytest.raises(CameraApiError) as exc_info:
                await CameraApiClient(http, BASE_URL).create_camera("Lobby", "10.0.0.5", "HQ")
        assert exc_info.value.status_code == 400


class TestDeleteCamera:
    """Tests for delete_camera"""

    @pytest.mark.asyncio
    async def test_sends_delete_without_requiring_body(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["method"] = request.method
            captured["path"] = request.url.path
            return httpx.Response(204)

        async with _client(handler) as http:
            await CameraApiClient(http, BASE_URL).delete_camera("cam-1")

        assert captured == {"method": "DELETE", "path": "/api/cameras/cam-1"}

    @pytest.mark.asyncio
    async def test_not_found_raises(self):
        async with _client(lambda request: httpx.Response(404)) as http:
            with pytest.raises(CameraApiError):
                await CameraApiClient(http, BASE_URL).delete_camera("cam-1")


class TestListLocations:
    @pytest.mark.asyncio
    async def test_returns_locations(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/locations"
            return httpx.Response(
                200,
                json=[{"location_name": "HQ", "ipaddress": "10.0.0.0"}, {"location_name": "Annex"}],
            )

        async with _client(handler) as http:
            locations = await CameraApiClient(http, BASE_URL).list_locations()

        assert locations == [Location("HQ", "10.0.0.0"), Location("Annex", "")]
