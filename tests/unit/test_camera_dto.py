"""
Unit tests for camera DTOs: wire record normalization and form validation.
"""
import pytest

from camera_dashboard.application.dto.camera_dto import (
    AddCameraRequest,
    CameraRecord,
    LocationRecord,
    parse_add_camera_form,
)
from camera_dashboard.core.exceptions import CameraValidationError
from camera_dashboard.domain.constants import CameraFields


class TestCameraRecord:
    """Tests for CameraRecord"""

    def test_missing_optional_fields_become_empty_strings(self):
        camera = CameraRecord.model_validate({"camera_id": "cam-1"}).to_domain()
        assert camera.camera_id == "cam-1"
        assert camera.camera_name == ""
        assert camera.created_at == ""
        assert camera.ipaddress == ""
        assert camera.location_name == ""

    def test_null_optional_fields_become_empty_strings(self):
        camera = CameraRecord.model_validate(
            {
                "camera_id": "cam-1",
                "camera_name": None,
                "created_at": None,
                "ipaddress": None,
                "location_name": None,
            }
        ).to_domain()
        assert camera.ipaddress == ""
        assert camera.location_name == ""
        assert camera.created_at == ""

    def test_numeric_identifier_is_coerced(self):
        camera = CameraRecord.model_validate({"camera_id": 42, "camera_name": "Lobby"}).to_domain()
        assert camera.camera_id == "42"

    def test_unknown_keys_ignored(self):
        record = CameraRecord.model_validate({"camera_id": "cam-1", "status": "online"})
        assert not hasattr(record, "status")

    @pytest.mark.parametrize("payload", [{}, {"camera_id": None}, {"camera_id": ""}])
    def test_identifier_required(self, payload):
        with pytest.raises(ValueError):
            CameraRecord.model_validate(payload)

    def test_display_name_placeholder(self):
        camera = CameraRecord.model_validate({"camera_id": "cam-1"}).to_domain()
        assert camera.display_name == CameraFields.UNNAMED


class TestLocationRecord:
    def test_normalizes_missing_fields(self):
        location = LocationRecord.model_validate({"location_name": "HQ"}).to_domain()
        assert location.location_name == "HQ"
        assert location.ipaddress == ""


class TestParseAddCameraForm:
    """Tests for parse_add_camera_form"""

    def test_valid_form(self):
        request = parse_add_camera_form({"name": "Lobby", "location": "HQ", "ip": "10.0.0.5"})
        assert isinstance(request, AddCameraRequest)
        assert request.name == "Lobby"
        assert request.location == "HQ"
        assert request.ip == "10.0.0.5"

    def test_values_are_stripped(self):
        request = parse_add_camera_form({"name": "  Lobby ", "location": " HQ", "ip": " 10.0.0.5 "})
        assert request.name == "Lobby"
        assert request.location == "HQ"
        assert request.ip == "10.0.0.5"

    def test_validated_request_passes_through(self):
        request = AddCameraRequest(name="Lobby", location="HQ", ip="10.0.0.5")
        assert parse_add_camera_form(request) is request

    def test_short_name(self):
        with pytest.raises(CameraValidationError) as exc_info:
            parse_add_camera_form({"name": "A", "location": "HQ", "ip": "10.0.0.5"})
        assert set(exc_info.value.field_errors) == {"name"}
        assert "at least 2 characters" in exc_info.value.field_errors["name"]

    def test_empty_location(self):
        with pytest.raises(CameraValidationError) as exc_info:
            parse_add_camera_form({"name": "Lobby", "location": "  ", "ip": "10.0.0.5"})
        assert exc_info.value.field_errors == {"location": "Please enter the location"}

    @pytest.mark.parametrize("ip", ["999.1.1.1", "1.2.3", ""])
    def test_bad_ip(self, ip):
        with pytest.raises(CameraValidationError) as exc_info:
            parse_add_camera_form({"name": "Lobby", "location": "HQ", "ip": ip})
        assert set(exc_info.value.field_errors) == {"ip"}

    def test_reports_every_offending_field(self):
        with pytest.raises(CameraValidationError) as exc_info:
            parse_add_camera_form({"name": "A", "location": "B", "ip": "1.2.3"})
        assert set(exc_info.value.field_errors) == {"name", "location", "ip"}

    def test_missing_field(self):
        with pytest.raises(CameraValidationError) as exc_info:
            parse_add_camera_form({"name": "Lobby", "location": "HQ"})
        assert "ip" in exc_info.value.field_errors
