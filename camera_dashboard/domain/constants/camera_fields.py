"""Constants for camera API field names and activity labels"""


class CameraFields:
    """Field name constants for camera create payloads on the wire"""
    NAME = "camera_name"
    IP_ADDRESS = "ipaddress"
    LOCATION_NAME = "location_name"

    # Shown when a record carries no name
    UNNAMED = "Unnamed Camera"


class ActivityEvents:
    """Event labels recorded in the activity log"""
    CAMERA_CREATED = "Camera created"
    CAMERA_DELETED = "Camera deleted"
