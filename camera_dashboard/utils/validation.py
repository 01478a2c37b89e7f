"""Validation utility functions."""

import re

# Four dot-separated decimal octets 0-255, no leading zeros
_OCTET = r"(?:25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"
_IPV4_PATTERN = re.compile(rf"{_OCTET}(?:\.{_OCTET}){{3}}", re.ASCII)


def is_valid_ipv4(value: str) -> bool:
    """Check if value is a dotted-quad IPv4 address."""
    return isinstance(value, str) and _IPV4_PATTERN.fullmatch(value) is not None


def has_min_length(value: str, minimum: int) -> bool:
    """Check if a stripped string has at least ``minimum`` characters."""
    return isinstance(value, str) and len(value.strip()) >= minimum
