"""Centralized error messages for API responses."""

from enum import Enum


class ErrorMessage(str, Enum):
    """Error strings returned in the ``error`` field of every failure body."""

    # Client input
    METHOD_NOT_ALLOWED = "Method Not Allowed"
    MISSING_INPUT = "Missing image or weather data"
    PAYLOAD_TOO_LARGE = "Payload Too Large"

    # Deployment
    API_KEY_NOT_CONFIGURED = "API key not configured"

    # Upstream
    UPSTREAM_ERROR = "Error from Google API"

    # Generic
    INTERNAL_SERVER_ERROR = "Internal Server Error"
