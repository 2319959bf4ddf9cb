"""
Utility Functions

Responsibilities:
- URL building
- Response envelope decoding
- Scrubbing credentials out of error messages

This module contains utility functions used across the SDK.
"""

import re
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError
from ..schema import ApiResponse


def decode_envelope(payload: Any, data_type: Any) -> ApiResponse:
    """
    Validate a decoded JSON reply into ApiResponse[data_type].

    Args:
        payload: Decoded JSON body
        data_type: Payload type of the endpoint (e.g. User, List[Drawing], None)

    Returns:
        Typed response envelope

    Raises:
        ValidationError: If the body is not an envelope or data has the wrong shape
    """
    try:
        return ApiResponse[data_type].model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid response envelope: {e.error_count()} validation error(s)",
            details={"errors": e.errors(include_input=False, include_url=False)},
        )


def sanitize_error_message(message: str) -> str:
    """
    Sanitize error message to remove sensitive information.

    Args:
        message: Raw error message

    Returns:
        Sanitized error message
    """
    # Remove potential passwords
    message = re.sub(r'password["\']?\s*[:=]\s*["\']?[^"\'&\s]+', 'password=***', message, flags=re.IGNORECASE)

    # Remove potential tokens
    message = re.sub(r'(token|jwt|bearer)["\']?\s*[:=]?\s*["\']?[\w\-]+\.[\w\-]+\.[\w\-]+', r'\1=***', message, flags=re.IGNORECASE)
    message = re.sub(r'(token|jwt)["\']?\s*[:=]\s*["\']?[\w\-\.]+', r'\1=***', message, flags=re.IGNORECASE)

    return message


def build_api_url(base_url: str, path: str) -> str:
    """
    Build full API URL from base URL and path.

    Args:
        base_url: Base URL (e.g., "http://localhost:3000/")
        path: API path (e.g., "auth/login" or "/auth/login")

    Returns:
        Full URL
    """
    # Remove trailing slash from base_url
    base_url = base_url.rstrip('/')

    # Ensure path starts with /
    if not path.startswith('/'):
        path = '/' + path

    return base_url + path
