"""
Base API Client

Responsibilities:
- HTTP client lifecycle management (using httpx)
- Common HTTP methods (GET, POST, PUT, DELETE)
- Request/response handling and error conversion
- JWT token injection for authenticated requests

This is the base class for all endpoint clients.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ...exceptions import (
    ApiError,
    AuthenticationError,
    ConnectionError,
    NotFoundError,
    ValidationError,
)
from ..utils import build_api_url, sanitize_error_message

logger = logging.getLogger(__name__)


class APIClient:
    """
    Base HTTP client for making requests to the DrawIt backend.

    This class provides:
    1. HTTP methods (get, post, put, delete) returning decoded JSON
    2. Automatic JWT token injection
    3. Conversion of HTTP and network failures into SDK exceptions

    Endpoint clients (AuthAPI, LobbyAPI, ...) use this base client for
    HTTP communication and decode the returned JSON into ApiResponse.

    Args:
        base_url: Backend API base URL (e.g., "http://localhost:3000/")
        timeout: Request timeout in seconds
        auth_manager: Optional AuthManager for token injection
        transport: Optional httpx transport (used to plug in mock transports)
    """

    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        auth_manager: Optional[Any] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize API client."""
        self.base_url = base_url
        self.timeout = timeout
        self.auth_manager = auth_manager
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Send GET request.

        Args:
            path: API endpoint path (e.g., "lobbies")
            params: Query parameters
            headers: Additional headers

        Returns:
            Decoded JSON body
        """
        return await self._send("GET", path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Send POST request.

        Args:
            path: API endpoint path
            json: Request body (any JSON-serializable value)
            params: Query parameters
            headers: Additional headers

        Returns:
            Decoded JSON body
        """
        return await self._send("POST", path, json=json, params=params, headers=headers)

    async def put(
        self,
        path: str,
        json: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Send PUT request."""
        return await self._send("PUT", path, json=json, headers=headers)

    async def delete(
        self,
        path: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Send DELETE request."""
        return await self._send("DELETE", path, headers=headers)

    async def _send(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        url = build_api_url(self.base_url, path)
        headers = await self._inject_auth_header(headers)

        logger.debug(f"{method} {url}")
        try:
            response = await self.client.request(
                method, url, json=json, params=params, headers=headers
            )
        except httpx.RequestError as e:
            message = sanitize_error_message(f"Request failed: {str(e)}")
            logger.warning(f"{method} {url} failed: {message}")
            raise ConnectionError(message)

        return self._handle_response(response)

    async def _inject_auth_header(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """
        Inject JWT token into request headers.

        Args:
            headers: Existing headers dict

        Returns:
            Headers dict with Authorization header added
        """
        headers = dict(headers) if headers else {}

        if self.auth_manager:
            token = await self.auth_manager.get_token()
            if token:
                headers["Authorization"] = f"Bearer {token}"

        return headers

    def _handle_response(self, response: httpx.Response) -> Any:
        """
        Handle HTTP response and convert errors.

        Args:
            response: httpx Response object

        Returns:
            Decoded JSON body; an empty 2xx reply is a successful envelope
            without data

        Raises:
            AuthenticationError: On 401/403
            NotFoundError: On 404
            ApiError: On other non-2xx statuses
            ValidationError: On a 2xx reply that isn't JSON
        """
        if 200 <= response.status_code < 300:
            if response.status_code == 204 or not response.content:
                return {"success": True}
            try:
                return response.json()
            except ValueError:
                raise ValidationError(
                    "Response is not valid JSON",
                    details={"status_code": response.status_code},
                )

        # The backend answers errors with an envelope carrying a message
        try:
            error_data = response.json()
            error_message = str(error_data.get("message") or error_data.get("detail") or error_data)
        except (ValueError, AttributeError):
            error_data = None
            error_message = response.text or f"HTTP {response.status_code}"

        error_message = sanitize_error_message(error_message)
        details = {"status_code": response.status_code, "body": error_data}
        logger.warning(
            f"{response.request.method} {response.request.url} -> "
            f"{response.status_code}: {error_message}"
        )

        if response.status_code in (401, 403):
            raise AuthenticationError(f"Authentication failed: {error_message}", details=details)

        if response.status_code == 404:
            raise NotFoundError(f"Resource not found: {error_message}", details=details)

        raise ApiError(f"Request failed: {error_message}", details=details)

    async def close(self):
        """Close HTTP client and cleanup resources."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager support."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Cleanup on exit."""
        await self.close()
