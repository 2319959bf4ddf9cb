"""
Authentication API Client

Responsibilities:
- Register, login, logout and token refresh endpoint wrappers

This module wraps backend authentication endpoints.
"""

from typing import Optional

from ...schema import (
    ApiResponse,
    AuthRequest,
    AuthResponse,
    RefreshTokenRequest,
    RegisterRequest,
)
from ..utils import decode_envelope
from .base import APIClient


class AuthAPI:
    """
    API client for authentication endpoints.

    Endpoints:
    - POST auth/register
    - POST auth/login
    - POST auth/logout
    - POST auth/refresh-token

    Args:
        api_client: Base APIClient instance
    """

    def __init__(self, api_client: APIClient):
        """Initialize authentication API client."""
        self.api_client = api_client

    async def register(self, request: RegisterRequest) -> ApiResponse[AuthResponse]:
        """
        Create a new account.

        Args:
            request: Registration form

        Returns:
            Envelope whose data holds the JWT token and the new user
        """
        response = await self.api_client.post("auth/register", json=request.to_wire())
        return decode_envelope(response, AuthResponse)

    async def login(self, request: AuthRequest) -> ApiResponse[AuthResponse]:
        """
        Authenticate user and obtain JWT token.

        Args:
            request: Credentials, optionally with a device identifier

        Returns:
            Envelope whose data holds the JWT token and the user

        Raises:
            AuthenticationError: If credentials are invalid
        """
        response = await self.api_client.post("auth/login", json=request.to_wire())
        return decode_envelope(response, AuthResponse)

    async def logout(self, device_id: Optional[str] = None) -> ApiResponse[None]:
        """
        Logout and invalidate the session of this device.

        Args:
            device_id: Device whose session ends (omitted when None)
        """
        params = {"deviceId": device_id} if device_id is not None else None
        response = await self.api_client.post("auth/logout", params=params)
        return decode_envelope(response, None)

    async def refresh_token(self, request: RefreshTokenRequest) -> ApiResponse[AuthResponse]:
        """Exchange the current token for a fresh one."""
        response = await self.api_client.post("auth/refresh-token", json=request.to_wire())
        return decode_envelope(response, AuthResponse)
