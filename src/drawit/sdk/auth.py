"""
Authentication Manager

Responsibilities:
- JWT token lifecycle management (obtain, store, refresh, revoke)
- Attaching the configured device identifier to credential requests

This module handles all authentication-related operations for the SDK.
"""

import logging
from typing import Optional

from ..exceptions import AuthenticationError
from ..schema import (
    ApiResponse,
    AuthRequest,
    AuthResponse,
    RefreshTokenRequest,
    RegisterRequest,
)
from .api.auth import AuthAPI

logger = logging.getLogger(__name__)


class AuthManager:
    """
    Manages authentication state and JWT token lifecycle.

    This class handles:
    1. Login/registration and obtaining JWT tokens
    2. Token storage and retrieval
    3. Token refresh
    4. Logout and token revocation

    Args:
        auth_api: Authentication endpoint client
        device_id: Device identifier added to requests that carry none
    """

    def __init__(self, auth_api: AuthAPI, device_id: Optional[str] = None):
        """Initialize authentication manager."""
        self.auth_api = auth_api
        self.device_id = device_id

        # Token state
        self._token: Optional[str] = None

    async def login(self, request: AuthRequest) -> AuthResponse:
        """
        Authenticate user and store the returned JWT token.

        Args:
            request: Login credentials

        Returns:
            Token and user returned by the backend

        Raises:
            AuthenticationError: If login fails or no token is returned
        """
        if request.device_id is None and self.device_id is not None:
            request = request.with_device_id(self.device_id)

        response = await self.auth_api.login(request)
        auth = self._store_token(response, "Login")
        logger.info(f"Logged in as {request.username}")
        return auth

    async def register(self, request: RegisterRequest) -> AuthResponse:
        """
        Create an account and store the returned JWT token.

        Raises:
            AuthenticationError: If registration fails or no token is returned
        """
        if request.device_id is None and self.device_id is not None:
            request = request.with_device_id(self.device_id)

        response = await self.auth_api.register(request)
        auth = self._store_token(response, "Registration")
        logger.info(f"Registered {request.username}")
        return auth

    async def refresh(self) -> AuthResponse:
        """
        Replace the stored token with a fresh one.

        Raises:
            AuthenticationError: If not authenticated or refresh fails
        """
        if not self._token:
            raise AuthenticationError("Token refresh failed: not authenticated")

        response = await self.auth_api.refresh_token(RefreshTokenRequest(token=self._token))
        return self._store_token(response, "Token refresh")

    async def logout(self) -> None:
        """
        Logout and invalidate current token.

        The stored token is cleared even when the backend call fails.
        """
        if self._token:
            try:
                await self.auth_api.logout(self.device_id)
            except Exception as e:
                logger.warning(f"Logout request failed, clearing token anyway: {e}")

        self._token = None

    async def get_token(self) -> Optional[str]:
        """
        Get current JWT token.

        Returns:
            JWT token string, or None if not authenticated
        """
        return self._token

    def is_authenticated(self) -> bool:
        return self._token is not None

    def _store_token(self, response: ApiResponse[AuthResponse], action: str) -> AuthResponse:
        if not response.success:
            raise AuthenticationError(f"{action} failed: {response.message or 'unknown error'}")

        if not response.has_data or not response.data.token:
            raise AuthenticationError(f"{action} failed: no token in response")

        self._token = response.data.token
        return response.data
