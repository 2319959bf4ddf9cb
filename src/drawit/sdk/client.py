"""
DrawIt Client

Responsibilities:
- Client initialization from Settings
- Authentication lifecycle management (login/register/logout)
- Access to the endpoint clients
- HTTP client lifecycle

This is the main entry point for users of the SDK.
"""

import logging
from typing import Optional

import httpx

from ..config import Settings
from ..logging import setup_logging
from ..schema import AuthRequest, AuthResponse, RegisterRequest
from .api import APIClient, AuthAPI, DrawingAPI, GameAPI, LobbyAPI, UserAPI
from .auth import AuthManager

logger = logging.getLogger(__name__)


class DrawItClient:
    """
    Main client for the DrawIt backend.

    Usage:
        async with DrawItClient() as client:
            await client.login("alice", "secret")
            reply = await client.lobbies.list_lobbies()
            if reply.has_data:
                for lobby in reply.data.lobbies:
                    ...

    Args:
        settings: Client settings (loaded from env/config file when None)
        transport: Optional httpx transport for the underlying client
        configure_logging: Install log handlers from settings.log_level/log_dir
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        configure_logging: bool = False,
    ):
        self.settings = settings or Settings()
        if configure_logging:
            setup_logging(self.settings.log_level, self.settings.log_dir)

        # Create API client
        self.api_client = APIClient(
            base_url=self.settings.base_url,
            timeout=self.settings.timeout,
            transport=transport,
        )

        # Create auth manager
        self.auth = AuthAPI(self.api_client)
        self.auth_manager = AuthManager(self.auth, device_id=self.settings.device_id)

        # Set auth manager reference in api_client for token injection
        self.api_client.auth_manager = self.auth_manager

        self.users = UserAPI(self.api_client)
        self.lobbies = LobbyAPI(self.api_client)
        self.games = GameAPI(self.api_client)
        self.drawings = DrawingAPI(self.api_client)

        logger.debug(f"DrawIt client created for {self.settings.base_url}")

    async def login(
        self,
        username: str,
        password: str,
        device_id: Optional[str] = None,
    ) -> AuthResponse:
        """
        Login and keep the token for subsequent requests.

        Args:
            username: Username or email
            password: Password
            device_id: Overrides the configured device identifier
        """
        request = AuthRequest(username=username, password=password, device_id=device_id)
        return await self.auth_manager.login(request)

    async def register(self, username: str, password: str, email: str) -> AuthResponse:
        """Create an account and keep the token for subsequent requests."""
        request = RegisterRequest(username=username, password=password, email=email)
        return await self.auth_manager.register(request)

    async def logout(self) -> None:
        """
        Logout and invalidate current session.

        This will clear the stored JWT token.
        """
        await self.auth_manager.logout()

    def is_authenticated(self) -> bool:
        return self.auth_manager.is_authenticated()

    async def close(self) -> None:
        await self.api_client.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Logout (if logged in) and close the HTTP client."""
        try:
            if self.is_authenticated():
                await self.logout()
        finally:
            await self.close()
