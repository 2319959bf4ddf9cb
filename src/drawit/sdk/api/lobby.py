"""
Lobby API Client

Responsibilities:
- Lobby listing, creation and lookup
- Join/leave/delete wrappers
- Settings and lock updates

This module wraps backend lobby endpoints. Matchmaking decisions stay on
the backend; these calls only carry requests and replies.
"""

from typing import Optional

from ...schema import (
    ApiResponse,
    CreateLobbyRequest,
    JoinLobbyRequest,
    Lobby,
    LobbyListResponse,
)
from ..utils import decode_envelope
from .base import APIClient


class LobbyAPI:
    """
    API client for lobby endpoints.

    Endpoints:
    - GET lobbies
    - POST lobbies
    - GET lobbies/{lobby_id}
    - POST lobbies/{lobby_id}/join
    - DELETE lobbies/{lobby_id}/leave
    - DELETE lobbies/{lobby_id}
    - PUT lobbies/{lobby_id}/settings
    - PUT lobbies/{lobby_id}/lock

    Args:
        api_client: Base APIClient instance
    """

    def __init__(self, api_client: APIClient):
        """Initialize lobby API client."""
        self.api_client = api_client

    async def list_lobbies(self) -> ApiResponse[LobbyListResponse]:
        """
        List joinable lobbies.

        Returns:
            Envelope whose data holds the lobbies and the backend's total
            count (0 when the backend doesn't report one)
        """
        response = await self.api_client.get("lobbies")
        return decode_envelope(response, LobbyListResponse)

    async def create_lobby(self, request: CreateLobbyRequest) -> ApiResponse[Lobby]:
        """Create a lobby hosted by the current user."""
        response = await self.api_client.post("lobbies", json=request.to_wire())
        return decode_envelope(response, Lobby)

    async def get_lobby(self, lobby_id: str) -> ApiResponse[Lobby]:
        response = await self.api_client.get(f"lobbies/{lobby_id}")
        return decode_envelope(response, Lobby)

    async def join_lobby(
        self,
        lobby_id: str,
        request: Optional[JoinLobbyRequest] = None,
    ) -> ApiResponse[Lobby]:
        """
        Join a lobby.

        Args:
            lobby_id: Lobby to join
            request: Join form; an empty one is sent when None

        Returns:
            Envelope whose data holds the updated lobby
        """
        request = request or JoinLobbyRequest()
        response = await self.api_client.post(
            f"lobbies/{lobby_id}/join", json=request.to_wire()
        )
        return decode_envelope(response, Lobby)

    async def leave_lobby(self, lobby_id: str) -> ApiResponse[None]:
        response = await self.api_client.delete(f"lobbies/{lobby_id}/leave")
        return decode_envelope(response, None)

    async def delete_lobby(self, lobby_id: str) -> ApiResponse[None]:
        response = await self.api_client.delete(f"lobbies/{lobby_id}")
        return decode_envelope(response, None)

    async def update_settings(
        self,
        lobby_id: str,
        request: CreateLobbyRequest,
    ) -> ApiResponse[Lobby]:
        """Replace name, capacity and round settings of a lobby (host only)."""
        response = await self.api_client.put(
            f"lobbies/{lobby_id}/settings", json=request.to_wire()
        )
        return decode_envelope(response, Lobby)

    async def set_locked(self, lobby_id: str, locked: bool) -> ApiResponse[Lobby]:
        """Lock or unlock a lobby (host only)."""
        response = await self.api_client.put(
            f"lobbies/{lobby_id}/lock", json={"isLocked": locked}
        )
        return decode_envelope(response, Lobby)
