"""Game API client

Game state is owned by the real-time layer, so replies are passed through
as plain mappings inside the envelope.
"""

from typing import Any, Dict

from ...schema import ApiResponse
from ..utils import decode_envelope
from .base import APIClient


class GameAPI:
    """
    API client for game endpoints.

    Endpoints:
    - POST lobbies/{lobby_id}/start-game
    - GET games/{game_id}
    """

    def __init__(self, api_client: APIClient):
        self.api_client = api_client

    async def start_game(self, lobby_id: str) -> ApiResponse[Dict[str, Any]]:
        response = await self.api_client.post(f"lobbies/{lobby_id}/start-game")
        return decode_envelope(response, Dict[str, Any])

    async def get_game(self, game_id: str) -> ApiResponse[Dict[str, Any]]:
        response = await self.api_client.get(f"games/{game_id}")
        return decode_envelope(response, Dict[str, Any])
