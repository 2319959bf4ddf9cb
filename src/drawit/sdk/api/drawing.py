"""
Drawing API Client

Responsibilities:
- Drawing submission and lookup
- Rating submission
- Archive listing and search for the current user
"""

from typing import List

from ...schema import ApiResponse, Drawing, RateDrawingRequest
from ..utils import decode_envelope
from .base import APIClient


class DrawingAPI:
    """
    API client for drawing endpoints.

    Endpoints:
    - POST games/{game_id}/drawings
    - POST games/{game_id}/drawings/{drawing_id}/rate
    - GET users/drawings
    - GET users/drawings/search/{word}
    - GET drawings/{drawing_id}

    Args:
        api_client: Base APIClient instance
    """

    def __init__(self, api_client: APIClient):
        """Initialize drawing API client."""
        self.api_client = api_client

    async def submit_drawing(self, game_id: str, drawing: Drawing) -> ApiResponse[Drawing]:
        response = await self.api_client.post(
            f"games/{game_id}/drawings", json=drawing.to_wire()
        )
        return decode_envelope(response, Drawing)

    async def rate_drawing(
        self,
        game_id: str,
        drawing_id: str,
        request: RateDrawingRequest,
    ) -> ApiResponse[Drawing]:
        """
        Rate another player's drawing.

        The rating is sent as-is; range checks happen on the backend.

        Args:
            game_id: Game the drawing belongs to
            drawing_id: Drawing to rate
            request: Rating payload

        Returns:
            Envelope whose data holds the drawing with its updated average
        """
        response = await self.api_client.post(
            f"games/{game_id}/drawings/{drawing_id}/rate", json=request.to_wire()
        )
        return decode_envelope(response, Drawing)

    async def list_user_drawings(self) -> ApiResponse[List[Drawing]]:
        response = await self.api_client.get("users/drawings")
        return decode_envelope(response, List[Drawing])

    async def search_user_drawings(self, word: str) -> ApiResponse[List[Drawing]]:
        response = await self.api_client.get(f"users/drawings/search/{word}")
        return decode_envelope(response, List[Drawing])

    async def get_drawing(self, drawing_id: str) -> ApiResponse[Drawing]:
        response = await self.api_client.get(f"drawings/{drawing_id}")
        return decode_envelope(response, Drawing)
