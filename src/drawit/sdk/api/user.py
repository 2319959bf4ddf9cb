"""User profile API client"""

from ...schema import ApiResponse, UpdateProfileRequest, User
from ..utils import decode_envelope
from .base import APIClient


class UserAPI:
    """
    API client for user endpoints.

    Endpoints:
    - GET users/profile
    - PUT users/profile
    - GET users/{user_id}
    """

    def __init__(self, api_client: APIClient):
        self.api_client = api_client

    async def get_current_user(self) -> ApiResponse[User]:
        response = await self.api_client.get("users/profile")
        return decode_envelope(response, User)

    async def update_profile(self, request: UpdateProfileRequest) -> ApiResponse[User]:
        """Update the fields set on request; unset fields keep their value."""
        response = await self.api_client.put("users/profile", json=request.to_wire())
        return decode_envelope(response, User)

    async def get_user(self, user_id: str) -> ApiResponse[User]:
        response = await self.api_client.get(f"users/{user_id}")
        return decode_envelope(response, User)
