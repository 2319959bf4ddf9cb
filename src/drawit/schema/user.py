"""User schemas"""

from typing import Optional

from pydantic import Field

from .base import WireModel


class User(WireModel):
    """User record as returned by the backend (never includes the password)"""

    user_id: str = Field(..., description="User ID")
    username: Optional[str] = Field(None, description="Username")
    email: Optional[str] = Field(None, description="Email address")
    avatar_url: Optional[str] = Field(None, description="Avatar image URL")
    auth_token: Optional[str] = Field(None, description="Token attached by some replies")
    total_games_played: int = Field(0, description="Number of finished games")
    games_won: int = Field(0, description="Number of games won")
    average_rating: float = Field(0.0, description="Average rating of the user's drawings")
    ready: bool = Field(False, description="Ready flag inside a lobby")


class UpdateProfileRequest(WireModel):
    """Profile update request

    Any field left as None is omitted from the body, so the backend keeps
    its current value.
    """

    username: Optional[str] = None
    password: Optional[str] = None
    avatar_url: Optional[str] = None
