"""Lobby schemas"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import WireModel
from .user import User


# ==================== Request Schemas ====================


class CreateLobbyRequest(WireModel):
    """Request schema for creating a lobby or updating its settings

    The backend expects the lobby name under ``name``.
    """
    name: str = Field(..., description="Lobby display name", examples=["Friday doodles"])
    max_players: int = Field(..., description="Player capacity")
    num_rounds: int = Field(..., description="Number of rounds per game")
    round_duration_seconds: int = Field(..., description="Drawing time per round in seconds")


class JoinLobbyRequest(WireModel):
    """Request schema for joining a lobby (sent as ``{}`` when no password)"""
    password: Optional[str] = Field(default=None, description="Lobby password, if any")


# ==================== Response Schemas ====================


class Lobby(WireModel):
    """Lobby summary as listed by the backend

    Data only: joining, locking and game start are decided by the backend.
    """

    lobby_id: str = Field(..., description="Lobby ID")
    name: Optional[str] = Field(None, description="Lobby display name")
    host_id: Optional[str] = Field(None, description="User ID of the host")
    is_locked: bool = Field(False, description="Game launched or capacity reached")
    is_private: Optional[bool] = Field(None, description="Hidden from the public list")
    max_players: int = Field(0, description="Player capacity")
    num_rounds: int = Field(3, description="Number of rounds per game")
    round_duration_seconds: int = Field(60, description="Drawing time per round in seconds")
    in_game: bool = Field(False, description="A game is currently running")
    players: List[User] = Field(default_factory=list, description="Players in the lobby")
    host_user: Optional[User] = Field(None, description="Host user details")
    player_count: Optional[int] = Field(None, description="Player count reported by the backend")
    created_at: Optional[datetime] = Field(None, description="Lobby creation time")
