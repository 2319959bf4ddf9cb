"""
Schema package for the DrawIt wire contract.
"""

from .base import WireModel
from .response import (
    ApiResponse,
    LobbyListResponse,
    AuthResponse,
)
from .auth import (
    AuthRequest,
    RegisterRequest,
    RefreshTokenRequest,
)
from .user import (
    User,
    UpdateProfileRequest,
)
from .lobby import (
    Lobby,
    CreateLobbyRequest,
    JoinLobbyRequest,
)
from .drawing import (
    RateDrawingRequest,
    Drawing,
    DrawingPath,
    Point,
)

__all__ = [
    "WireModel",
    # Response schemas
    "ApiResponse",
    "LobbyListResponse",
    "AuthResponse",
    # Auth schemas
    "AuthRequest",
    "RegisterRequest",
    "RefreshTokenRequest",
    # User schemas
    "User",
    "UpdateProfileRequest",
    # Lobby schemas
    "Lobby",
    "CreateLobbyRequest",
    "JoinLobbyRequest",
    # Drawing schemas
    "RateDrawingRequest",
    "Drawing",
    "DrawingPath",
    "Point",
]
