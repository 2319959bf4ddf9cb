"""
API Client Package

This package contains HTTP client implementations for
communicating with the DrawIt backend REST API.

Modules:
- base: Base HTTP client with common functionality
- auth: Authentication endpoints
- user: User profile endpoints
- lobby: Lobby endpoints
- game: Game endpoints
- drawing: Drawing and rating endpoints
"""

from .base import APIClient
from .auth import AuthAPI
from .user import UserAPI
from .lobby import LobbyAPI
from .game import GameAPI
from .drawing import DrawingAPI

__all__ = [
    "APIClient",
    "AuthAPI",
    "UserAPI",
    "LobbyAPI",
    "GameAPI",
    "DrawingAPI",
]
