"""
DrawIt SDK - async REST client for the DrawIt backend

Main Components:
- DrawItClient: Main entry point for SDK usage
- AuthManager: JWT token lifecycle
- API Clients: endpoint wrappers returning ApiResponse envelopes

Usage:
    from drawit.sdk import DrawItClient

    async with DrawItClient() as client:
        await client.login("alice", "secret")
        reply = await client.lobbies.list_lobbies()
"""

from .client import DrawItClient
from .auth import AuthManager
from ..exceptions import (
    DrawItSDKError,
    AuthenticationError,
    ConnectionError,
    NotFoundError,
    ValidationError,
    ApiError,
)

__all__ = [
    "DrawItClient",
    "AuthManager",
    "DrawItSDKError",
    "AuthenticationError",
    "ConnectionError",
    "NotFoundError",
    "ValidationError",
    "ApiError",
]
