"""
Response schemas for API endpoints.

Every backend reply uses the same envelope:
- ApiResponse: generic success/message/data wrapper
- LobbyListResponse: payload of the lobby list endpoint
- AuthResponse: payload of the register/login/refresh endpoints

The success flag and data presence are independent: a successful reply may
carry no data, and a failed reply may still carry a (stale) payload.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import Field

from ..exceptions import ApiError
from .base import WireModel
from .lobby import Lobby
from .user import User


T = TypeVar('T')


class ApiResponse(WireModel, Generic[T]):
    """Generic response envelope.

    Example:
        ApiResponse[User] for a single user reply
        ApiResponse[LobbyListResponse] for the lobby list
        ApiResponse[None] for replies without payload (logout, leave)
    """

    success: bool = Field(False, description="Whether the backend handled the request")
    message: Optional[str] = Field(None, description="Human-readable outcome message")
    data: Optional[T] = Field(None, description="Payload, None when absent")

    @property
    def has_data(self) -> bool:
        """True when a payload is present, regardless of the success flag.

        Empty-but-present payloads (an empty list, a record with default
        fields) count as data; only None is absent.
        """
        return self.data is not None

    @classmethod
    def ok(cls, data: Optional[T] = None, message: Optional[str] = None) -> "ApiResponse[T]":
        """Build a successful envelope"""
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, message: str, data: Optional[T] = None) -> "ApiResponse[T]":
        """Build a failed envelope"""
        return cls(success=False, message=message, data=data)

    def with_success(self, success: bool) -> "ApiResponse[T]":
        return self.model_copy(update={"success": success})

    def with_message(self, message: Optional[str]) -> "ApiResponse[T]":
        return self.model_copy(update={"message": message})

    def with_data(self, data: Optional[T]) -> "ApiResponse[T]":
        return self.model_copy(update={"data": data})

    def unwrap(self) -> T:
        """Return the payload of a successful envelope

        Raises:
            ApiError: If success is false or no payload is present
        """
        if not self.success:
            raise ApiError(self.message or "Request failed")
        if self.data is None:
            raise ApiError(self.message or "Response carries no data")
        return self.data


class LobbyListResponse(WireModel):
    """Lobby list payload

    ``total_count`` is whatever the backend reported (0 when omitted). It is
    never derived from ``len(lobbies)``: with pagination it may exceed the
    size of the returned slice.
    """

    lobbies: List[Lobby] = Field(default_factory=list, description="Lobbies in this reply")
    total_count: int = Field(0, description="Total number of lobbies on the backend")

    def with_lobbies(self, lobbies: List[Lobby]) -> "LobbyListResponse":
        return self.model_copy(update={"lobbies": list(lobbies)})


class AuthResponse(WireModel):
    """Authentication payload (for register/login/refresh)"""

    token: Optional[str] = Field(None, description="JWT access token")
    user: Optional[User] = Field(None, description="Authenticated user")
