"""Authentication-related request schemas"""

from typing import Optional

from pydantic import Field

from .base import WireModel


class AuthRequest(WireModel):
    """User login request

    Two construction forms:
        AuthRequest(username="alice", password="secret")
        AuthRequest(username="alice", password="secret", device_id="pixel-7")

    The first leaves ``device_id`` unset (None), which is distinct from an
    empty string and is omitted from the request body.
    """

    username: str = Field(
        ...,
        description="Username or email address",
        examples=["alice", "alice@example.com"]
    )
    password: str = Field(
        ...,
        description="Password",
        examples=["MySecure123"]
    )
    device_id: Optional[str] = Field(
        default=None,
        description="Device identifier used to track sessions",
        examples=["3f9c1a7e-device"]
    )

    def with_device_id(self, device_id: Optional[str]) -> "AuthRequest":
        """Return a copy carrying the given device identifier"""
        return self.model_copy(update={"device_id": device_id})


class RegisterRequest(WireModel):
    """User registration request

    No format checks are applied to email or password here; the backend
    owns that validation. ``device_id`` is not part of the registration
    form: it stays unset until ``with_device_id`` adds it.
    """

    username: str = Field(..., description="Username", examples=["alice"])
    password: str = Field(..., description="Password", examples=["p@ss"])
    email: str = Field(..., description="Email address", examples=["alice@example.com"])
    device_id: Optional[str] = Field(
        default=None,
        description="Device identifier used to track sessions"
    )

    def with_device_id(self, device_id: Optional[str]) -> "RegisterRequest":
        """Return a copy carrying the given device identifier"""
        return self.model_copy(update={"device_id": device_id})


class RefreshTokenRequest(WireModel):
    """Token refresh request"""

    token: str = Field(..., description="Current JWT token")
