"""
DrawIt Exceptions

Responsibilities:
- Define the client-side exception hierarchy
- Provide clear error messages for different failure scenarios
- Carry error context (HTTP status, server message) for debugging

All exceptions inherit from DrawItSDKError so callers can catch every
client error with a single except clause.
"""


class DrawItSDKError(Exception):
    """
    Base exception for all DrawIt client errors.

    Attributes:
        message: Error message
        details: Optional dict with additional error context
    """

    def __init__(self, message: str, details: dict = None):
        """Initialize client error."""
        super().__init__(message)
        self.message = message
        self.details = details or {}


class AuthenticationError(DrawItSDKError):
    """
    Authentication failed.

    Raised when:
    - Login credentials are invalid (HTTP 401)
    - JWT token is missing, invalid or expired (HTTP 401/403)
    - Login or registration reply carries no token
    """
    pass


class ConnectionError(DrawItSDKError):
    """
    Connection to the backend failed.

    Raised when:
    - Network connection fails
    - Backend is unreachable
    - Request times out at the transport level
    """
    pass


class NotFoundError(DrawItSDKError):
    """
    Resource not found (HTTP 404).

    Raised when:
    - Lobby, user, game or drawing doesn't exist
    - Endpoint path is unknown to the backend
    """
    pass


class ValidationError(DrawItSDKError):
    """
    Reply validation failed.

    Raised when:
    - The reply body is not JSON
    - The reply is not a success/message/data envelope
    - The envelope's data doesn't match the endpoint's payload type
    """
    pass


class ApiError(DrawItSDKError):
    """
    Backend reported a failure.

    Raised when:
    - The backend answers with a non-2xx status not covered above
    - ApiResponse.unwrap() is called on a failed or empty envelope

    The server's message is the exception message; the HTTP status,
    when known, is in details["status_code"].
    """
    pass
