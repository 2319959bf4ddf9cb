"""
Tests for the response envelope and response payloads.

Validates that:
- has_data tracks payload presence only, independent of success
- Empty-but-present payloads count as data
- LobbyListResponse keeps the reported total count
- Backend replies decode into typed envelopes
"""

from typing import List

import pytest
from pydantic import ValidationError

from ..exceptions import ApiError
from ..schema import (
    ApiResponse,
    AuthResponse,
    Lobby,
    LobbyListResponse,
    User,
)


class TestApiResponse:
    """Tests for ApiResponse."""

    def test_default_has_no_data(self):
        """A fresh envelope carries no data."""
        response = ApiResponse[User]()

        assert response.success is False
        assert response.message is None
        assert response.data is None
        assert response.has_data is False

    def test_success_without_data(self):
        """success=True does not imply data."""
        response = ApiResponse[None].ok(message="Logged out successfully")

        assert response.success is True
        assert response.has_data is False

    def test_failure_with_stale_data(self):
        """A failed envelope can still carry a payload."""
        response = ApiResponse[User].model_validate({
            "success": False,
            "message": "Profile update rejected",
            "data": {"userId": "u1", "username": "alice"},
        })

        assert response.success is False
        assert response.has_data is True
        assert response.data.username == "alice"

    def test_empty_payloads_are_present(self):
        """Empty list and empty string are data, not absence."""
        assert ApiResponse[List[Lobby]].ok([]).has_data is True
        assert ApiResponse[str].ok("").has_data is True
        assert ApiResponse[LobbyListResponse].ok(LobbyListResponse()).has_data is True

    def test_explicit_null_is_absent(self):
        """data: null on the wire decodes as absent."""
        response = ApiResponse[User].model_validate(
            {"success": False, "message": "Invalid credentials", "data": None}
        )

        assert response.has_data is False

    def test_with_data_round_trip(self):
        """Copy-with replaces data and leaves the original untouched."""
        original = ApiResponse[User].ok()
        user = User(user_id="u1")

        updated = original.with_data(user)

        assert updated.data == user
        assert updated.has_data is True
        assert original.has_data is False
        assert updated.with_data(None).has_data is False

    def test_with_success_and_message(self):
        """success and message can be changed independently."""
        response = ApiResponse[User].ok().with_success(False).with_message("Server error")

        assert response.success is False
        assert response.message == "Server error"
        assert response.has_data is False

    def test_frozen(self):
        """Envelopes cannot be mutated in place."""
        response = ApiResponse[User].ok()

        with pytest.raises(ValidationError):
            response.success = False

    def test_unwrap(self):
        """unwrap returns data of a successful envelope."""
        user = User(user_id="u1")

        assert ApiResponse[User].ok(user).unwrap() == user

    def test_unwrap_failure(self):
        """unwrap raises with the server message on failure."""
        with pytest.raises(ApiError, match="Lobby is full"):
            ApiResponse[Lobby].fail("Lobby is full").unwrap()

    def test_unwrap_missing_data(self):
        """unwrap raises when a successful envelope has no data."""
        with pytest.raises(ApiError):
            ApiResponse[Lobby].ok(message="ok").unwrap()

    def test_wrong_payload_shape(self):
        """Data not matching the payload type is rejected."""
        with pytest.raises(ValidationError):
            ApiResponse[User].model_validate({"success": True, "data": ["not", "a", "user"]})


class TestLobbyListResponse:
    """Tests for LobbyListResponse."""

    def test_total_count_independent_of_lobbies(self):
        """totalCount is kept as given, not derived from the list."""
        response = LobbyListResponse(lobbies=[], total_count=5)

        assert response.lobbies == []
        assert response.total_count == 5

    def test_total_count_from_wire(self):
        """totalCount is read from its wire name."""
        response = LobbyListResponse.model_validate({
            "lobbies": [{"lobbyId": "l1", "name": "Doodles"}],
            "totalCount": 40,
        })

        assert len(response.lobbies) == 1
        assert response.total_count == 40

    def test_total_count_missing(self):
        """A reply without totalCount defaults to 0."""
        response = LobbyListResponse.model_validate({
            "lobbies": [{"lobbyId": "l1"}, {"lobbyId": "l2"}],
        })

        assert len(response.lobbies) == 2
        assert response.total_count == 0

    def test_with_lobbies_keeps_total(self):
        """Replacing the list leaves total_count alone."""
        response = LobbyListResponse(total_count=12)

        updated = response.with_lobbies([Lobby(lobby_id="l1")])

        assert [lobby.lobby_id for lobby in updated.lobbies] == ["l1"]
        assert updated.total_count == 12

    def test_backend_lobby_listing(self):
        """A real backend listing decodes, extra keys ignored."""
        body = {
            "success": True,
            "message": "Lobbies retrieved successfully",
            "data": {
                "lobbies": [{
                    "lobbyId": "abc123",
                    "name": "Friday doodles",
                    "hostId": "u1",
                    "maxPlayers": 4,
                    "isPrivate": False,
                    "players": [
                        {"userId": "u1", "username": "alice", "avatarUrl": None, "ready": True},
                    ],
                    "isLocked": False,
                    "numRounds": 5,
                    "roundDurationSeconds": 90,
                    "playerCount": 1,
                    "createdAt": "2024-05-01T10:00:00.000Z",
                    "someFutureField": "ignored",
                }],
            },
        }

        response = ApiResponse[LobbyListResponse].model_validate(body)

        lobby = response.data.lobbies[0]
        assert response.has_data is True
        assert lobby.lobby_id == "abc123"
        assert lobby.name == "Friday doodles"
        assert lobby.num_rounds == 5
        assert lobby.round_duration_seconds == 90
        assert lobby.players[0].ready is True
        assert lobby.created_at.year == 2024
        assert response.data.total_count == 0


class TestAuthResponse:
    """Tests for AuthResponse."""

    def test_decode_login_reply(self):
        """Login payload decodes token and user."""
        response = ApiResponse[AuthResponse].model_validate({
            "success": True,
            "message": "Login successful",
            "data": {
                "token": "aaa.bbb.ccc",
                "user": {
                    "userId": "u1",
                    "username": "alice",
                    "email": "alice@example.com",
                    "totalGamesPlayed": 3,
                    "gamesWon": 1,
                    "ready": False,
                },
            },
        })

        assert response.data.token == "aaa.bbb.ccc"
        assert response.data.user.games_won == 1
        assert response.data.user.total_games_played == 3
