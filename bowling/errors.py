from __future__ import annotations


class BowlingError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 400
    code = "bowling_error"

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidFrame(BowlingError):
    code = "invalid_frame"

    def __init__(self, message: str, *, frame_id: int | None = None, rolls: list[str] | None = None) -> None:
        details = {}
        if frame_id is not None:
            details["frame_id"] = frame_id
        if rolls is not None:
            details["rolls"] = list(rolls)
        super().__init__(message, details=details or None)
        self.frame_id = frame_id


class InvalidRoll(InvalidFrame):
    """A roll token that is not X, / or a single digit.

    A frame holding such a token is itself invalid, hence the parent class.
    """

    code = "invalid_roll"

    def __init__(self, token: object, *, frame_id: int | None = None) -> None:
        super().__init__(f"Invalid roll value: {token}", frame_id=frame_id)
        self.token = token
        self.details = {**(self.details or {}), "token": str(token)}


class FrameLimitExceeded(BowlingError):
    code = "frame_limit_exceeded"

    def __init__(self, player_name: str) -> None:
        super().__init__(
            "Exceeded the frame limit. Players cannot have more than 10 frames.",
            details={"player_name": player_name},
        )


class InvalidIdentifier(BowlingError):
    code = "invalid_identifier"

    def __init__(self, kind: str, value: str) -> None:
        super().__init__(f"Invalid {kind} ID: {value}", details={kind + "_id": value})


class GameNotFound(BowlingError):
    status_code = 404
    code = "game_not_found"

    def __init__(self, game_id: object) -> None:
        super().__init__(f"Game with ID {game_id} not found", details={"game_id": str(game_id)})


class PlayerNotFound(BowlingError):
    status_code = 404
    code = "player_not_found"

    def __init__(self, player_id: object, game_id: object) -> None:
        super().__init__(
            f"Player with ID {player_id} not found in game {game_id}",
            details={"player_id": str(player_id), "game_id": str(game_id)},
        )


class Conflict(BowlingError):
    status_code = 409
    code = "conflict"

    def __init__(self, game_id: object) -> None:
        super().__init__(
            f"Game {game_id} was modified concurrently, please retry",
            details={"game_id": str(game_id)},
        )


class GameNameTaken(BowlingError):
    status_code = 409
    code = "game_name_taken"

    def __init__(self, name: str) -> None:
        super().__init__(f"Game name '{name}' already exists", details={"name": name})
