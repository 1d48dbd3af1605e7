from __future__ import annotations


class InspectorError(ValueError):
    """Base class for every recoverable error raised by the game core."""


class RosterError(InspectorError):
    """A submitted player name was rejected."""


class NameTooLong(RosterError):
    def __init__(self, name: str, max_length: int):
        self.name = name
        self.max_length = max_length
        super().__init__(f"Name is too long (max {max_length}).")


class GameError(InspectorError):
    """A round could not be dealt."""


class InsufficientPlayers(GameError):
    def __init__(self, player_count: int, min_players: int, impostor_count: int):
        self.player_count = player_count
        self.min_players = min_players
        self.impostor_count = impostor_count
        super().__init__(
            f"Need at least {min_players} players and at least "
            f"{impostor_count + 1} names so there are non-impostor cards "
            f"(got {player_count})."
        )
