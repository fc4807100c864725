"""Exceptions raised by the tracker."""


class HoopTrackerError(Exception):
    """Base class for tracker errors."""


class PlayerNotFoundError(HoopTrackerError):
    """A mutation referenced a player who is not on the game's roster."""

    def __init__(self, game_id: str, player_id: str):
        self.game_id = game_id
        self.player_id = player_id
        super().__init__(f"Player {player_id} is not on the roster of game {game_id}")


class InvalidStatKeyError(HoopTrackerError):
    """record_stat was given something other than a recordable counter."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Not a recordable stat: {key!r}")
