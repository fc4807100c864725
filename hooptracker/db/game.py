"""Game Repository - Holds tracked games for the lifetime of a session."""

from abc import abstractmethod
from typing import List, Optional

from .base import BaseRepository, InMemoryRepository
from ..models.game import Game


class GameRepository(BaseRepository[Game]):
    """Abstract interface for game data access."""

    @abstractmethod
    def get_by_player(self, player_id: str) -> List[Game]:
        """Get every game whose roster includes the player, newest first."""
        pass

    @abstractmethod
    def get_recent(self, limit: Optional[int] = None) -> List[Game]:
        """Get games newest first, optionally capped."""
        pass


class InMemoryGameRepository(InMemoryRepository[Game], GameRepository):
    """
    In-memory game store.

    Games are kept in insertion order. Nothing is written to disk; callers
    that need durability must keep their own copy.
    """

    def __init__(self):
        super().__init__(key=lambda game: game.id)

    def get_recent(self, limit: Optional[int] = None) -> List[Game]:
        # sorted() is stable, so same-day games keep insertion order
        games = sorted(self.data.values(), key=lambda g: g.date, reverse=True)
        return games[:limit] if limit is not None else games

    def get_by_player(self, player_id: str) -> List[Game]:
        return [g for g in self.get_recent() if g.has_player(player_id)]
