"""Database layer - Repository pattern implementations."""

from .base import BaseRepository, InMemoryRepository
from .game import GameRepository, InMemoryGameRepository

__all__ = [
    'BaseRepository',
    'InMemoryRepository',
    'GameRepository',
    'InMemoryGameRepository',
]
