from abc import ABC, abstractmethod
from typing import Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar('T')


class BaseRepository(ABC, Generic[T]):
    """Abstract store of entities keyed by a string id."""

    @abstractmethod
    def get_by_id(self, entity_id: str) -> Optional[T]:
        """Entity with this id, or None."""

    @abstractmethod
    def get_all(self) -> List[T]:
        """Every entity, in insertion order."""

    @abstractmethod
    def save(self, entity: T) -> None:
        """Insert or replace an entity under its id."""

    @abstractmethod
    def delete(self, entity_id: str) -> bool:
        """Remove an entity. Returns True if it existed."""

    @abstractmethod
    def exists(self, entity_id: str) -> bool:
        pass


class InMemoryRepository(BaseRepository[T]):
    """
    Dict-backed store shared by the in-memory repositories.

    Args:
        key: Function returning an entity's id
    """

    def __init__(self, key: Callable[[T], str]):
        self._key = key
        self.data: Dict[str, T] = {}

    def get_by_id(self, entity_id: str) -> Optional[T]:
        return self.data.get(entity_id)

    def get_all(self) -> List[T]:
        return list(self.data.values())

    def save(self, entity: T) -> None:
        self.data[self._key(entity)] = entity

    def delete(self, entity_id: str) -> bool:
        return self.data.pop(entity_id, None) is not None

    def exists(self, entity_id: str) -> bool:
        return entity_id in self.data
