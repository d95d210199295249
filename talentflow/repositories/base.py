"""
Base Repository - TalentFlow
talentflow/repositories/base.py

Typed CRUD over one backend collection. Records are stored as camelCase
JSON dicts and returned as pydantic models.
"""

from typing import Callable, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from talentflow.core.exceptions import DuplicateEntityException, EntityNotFoundException
from talentflow.repositories.backends import Record, StorageBackend

T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """Base repository for one collection of models with a string ``id``."""

    COLLECTION: str = ""
    MODEL: Type[T]
    ENTITY_NAME: str = "Entity"

    def __init__(self, backend: StorageBackend):
        self.backend = backend

    # Serialization

    def to_record(self, item: T) -> Record:
        return item.model_dump(mode="json", by_alias=True)

    def from_record(self, record: Record) -> T:
        return self.MODEL.model_validate(record)

    def _load(self) -> List[T]:
        return [self.from_record(r) for r in self.backend.load(self.COLLECTION)]

    def _save(self, items: List[T]) -> None:
        self.backend.save(self.COLLECTION, [self.to_record(i) for i in items])

    # Queries

    def get_all(self) -> List[T]:
        """
        Retrieve every stored item, in insertion order.
        """
        return self._load()

    def find(self, predicate: Callable[[T], bool]) -> List[T]:
        return [item for item in self._load() if predicate(item)]

    def get_by_id(self, item_id: str) -> Optional[T]:
        """
        Retrieve an item by ID.

        Returns:
            The item or None if not found
        """
        for item in self._load():
            if item.id == item_id:
                return item
        return None

    def get_or_raise(self, item_id: str) -> T:
        item = self.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundException(self.ENTITY_NAME, item_id)
        return item

    # Mutations

    def add(self, item: T) -> T:
        """
        Append a new item.

        Raises:
            DuplicateEntityException: an item with the same id exists
        """
        items = self._load()
        if any(existing.id == item.id for existing in items):
            raise DuplicateEntityException(f"{self.ENTITY_NAME} with ID {item.id} already exists")
        items.append(item)
        self._save(items)
        return item

    def replace(self, item_id: str, item: T) -> T:
        """
        Replace an existing item, keeping its position.

        Raises:
            EntityNotFoundException: no item with that id
        """
        items = self._load()
        for index, existing in enumerate(items):
            if existing.id == item_id:
                items[index] = item
                self._save(items)
                return item
        raise EntityNotFoundException(self.ENTITY_NAME, item_id)

    def delete(self, item_id: str) -> None:
        """
        Raises:
            EntityNotFoundException: no item with that id
        """
        items = self._load()
        remaining = [i for i in items if i.id != item_id]
        if len(remaining) == len(items):
            raise EntityNotFoundException(self.ENTITY_NAME, item_id)
        self._save(remaining)

    def add_many(self, new_items: List[T]) -> None:
        """Bulk append without duplicate checks (seeding)."""
        items = self._load()
        items.extend(new_items)
        self._save(items)

    def count(self) -> int:
        return len(self.backend.load(self.COLLECTION))
