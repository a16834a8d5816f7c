"""Repository abstraction: one repository per entity type.

Callers depend on ``Repository`` only; backends are swappable
(``InMemoryRepository`` here, ``JsonFileRepository`` for files).
There are no transactions: each call is applied on its own.
"""
import copy
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar
from uuid import uuid4

from mealplanner.domain.Entity import Entity

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class StorageError(Exception):
    """The backing store could not be read or written."""


def new_id() -> str:
    return str(uuid4())


class Repository(ABC, Generic[E]):
    def __init__(self, entity_cls: Type[E], clock: Callable[[], datetime] = datetime.now):
        self.entity_cls = entity_cls
        self._clock = clock

    @abstractmethod
    def get_all(self) -> List[E]:
        ...

    @abstractmethod
    def get_by_id(self, entity_id: str) -> Optional[E]:
        ...

    @abstractmethod
    def create(self, fields: dict) -> E:
        '''Stores a new record; assigns id and creation timestamp.'''

    @abstractmethod
    def update(self, entity_id: str, changes: dict) -> Optional[E]:
        '''Applies a partial update. Returns None if the id is unknown.'''

    @abstractmethod
    def delete(self, entity_id: str) -> bool:
        '''Returns False if the id is unknown.'''

    def get_by_filter(self, **criteria) -> List[E]:
        '''Records whose attributes equal every given criterion.'''
        return [e for e in self.get_all()
                if all(getattr(e, k, None) == v for k, v in criteria.items())]

    def _build(self, fields: dict) -> E:
        entity = self.entity_cls.from_dict({**fields, "id": new_id()})
        entity.on_created(self._clock())
        return entity

    def _modify(self, entity: E, changes: dict) -> E:
        entity.apply_changes(changes)
        entity.on_updated(self._clock())
        return entity


class InMemoryRepository(Repository[E]):
    """Dict-backed repository. Hands out copies so stored records only change through it."""

    def __init__(self, entity_cls: Type[E], clock: Callable[[], datetime] = datetime.now):
        super().__init__(entity_cls, clock)
        self._records: Dict[str, E] = {}

    def get_all(self) -> List[E]:
        return [copy.deepcopy(e) for e in self._records.values()]

    def get_by_id(self, entity_id: str) -> Optional[E]:
        entity = self._records.get(entity_id)
        return copy.deepcopy(entity) if entity is not None else None

    def create(self, fields: dict) -> E:
        entity = self._build(fields)
        self._records[entity.id] = entity
        logger.debug("Created %s %s", self.entity_cls.__name__, entity.id)
        return copy.deepcopy(entity)

    def update(self, entity_id: str, changes: dict) -> Optional[E]:
        entity = self._records.get(entity_id)
        if entity is None:
            return None
        self._modify(entity, changes)
        return copy.deepcopy(entity)

    def delete(self, entity_id: str) -> bool:
        return self._records.pop(entity_id, None) is not None

    def __len__(self) -> int:
        return len(self._records)
