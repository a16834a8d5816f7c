"""JSON file repository: one file per entity type holding a list of records."""
import json
import logging
import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional, Type

from mealplanner.infra.Repository import E, Repository, StorageError

logger = logging.getLogger(__name__)


class JsonFileRepository(Repository[E]):
    def __init__(self, entity_cls: Type[E], path: Path, clock: Callable[[], datetime] = datetime.now):
        super().__init__(entity_cls, clock)
        self.path = Path(path)

    # --- File helpers -----------------------------------------------------
    def _load(self) -> Dict[str, E]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f) or []
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {self.path}: {e}")
            raise StorageError(f"Invalid JSON in {self.path.name}") from e
        except OSError as e:
            logger.error(f"Error reading {self.path}: {e}")
            raise StorageError(f"Cannot read {self.path.name}") from e
        if not isinstance(data, list):
            raise StorageError(f"{self.path.name} does not hold a list of records")
        records = (self.entity_cls.from_dict(entry) for entry in data)
        return {r.id: r for r in records}

    def _atomic_write(self, records: Dict[str, E]) -> None:
        payload = [r.to_dict() for r in records.values()]
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.stem}_", suffix=".json")
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(payload, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Error writing {self.path}: {e}")
            raise StorageError(f"Cannot write {self.path.name}") from e
        finally:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)

    # --- Repository API ---------------------------------------------------
    def get_all(self) -> List[E]:
        return list(self._load().values())

    def get_by_id(self, entity_id: str) -> Optional[E]:
        return self._load().get(entity_id)

    def create(self, fields: dict) -> E:
        records = self._load()
        entity = self._build(fields)
        records[entity.id] = entity
        self._atomic_write(records)
        return entity

    def update(self, entity_id: str, changes: dict) -> Optional[E]:
        records = self._load()
        entity = records.get(entity_id)
        if entity is None:
            return None
        self._modify(entity, changes)
        self._atomic_write(records)
        return entity

    def delete(self, entity_id: str) -> bool:
        records = self._load()
        if records.pop(entity_id, None) is None:
            return False
        self._atomic_write(records)
        return True
