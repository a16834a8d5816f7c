"""Base for stored records: field filtering, JSON conversion, partial updates."""
from datetime import datetime
from typing import Any, Dict, Optional, Tuple


def parse_timestamp(value) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return None


def format_timestamp(value) -> Optional[str]:
    return value.isoformat() if isinstance(value, datetime) else value


class Entity:
    FIELDS: Tuple[str, ...] = ("id",)
    TIMESTAMPS: Tuple[str, ...] = ()

    id: str

    @classmethod
    def from_dict(cls, data):
        '''Creates an entity from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        filtered = {k: v for k, v in d.items() if k in cls.FIELDS}
        for k in cls.TIMESTAMPS:
            if k in filtered:
                filtered[k] = parse_timestamp(filtered[k])
        return cls(**filtered)

    def to_dict(self) -> Dict[str, Any]:
        '''Converts the entity to a JSON-ready dictionary.'''
        out: Dict[str, Any] = {}
        for k in self.FIELDS:
            value = getattr(self, k)
            if k in self.TIMESTAMPS:
                value = format_timestamp(value)
            elif isinstance(value, list):
                value = value[:]
            out[k] = value
        return out

    def apply_changes(self, changes: Dict[str, Any]) -> None:
        '''Partial update: only known, mutable fields are touched.'''
        for k, v in changes.items():
            if k == "id" or k in self.TIMESTAMPS or k not in self.FIELDS:
                continue
            setattr(self, k, v)

    def on_created(self, now: datetime) -> None:
        if "created_at" in self.TIMESTAMPS and getattr(self, "created_at", None) is None:
            self.created_at = now

    def on_updated(self, now: datetime) -> None:
        pass

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"
