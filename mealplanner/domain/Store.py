from typing import List, Optional

from mealplanner.domain.Entity import Entity


class Store(Entity):
    """A shop the household buys from. At most one is expected to be preferred."""

    FIELDS = ("id", "name", "categories", "is_preferred")

    def __init__(self, id: str = "", name: str = "", categories: Optional[List[str]] = None,
                 is_preferred: bool = False):
        self.id = id
        self.name = name
        self.categories = categories[:] if categories else []
        self.is_preferred = is_preferred

    def __str__(self) -> str:
        marker = " (preferred)" if self.is_preferred else ""
        return f"{self.name}{marker}"
