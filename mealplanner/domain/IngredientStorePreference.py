from datetime import datetime
from typing import Optional

from mealplanner.domain.Entity import Entity


class IngredientStorePreference(Entity):
    """Ranked store choice for one ingredient line (lower rank = more preferred)."""

    FIELDS = ("id", "ingredient", "store_id", "preference_rank", "created_at")
    TIMESTAMPS = ("created_at",)

    def __init__(self, id: str = "", ingredient: str = "", store_id: str = "", preference_rank: int = 1,
                 created_at: Optional[datetime] = None):
        self.id = id
        self.ingredient = ingredient
        self.store_id = store_id
        self.preference_rank = preference_rank
        self.created_at = created_at
