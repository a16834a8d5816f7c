from datetime import datetime
from typing import Optional

from mealplanner.domain.Entity import Entity


class RecipeRating(Entity):
    """One family member's rating of a recipe: 1=okay, 2=good, 3=great."""

    FIELDS = ("id", "recipe_id", "family_member", "rating", "created_at")
    TIMESTAMPS = ("created_at",)

    def __init__(self, id: str = "", recipe_id: str = "", family_member: str = "", rating: int = 1,
                 created_at: Optional[datetime] = None):
        self.id = id
        self.recipe_id = recipe_id
        self.family_member = family_member
        self.rating = rating
        self.created_at = created_at
