"""Recipe domain entity: name, cuisine, prep time, servings, ingredient lines, tags."""
from datetime import datetime
from typing import List, Optional

from mealplanner.domain.Entity import Entity


class Recipe(Entity):
    FIELDS = ("id", "name", "cuisine", "prep_time", "servings", "ingredients", "instructions",
              "tags", "makes_leftovers", "non_perishable_base", "image_url", "created_at")
    TIMESTAMPS = ("created_at",)

    def __init__(self, id: str = "", name: str = "", cuisine: str = "", prep_time: int = 0,
                 servings: int = 1, ingredients: Optional[List[str]] = None, instructions: str = "",
                 tags: Optional[List[str]] = None, makes_leftovers: bool = False,
                 non_perishable_base: bool = False, image_url: Optional[str] = None,
                 created_at: Optional[datetime] = None):
        self.id = id
        self.name = name
        self.cuisine = cuisine
        self.prep_time = prep_time
        self.servings = servings
        # Ingredient lines are free text; the same line may appear in several recipes
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions
        self.tags = tags[:] if tags else []
        self.makes_leftovers = makes_leftovers
        self.non_perishable_base = non_perishable_base
        self.image_url = image_url
        self.created_at = created_at

    def __str__(self) -> str:
        return f"{self.name} ({self.cuisine}) - {self.servings} servings - {self.prep_time} min - Tags: {', '.join(self.tags)}"
