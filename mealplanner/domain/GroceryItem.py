"""GroceryItem domain entity: one line of a week's shopping list."""
from datetime import datetime
from typing import Optional

from mealplanner.domain.Entity import Entity


class GroceryItem(Entity):
    FIELDS = ("id", "name", "category", "quantity", "estimated_price", "preferred_store",
              "is_completed", "is_from_meal", "associated_meal_id", "week_start_date", "created_at")
    TIMESTAMPS = ("created_at",)

    def __init__(self, id: str = "", name: str = "", category: str = "", quantity: str = "",
                 estimated_price: Optional[str] = None, preferred_store: str = "",
                 is_completed: bool = False, is_from_meal: bool = False,
                 associated_meal_id: Optional[str] = None, week_start_date: str = "",
                 created_at: Optional[datetime] = None):
        self.id = id
        self.name = name
        self.category = category
        self.quantity = quantity
        self.estimated_price = estimated_price
        self.preferred_store = preferred_store
        self.is_completed = is_completed
        # True only for items produced by the grocery list generator
        self.is_from_meal = is_from_meal
        self.associated_meal_id = associated_meal_id
        self.week_start_date = week_start_date
        self.created_at = created_at

    def __str__(self) -> str:
        done = "x" if self.is_completed else " "
        return f"[{done}] {self.name} - {self.quantity} - {self.category} @ {self.preferred_store}"
