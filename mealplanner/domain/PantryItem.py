"""PantryItem domain entity: stocked ingredient with coarse stock level and optional expiration."""
from datetime import datetime
from typing import Optional

from mealplanner.domain.Entity import Entity


class PantryItem(Entity):
    FIELDS = ("id", "name", "category", "quantity", "expiration_date", "stock_level",
              "created_at", "updated_at")
    TIMESTAMPS = ("created_at", "updated_at")

    def __init__(self, id: str = "", name: str = "", category: str = "", quantity: str = "",
                 expiration_date: Optional[str] = None, stock_level: str = "high",
                 created_at: Optional[datetime] = None, updated_at: Optional[datetime] = None):
        self.id = id
        self.name = name
        self.category = category
        self.quantity = quantity
        self.expiration_date = expiration_date
        self.stock_level = stock_level
        self.created_at = created_at
        self.updated_at = updated_at

    def on_created(self, now: datetime) -> None:
        super().on_created(now)
        self.updated_at = now

    def on_updated(self, now: datetime) -> None:
        self.updated_at = now

    def __str__(self) -> str:
        parts = [f"{self.name} - {self.quantity} ({self.stock_level})"]
        if self.expiration_date:
            parts.append(f"Exp: {self.expiration_date}")
        return " - ".join(parts)
