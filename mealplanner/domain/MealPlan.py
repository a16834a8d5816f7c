"""MealPlan domain entity: one meal slot (day + meal type) of a Monday-anchored week.

A slot holds either a recipe from the catalogue or a free-text custom meal.
Storage keeps the two nullable fields ``recipe_id`` and ``custom_meal_name``;
``MealPlan.meal`` exposes them as a tagged variant.
"""
from datetime import datetime
from typing import NamedTuple, Optional, Tuple, Union

from mealplanner.domain.Entity import Entity


class RecipeMeal(NamedTuple):
    recipe_id: str


class CustomMeal(NamedTuple):
    name: str


Meal = Union[RecipeMeal, CustomMeal]


class MealPlan(Entity):
    FIELDS = ("id", "week_start_date", "day_of_week", "meal_type", "recipe_id",
              "custom_meal_name", "is_leftover", "created_at")
    TIMESTAMPS = ("created_at",)

    def __init__(self, id: str = "", week_start_date: str = "", day_of_week: int = 0,
                 meal_type: str = "dinner", recipe_id: Optional[str] = None,
                 custom_meal_name: Optional[str] = None, is_leftover: bool = False,
                 created_at: Optional[datetime] = None):
        self.id = id
        self.week_start_date = week_start_date
        self.day_of_week = day_of_week  # 0=Sunday .. 6=Saturday
        self.meal_type = meal_type
        self.recipe_id = recipe_id
        self.custom_meal_name = custom_meal_name
        self.is_leftover = is_leftover
        self.created_at = created_at

    @property
    def meal(self) -> Optional[Meal]:
        '''The slot's content; a recipe reference wins over a custom name.'''
        if self.recipe_id:
            return RecipeMeal(self.recipe_id)
        if self.custom_meal_name:
            return CustomMeal(self.custom_meal_name)
        return None

    @staticmethod
    def meal_fields(meal: Optional[Meal]) -> Tuple[Optional[str], Optional[str]]:
        '''Splits a variant back into (recipe_id, custom_meal_name).'''
        if isinstance(meal, RecipeMeal):
            return meal.recipe_id, None
        if isinstance(meal, CustomMeal):
            return None, meal.name
        return None, None

    @classmethod
    def from_meal(cls, week_start_date: str, day_of_week: int, meal_type: str,
                  meal: Optional[Meal], is_leftover: bool = False, id: str = ""):
        recipe_id, custom_meal_name = cls.meal_fields(meal)
        return cls(id=id, week_start_date=week_start_date, day_of_week=day_of_week,
                   meal_type=meal_type, recipe_id=recipe_id,
                   custom_meal_name=custom_meal_name, is_leftover=is_leftover)

    def __str__(self) -> str:
        meal = self.meal
        if isinstance(meal, RecipeMeal):
            what = f"recipe {meal.recipe_id}"
        elif isinstance(meal, CustomMeal):
            what = meal.name
        else:
            what = "-"
        leftover = " (leftover)" if self.is_leftover else ""
        return f"{self.week_start_date} day {self.day_of_week} {self.meal_type}: {what}{leftover}"
