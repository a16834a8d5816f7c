"""Ingredient categorizer.

Maps a free-text ingredient line to a grocery category by keyword
containment. Rules are tested in order and the first match wins, so
"tomato sauce" lands in Produce and "coconut milk" in Dairy.
"""
from typing import Tuple

from mealplanner.utilities.constants import (
    DAIRY, GRAINS_AND_PASTA, MEAT_AND_SEAFOOD, PANTRY_ESSENTIALS, PRODUCE
)

CATEGORY_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (MEAT_AND_SEAFOOD, ("beef", "chicken", "meat")),
    (DAIRY, ("milk", "cheese", "yogurt")),
    (PRODUCE, ("apple", "berry", "lettuce", "tomato")),
    (GRAINS_AND_PASTA, ("pasta", "rice", "oats", "bread")),
)
DEFAULT_CATEGORY = PANTRY_ESSENTIALS


def categorize(ingredient_text: str) -> str:
    """Return the grocery category for an ingredient line. Never fails."""
    text = ingredient_text.lower() if isinstance(ingredient_text, str) else ""
    for category, keywords in CATEGORY_RULES:
        if any(k in text for k in keywords):
            return category
    return DEFAULT_CATEGORY

__all__ = ['categorize', 'CATEGORY_RULES', 'DEFAULT_CATEGORY']
