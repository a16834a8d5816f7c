"""Recipe browsing: text search plus the All / Favorites / cuisine filter."""
from typing import Dict, List, Optional, Sequence

from mealplanner.domain.Recipe import Recipe
from mealplanner.domain.RecipeRating import RecipeRating
from mealplanner.logic.reporting.ratings import is_favorite

ALL = "All"
FAVORITES = "Favorites"


def _matches_search(recipe: Recipe, needle: str) -> bool:
    if not needle:
        return True
    return (needle in recipe.name.lower()
            or needle in recipe.cuisine.lower()
            or any(needle in tag.lower() for tag in recipe.tags))


def filter_recipes(recipes: Sequence[Recipe], search: str = "", selected: str = ALL,
                   ratings_by_recipe: Optional[Dict[str, List[RecipeRating]]] = None) -> List[Recipe]:
    """Filter the catalogue.

    Args:
        search: case-insensitive substring matched against name, cuisine and tags.
        selected: "All", "Favorites" (three-star average) or a cuisine name.
        ratings_by_recipe: recipe id -> ratings, needed for "Favorites".
    """
    needle = (search or "").strip().lower()
    selected = (selected or ALL).strip()
    ratings_by_recipe = ratings_by_recipe or {}
    result = []
    for recipe in recipes:
        if not _matches_search(recipe, needle):
            continue
        if selected.lower() == ALL.lower():
            result.append(recipe)
        elif selected.lower() == FAVORITES.lower():
            if is_favorite(ratings_by_recipe.get(recipe.id, [])):
                result.append(recipe)
        elif recipe.cuisine.lower() == selected.lower():
            result.append(recipe)
    return result

__all__ = ['filter_recipes', 'ALL', 'FAVORITES']
