"""Recipe rating aggregation.

Single place that turns RecipeRating records into the numbers shown next to
a recipe (average, 0-3 stars, label). Ratings are 1=okay, 2=good, 3=great.
"""
from collections import OrderedDict
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Optional

from mealplanner.domain.RecipeRating import RecipeRating
from mealplanner.utilities.constants import MAX_RATING, RATING_LABELS


def average_rating(ratings: Iterable[RecipeRating]) -> Optional[float]:
    values = [r.rating for r in ratings]
    if not values:
        return None
    return round(sum(values) / len(values), 2)


def star_rating(ratings: Iterable[RecipeRating]) -> int:
    """Average rounded half-up to whole stars (0 when nobody rated the recipe)."""
    avg = average_rating(ratings)
    if avg is None:
        return 0
    stars = int(Decimal(str(avg)).quantize(Decimal('1'), rounding=ROUND_HALF_UP))
    return max(0, min(MAX_RATING, stars))


def is_favorite(ratings: Iterable[RecipeRating]) -> bool:
    return star_rating(ratings) == MAX_RATING


def summarize_ratings(ratings: Iterable[RecipeRating]) -> Dict[str, Any]:
    """Summary for one recipe.

    ``by_member`` keeps each family member's most recent rating (by created_at,
    then input order).
    """
    ratings = list(ratings)
    stars = star_rating(ratings)
    by_member: Dict[str, int] = OrderedDict()
    ordered = sorted(enumerate(ratings), key=lambda p: (p[1].created_at is not None, p[1].created_at or 0, p[0]))
    for _, r in ordered:
        by_member[r.family_member] = r.rating
    return {
        'count': len(ratings),
        'average': average_rating(ratings),
        'stars': stars,
        'label': RATING_LABELS.get(stars, 'unrated'),
        'by_member': dict(by_member),
    }


def ratings_by_recipe(ratings: Iterable[RecipeRating]) -> Dict[str, List[RecipeRating]]:
    grouped: Dict[str, List[RecipeRating]] = {}
    for r in ratings:
        grouped.setdefault(r.recipe_id, []).append(r)
    return grouped

__all__ = ['average_rating', 'star_rating', 'is_favorite', 'summarize_ratings', 'ratings_by_recipe']
