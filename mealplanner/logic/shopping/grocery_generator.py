"""Grocery list generation.

Rebuilds the meal-derived part of a week's grocery list from that week's
meal plan. Items added by hand (``is_from_meal=False``) are never touched.

Steps, in order:
  1. read the week's meal plans
  2. read the recipe catalogue and the store list
  3. delete the week's existing meal-derived items
  4. create one item per ingredient line of every planned, non-leftover recipe
  5. return the created items

There is no transaction: a StorageError aborts the run and whatever was
already deleted or created stays that way.
"""
import logging
from typing import List

from mealplanner.domain.GroceryItem import GroceryItem
from mealplanner.infra.Storage import Storage
from mealplanner.logic.shopping.categorizer import categorize
from mealplanner.logic.shopping.store_resolver import default_store_name
from mealplanner.utilities.constants import PLACEHOLDER_PRICE, PLACEHOLDER_QUANTITY

logger = logging.getLogger(__name__)


def generate_grocery_list(storage: Storage, week_start_date: str) -> List[GroceryItem]:
    """Regenerate the meal-derived grocery items for ``week_start_date``.

    Args:
        storage: repository bundle to read from and write to.
        week_start_date: week identifier (Monday, YYYY-MM-DD), used as an opaque key.

    Returns:
        The newly created GroceryItems, in meal plan then ingredient order.
        Preserved manual items are not included.
    """
    meal_plans = storage.meal_plans.get_by_filter(week_start_date=week_start_date)
    recipes = {r.id: r for r in storage.recipes.get_all()}
    store_name = default_store_name(storage.stores.get_all())

    existing = storage.grocery_items.get_by_filter(week_start_date=week_start_date)
    removed = 0
    for item in existing:
        if item.is_from_meal:
            storage.grocery_items.delete(item.id)
            removed += 1

    created: List[GroceryItem] = []
    for plan in meal_plans:
        if not plan.recipe_id or plan.is_leftover:
            continue
        recipe = recipes.get(plan.recipe_id)
        if recipe is None:
            logger.debug(f"Meal plan {plan.id} references missing recipe {plan.recipe_id}; skipped")
            continue
        for ingredient in recipe.ingredients:
            created.append(storage.grocery_items.create({
                "name": ingredient,
                "category": categorize(ingredient),
                "quantity": PLACEHOLDER_QUANTITY,
                "estimated_price": PLACEHOLDER_PRICE,
                "preferred_store": store_name,
                "is_completed": False,
                "is_from_meal": True,
                "associated_meal_id": plan.id,
                "week_start_date": week_start_date,
            }))

    logger.info("Grocery list for week %s: removed %d meal items, created %d",
                week_start_date, removed, len(created))
    return created

__all__ = ['generate_grocery_list']
