"""Storage bundle: the seven entity repositories plus factories and demo data."""
import logging
from pathlib import Path
from typing import Optional

from mealplanner.domain.GroceryItem import GroceryItem
from mealplanner.domain.IngredientStorePreference import IngredientStorePreference
from mealplanner.domain.MealPlan import MealPlan
from mealplanner.domain.PantryItem import PantryItem
from mealplanner.domain.Recipe import Recipe
from mealplanner.domain.RecipeRating import RecipeRating
from mealplanner.domain.Store import Store
from mealplanner.infra.Json_Repository import JsonFileRepository
from mealplanner.infra.Repository import InMemoryRepository, Repository
from mealplanner.infra.paths import entity_file
from mealplanner.utilities import config

logger = logging.getLogger(__name__)

ENTITY_TYPES = {
    'recipes': Recipe,
    'meal_plans': MealPlan,
    'recipe_ratings': RecipeRating,
    'grocery_items': GroceryItem,
    'pantry_items': PantryItem,
    'stores': Store,
    'ingredient_store_preferences': IngredientStorePreference,
}


class Storage:
    def __init__(self, recipes: Repository[Recipe], meal_plans: Repository[MealPlan],
                 recipe_ratings: Repository[RecipeRating], grocery_items: Repository[GroceryItem],
                 pantry_items: Repository[PantryItem], stores: Repository[Store],
                 ingredient_store_preferences: Repository[IngredientStorePreference]):
        self.recipes = recipes
        self.meal_plans = meal_plans
        self.recipe_ratings = recipe_ratings
        self.grocery_items = grocery_items
        self.pantry_items = pantry_items
        self.stores = stores
        self.ingredient_store_preferences = ingredient_store_preferences

    def is_empty(self) -> bool:
        return not any(getattr(self, name).get_all() for name in ENTITY_TYPES)


def create_memory_storage(seed: bool = False) -> Storage:
    storage = Storage(**{name: InMemoryRepository(cls) for name, cls in ENTITY_TYPES.items()})
    if seed:
        seed_default_data(storage)
    return storage


def create_json_storage(data_dir: Path, seed: bool = False) -> Storage:
    storage = Storage(**{name: JsonFileRepository(cls, entity_file(data_dir, name))
                         for name, cls in ENTITY_TYPES.items()})
    # Only a fresh data directory gets the demo catalogue
    if seed and storage.is_empty():
        seed_default_data(storage)
    return storage


def create_storage_from_config(backend: Optional[str] = None) -> Storage:
    backend = backend or config.STORAGE_BACKEND
    if backend == 'json':
        logger.info(f"Using JSON storage in {config.DATA_DIR}")
        return create_json_storage(config.DATA_DIR, seed=config.SEED_DEFAULT_DATA)
    if backend != 'memory':
        raise ValueError(f"Unknown storage backend: {backend!r}")
    return create_memory_storage(seed=config.SEED_DEFAULT_DATA)


DEFAULT_STORES = [
    {"name": "Whole Foods", "categories": ["produce", "meat", "dairy", "pantry"], "is_preferred": True},
    {"name": "Target", "categories": ["pantry", "frozen", "household"], "is_preferred": False},
    {"name": "Costco", "categories": ["bulk", "meat", "pantry"], "is_preferred": False},
]

DEFAULT_RECIPES = [
    {
        "name": "Spaghetti Carbonara", "cuisine": "Italian", "prep_time": 25, "servings": 4,
        "ingredients": ["spaghetti pasta", "eggs", "parmesan cheese", "bacon", "black pepper"],
        "instructions": "Cook pasta, fry bacon, mix with eggs and cheese, combine with pasta.",
        "tags": ["dinner", "pasta", "quick"], "makes_leftovers": True, "non_perishable_base": True,
        "image_url": "https://images.unsplash.com/photo-1621996346565-e3dbc353d2e5?w=800&h=600&fit=crop",
    },
    {
        "name": "Chicken Tikka Masala", "cuisine": "Indian", "prep_time": 60, "servings": 6,
        "ingredients": ["chicken breast", "coconut milk", "tomato sauce", "garam masala", "basmati rice"],
        "instructions": "Marinate chicken, cook in spiced tomato sauce, serve with rice.",
        "tags": ["dinner", "curry", "spicy"], "makes_leftovers": True, "non_perishable_base": True,
        "image_url": "https://images.unsplash.com/photo-1565557623262-b51c2513a641?w=800&h=600&fit=crop",
    },
    {
        "name": "Simple Pasta with Marinara", "cuisine": "Italian", "prep_time": 15, "servings": 2,
        "ingredients": ["pasta", "marinara sauce", "parmesan cheese", "basil"],
        "instructions": "Cook pasta, heat sauce, combine and serve with cheese.",
        "tags": ["dinner", "simple", "quick"], "makes_leftovers": False, "non_perishable_base": True,
        "image_url": "https://images.unsplash.com/photo-1571771894821-ce9b6c11b08e?w=800&h=600&fit=crop",
    },
    {
        "name": "Beef Tacos", "cuisine": "Mexican", "prep_time": 30, "servings": 4,
        "ingredients": ["ground beef", "taco shells", "lettuce", "tomatoes", "cheese", "sour cream"],
        "instructions": "Cook ground beef with spices, warm taco shells, assemble with toppings.",
        "tags": ["dinner", "mexican", "family-friendly"], "makes_leftovers": True, "non_perishable_base": False,
        "image_url": "https://images.unsplash.com/photo-1565299624946-b28f40a0ca4b?w=800&h=600&fit=crop",
    },
]

DEFAULT_PANTRY_ITEMS = [
    {"name": "Diced Tomatoes", "category": "Canned Goods", "quantity": "4 cans",
     "expiration_date": "2024-03-15", "stock_level": "high"},
    {"name": "Coconut Milk", "category": "Canned Goods", "quantity": "1 can",
     "expiration_date": "2024-02-28", "stock_level": "low"},
    {"name": "Basmati Rice", "category": "Grains & Pasta", "quantity": "2 lbs",
     "expiration_date": "2024-12-31", "stock_level": "high"},
    {"name": "Spaghetti", "category": "Grains & Pasta", "quantity": "0 boxes",
     "expiration_date": None, "stock_level": "empty"},
]

# (ingredient, store name, rank)
DEFAULT_PREFERENCES = [
    ("chicken breast", "Whole Foods", 1),
    ("chicken breast", "Costco", 2),
    ("ground beef", "Costco", 1),
    ("ground beef", "Whole Foods", 2),
    ("spaghetti pasta", "Target", 1),
    ("spaghetti pasta", "Whole Foods", 2),
    ("marinara sauce", "Target", 1),
    ("marinara sauce", "Whole Foods", 2),
    ("parmesan cheese", "Whole Foods", 1),
    ("parmesan cheese", "Target", 2),
]


def seed_default_data(storage: Storage) -> None:
    """Load the demo catalogue: stores, recipes, pantry stock and store preferences."""
    stores = {s["name"]: storage.stores.create(s) for s in DEFAULT_STORES}
    for recipe in DEFAULT_RECIPES:
        storage.recipes.create(recipe)
    for item in DEFAULT_PANTRY_ITEMS:
        storage.pantry_items.create(item)
    for ingredient, store_name, rank in DEFAULT_PREFERENCES:
        storage.ingredient_store_preferences.create({
            "ingredient": ingredient,
            "store_id": stores[store_name].id,
            "preference_rank": rank,
        })
    logger.info("Seeded default data: %d stores, %d recipes, %d pantry items",
                len(DEFAULT_STORES), len(DEFAULT_RECIPES), len(DEFAULT_PANTRY_ITEMS))
