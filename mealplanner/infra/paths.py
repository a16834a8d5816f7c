from pathlib import Path

# One JSON file per entity type, relative to the configured data directory
ENTITY_FILES = {
    'recipes': 'recipes.json',
    'meal_plans': 'meal_plans.json',
    'recipe_ratings': 'recipe_ratings.json',
    'grocery_items': 'grocery_items.json',
    'pantry_items': 'pantry_items.json',
    'stores': 'stores.json',
    'ingredient_store_preferences': 'ingredient_store_preferences.json',
}


def entity_file(data_dir: Path, entity: str) -> Path:
    return (Path(data_dir) / ENTITY_FILES[entity]).resolve()


__all__ = ['ENTITY_FILES', 'entity_file']
