from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Grocery categories, in the order the categorizer tests them
MEAT_AND_SEAFOOD: Final[str] = "Meat & Seafood"
DAIRY: Final[str] = "Dairy"
PRODUCE: Final[str] = "Produce"
GRAINS_AND_PASTA: Final[str] = "Grains & Pasta"
PANTRY_ESSENTIALS: Final[str] = "Pantry Essentials"
CUSTOM: Final[str] = "Custom"

GROCERY_CATEGORIES: Final[tuple[str, ...]] = (
    MEAT_AND_SEAFOOD, DAIRY, PRODUCE, GRAINS_AND_PASTA, PANTRY_ESSENTIALS, CUSTOM
)

# Placeholders used for meal-derived grocery items (no pricing feed exists)
DEFAULT_STORE_NAME: Final[str] = "Whole Foods"
PLACEHOLDER_QUANTITY: Final[str] = "1 unit"
PLACEHOLDER_PRICE: Final[str] = "$3.99"

MEAL_TYPES: Final[tuple[str, ...]] = ("breakfast", "lunch", "dinner")
STOCK_LEVELS: Final[tuple[str, ...]] = ("high", "medium", "low", "empty")
LOW_STOCK_LEVELS: Final[tuple[str, ...]] = ("low", "empty")

RATING_LABELS: Final[dict[int, str]] = {1: "okay", 2: "good", 3: "great"}
MAX_RATING: Final[int] = 3

# Sunday=0, matching MealPlan.day_of_week
DAY_NAMES: Final[tuple[str, ...]] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"
)
