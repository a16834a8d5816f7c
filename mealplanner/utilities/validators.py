"""
Input validation schemas using Pydantic.

Models run in strict mode: values of the wrong type are reported, never coerced.
"""
from typing import Annotated, Any, Dict, List, Literal, Optional, Type
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from mealplanner.utilities.constants import GROCERY_CATEGORIES
from mealplanner.utilities.dates import is_iso_date

NonEmptyStr = Annotated[str, Field(min_length=1)]


def _dedupe(values: List[str]) -> List[str]:
    seen = []
    for v in values:
        if v not in seen:
            seen.append(v)
    return seen


def _check_iso_date(v: Optional[str]) -> Optional[str]:
    if v is not None and not is_iso_date(v):
        raise ValueError('must be a YYYY-MM-DD date')
    return v


class InputModel(BaseModel):
    model_config = ConfigDict(strict=True, str_strip_whitespace=True)


class RecipeInput(InputModel):
    """Schema for recipe input validation."""
    name: str = Field(..., min_length=1, max_length=200)
    cuisine: str = Field(..., min_length=1, max_length=100)
    prep_time: int = Field(..., ge=0)
    servings: int = Field(..., ge=1)
    ingredients: List[NonEmptyStr]
    instructions: str
    tags: List[NonEmptyStr] = Field(default_factory=list)
    makes_leftovers: bool = False
    non_perishable_base: bool = False
    image_url: Optional[str] = None

    @field_validator('tags')
    @classmethod
    def unique_tags(cls, v):
        """Tags behave as a set; keep first occurrence order."""
        return _dedupe(v)

    @field_validator('image_url')
    @classmethod
    def validate_image_url(cls, v):
        if v is None:
            return v
        parsed = urlparse(v)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise ValueError('must be an http(s) URL')
        return v


class MealPlanInput(InputModel):
    """Schema for one meal slot. recipe_id and custom_meal_name are both optional."""
    week_start_date: str
    day_of_week: int = Field(..., ge=0, le=6)
    meal_type: Literal['breakfast', 'lunch', 'dinner']
    recipe_id: Optional[str] = None
    custom_meal_name: Optional[str] = None
    is_leftover: bool = False

    @field_validator('week_start_date')
    @classmethod
    def valid_week(cls, v):
        return _check_iso_date(v)


class RecipeRatingInput(InputModel):
    recipe_id: NonEmptyStr
    family_member: NonEmptyStr
    rating: int = Field(..., ge=1, le=3)


class GroceryItemInput(InputModel):
    """Schema for grocery list items (manual or meal-derived)."""
    name: NonEmptyStr
    category: str
    quantity: NonEmptyStr
    estimated_price: Optional[str] = None
    preferred_store: NonEmptyStr
    is_completed: bool = False
    is_from_meal: bool = False
    associated_meal_id: Optional[str] = None
    week_start_date: str

    @field_validator('week_start_date')
    @classmethod
    def valid_week(cls, v):
        return _check_iso_date(v)

    @field_validator('category')
    @classmethod
    def known_category(cls, v):
        if v not in GROCERY_CATEGORIES:
            raise ValueError(f"must be one of: {', '.join(GROCERY_CATEGORIES)}")
        return v

    @model_validator(mode='after')
    def meal_items_reference_their_meal(self):
        if self.is_from_meal and not self.associated_meal_id:
            raise ValueError('associated_meal_id is required when is_from_meal is true')
        return self


class PantryItemInput(InputModel):
    name: NonEmptyStr
    category: NonEmptyStr
    quantity: NonEmptyStr
    expiration_date: Optional[str] = None
    stock_level: Literal['high', 'medium', 'low', 'empty']

    @field_validator('expiration_date')
    @classmethod
    def valid_expiration(cls, v):
        return _check_iso_date(v)


class StoreInput(InputModel):
    name: NonEmptyStr
    categories: List[NonEmptyStr] = Field(default_factory=list)
    is_preferred: bool = False

    @field_validator('categories')
    @classmethod
    def unique_categories(cls, v):
        return _dedupe(v)


class IngredientStorePreferenceInput(InputModel):
    ingredient: NonEmptyStr
    store_id: NonEmptyStr
    preference_rank: int = Field(..., ge=1)


# --- Helpers used by the API routes ----------------------------------------
def validate_create(model_cls: Type[InputModel], data: Any) -> Dict[str, Any]:
    """Validate a full create payload; raises ValidationError."""
    return model_cls.model_validate(data).model_dump()


def validate_update(model_cls: Type[InputModel], current: Dict[str, Any], changes: Any) -> Dict[str, Any]:
    """Validate a partial update against the stored record.

    The stored values are merged with ``changes`` and the merged record is
    validated, so a change that breaks a cross-field rule is reported too.
    Returns only the (validated) changed fields.
    """
    if not isinstance(changes, dict):
        # let pydantic produce the "valid dictionary" error
        model_cls.model_validate(changes)
    fields = model_cls.model_fields
    known = {k: v for k, v in changes.items() if k in fields}
    merged = {k: current[k] for k in fields if k in current}
    merged.update(known)
    validated = model_cls.model_validate(merged)
    return {k: getattr(validated, k) for k in known}


def error_details(exc: ValidationError) -> List[Dict[str, str]]:
    """Flatten a ValidationError into [{field, message}] for API responses."""
    details = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get('loc', ())) or "__root__"
        details.append({'field': field, 'message': err.get('msg', '')})
    return details
