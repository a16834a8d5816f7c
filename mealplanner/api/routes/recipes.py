from fastapi import APIRouter, Body, Depends, Query, Response
from pydantic import ValidationError

from mealplanner.api.deps import get_storage, invalid_data, not_found, storage_failure
from mealplanner.infra.Repository import StorageError
from mealplanner.infra.Storage import Storage
from mealplanner.logic.recipes.catalog import filter_recipes, FAVORITES
from mealplanner.logic.reporting.ratings import ratings_by_recipe, summarize_ratings
from mealplanner.utilities.validators import (
    RecipeInput, RecipeRatingInput, validate_create, validate_update
)

router = APIRouter()


# -------------------- Recipes --------------------
@router.get('/api/recipes')
def list_recipes(search: str = Query(default=""), filter: str = Query(default="All"),
                 storage: Storage = Depends(get_storage)):
    """All recipes, optionally narrowed by text search and All/Favorites/<cuisine>."""
    try:
        recipes = storage.recipes.get_all()
        ratings = {}
        if filter.strip().lower() == FAVORITES.lower():
            ratings = ratings_by_recipe(storage.recipe_ratings.get_all())
    except StorageError:
        return storage_failure("fetch recipes")
    return [r.to_dict() for r in filter_recipes(recipes, search, filter, ratings)]


@router.get('/api/recipes/{recipe_id}')
def get_recipe(recipe_id: str, storage: Storage = Depends(get_storage)):
    try:
        recipe = storage.recipes.get_by_id(recipe_id)
    except StorageError:
        return storage_failure("fetch recipe")
    if recipe is None:
        return not_found("Recipe")
    return recipe.to_dict()


@router.post('/api/recipes', status_code=201)
def create_recipe(data: dict = Body(...), storage: Storage = Depends(get_storage)):
    try:
        fields = validate_create(RecipeInput, data)
    except ValidationError as e:
        return invalid_data("recipe", e)
    try:
        recipe = storage.recipes.create(fields)
    except StorageError:
        return storage_failure("create recipe")
    return recipe.to_dict()


@router.put('/api/recipes/{recipe_id}')
def update_recipe(recipe_id: str, data: dict = Body(...), storage: Storage = Depends(get_storage)):
    try:
        current = storage.recipes.get_by_id(recipe_id)
        if current is None:
            return not_found("Recipe")
        try:
            changes = validate_update(RecipeInput, current.to_dict(), data)
        except ValidationError as e:
            return invalid_data("recipe", e)
        recipe = storage.recipes.update(recipe_id, changes)
    except StorageError:
        return storage_failure("update recipe")
    if recipe is None:
        return not_found("Recipe")
    return recipe.to_dict()


@router.delete('/api/recipes/{recipe_id}', status_code=204)
def delete_recipe(recipe_id: str, storage: Storage = Depends(get_storage)):
    try:
        deleted = storage.recipes.delete(recipe_id)
    except StorageError:
        return storage_failure("delete recipe")
    if not deleted:
        return not_found("Recipe")
    return Response(status_code=204)


# -------------------- Recipe Ratings --------------------
@router.get('/api/recipes/{recipe_id}/ratings')
def list_recipe_ratings(recipe_id: str, storage: Storage = Depends(get_storage)):
    try:
        ratings = storage.recipe_ratings.get_by_filter(recipe_id=recipe_id)
    except StorageError:
        return storage_failure("fetch recipe ratings")
    return [r.to_dict() for r in ratings]


@router.get('/api/recipes/{recipe_id}/ratings/summary')
def recipe_rating_summary(recipe_id: str, storage: Storage = Depends(get_storage)):
    try:
        if storage.recipes.get_by_id(recipe_id) is None:
            return not_found("Recipe")
        ratings = storage.recipe_ratings.get_by_filter(recipe_id=recipe_id)
    except StorageError:
        return storage_failure("fetch recipe ratings")
    return {"recipe_id": recipe_id, **summarize_ratings(ratings)}


@router.post('/api/recipe-ratings', status_code=201)
def create_recipe_rating(data: dict = Body(...), storage: Storage = Depends(get_storage)):
    try:
        fields = validate_create(RecipeRatingInput, data)
    except ValidationError as e:
        return invalid_data("rating", e)
    try:
        if storage.recipes.get_by_id(fields["recipe_id"]) is None:
            return not_found("Recipe")
        rating = storage.recipe_ratings.create(fields)
    except StorageError:
        return storage_failure("create rating")
    return rating.to_dict()


@router.put('/api/recipe-ratings/{rating_id}')
def update_recipe_rating(rating_id: str, data: dict = Body(...), storage: Storage = Depends(get_storage)):
    try:
        current = storage.recipe_ratings.get_by_id(rating_id)
        if current is None:
            return not_found("Rating")
        try:
            changes = validate_update(RecipeRatingInput, current.to_dict(), data)
        except ValidationError as e:
            return invalid_data("rating", e)
        if 'recipe_id' in changes and storage.recipes.get_by_id(changes['recipe_id']) is None:
            return not_found("Recipe")
        rating = storage.recipe_ratings.update(rating_id, changes)
    except StorageError:
        return storage_failure("update rating")
    if rating is None:
        return not_found("Rating")
    return rating.to_dict()
