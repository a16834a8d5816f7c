from fastapi import APIRouter, Body, Depends, Query, Response
from pydantic import ValidationError

from mealplanner.api.deps import get_storage, invalid_data, not_found, storage_failure
from mealplanner.infra.Repository import StorageError
from mealplanner.infra.Storage import Storage
from mealplanner.logic.shopping.store_resolver import default_store_name, resolve_store
from mealplanner.utilities.validators import (
    IngredientStorePreferenceInput, StoreInput, validate_create, validate_update
)

router = APIRouter()


# -------------------- Stores --------------------
@router.get('/api/stores')
def list_stores(storage: Storage = Depends(get_storage)):
    try:
        stores = storage.stores.get_all()
    except StorageError:
        return storage_failure("fetch stores")
    return [s.to_dict() for s in stores]


@router.post('/api/stores', status_code=201)
def create_store(data: dict = Body(...), storage: Storage = Depends(get_storage)):
    try:
        fields = validate_create(StoreInput, data)
    except ValidationError as e:
        return invalid_data("store", e)
    try:
        store = storage.stores.create(fields)
    except StorageError:
        return storage_failure("create store")
    return store.to_dict()


@router.put('/api/stores/{store_id}')
def update_store(store_id: str, data: dict = Body(...), storage: Storage = Depends(get_storage)):
    try:
        current = storage.stores.get_by_id(store_id)
        if current is None:
            return not_found("Store")
        try:
            changes = validate_update(StoreInput, current.to_dict(), data)
        except ValidationError as e:
            return invalid_data("store", e)
        store = storage.stores.update(store_id, changes)
    except StorageError:
        return storage_failure("update store")
    if store is None:
        return not_found("Store")
    return store.to_dict()


@router.delete('/api/stores/{store_id}', status_code=204)
def delete_store(store_id: str, storage: Storage = Depends(get_storage)):
    # preferences pointing at the store stay; the resolver skips them
    try:
        deleted = storage.stores.delete(store_id)
    except StorageError:
        return storage_failure("delete store")
    if not deleted:
        return not_found("Store")
    return Response(status_code=204)


# -------------------- Ingredient -> store preferences --------------------
@router.get('/api/ingredient-store-preferences')
def list_preferences(ingredient: str = Query(default=""), storage: Storage = Depends(get_storage)):
    try:
        if ingredient:
            prefs = storage.ingredient_store_preferences.get_by_filter(ingredient=ingredient)
        else:
            prefs = storage.ingredient_store_preferences.get_all()
    except StorageError:
        return storage_failure("fetch ingredient store preferences")
    return [p.to_dict() for p in prefs]


@router.get('/api/ingredient-store-preferences/resolve')
def resolve_preferred_store(ingredient: str = Query(...), storage: Storage = Depends(get_storage)):
    """Store an ingredient would be bought at, per the ranked preferences."""
    try:
        stores = storage.stores.get_all()
        prefs = storage.ingredient_store_preferences.get_by_filter(ingredient=ingredient)
    except StorageError:
        return storage_failure("resolve store")
    store = resolve_store(ingredient, prefs, default_store_name(stores), stores)
    return {'ingredient': ingredient, 'store': store}


@router.post('/api/ingredient-store-preferences', status_code=201)
def create_preference(data: dict = Body(...), storage: Storage = Depends(get_storage)):
    try:
        fields = validate_create(IngredientStorePreferenceInput, data)
    except ValidationError as e:
        return invalid_data("ingredient store preference", e)
    try:
        if storage.stores.get_by_id(fields['store_id']) is None:
            return not_found("Store")
        pref = storage.ingredient_store_preferences.create(fields)
    except StorageError:
        return storage_failure("create ingredient store preference")
    return pref.to_dict()


@router.put('/api/ingredient-store-preferences/{pref_id}')
def update_preference(pref_id: str, data: dict = Body(...), storage: Storage = Depends(get_storage)):
    try:
        current = storage.ingredient_store_preferences.get_by_id(pref_id)
        if current is None:
            return not_found("Ingredient store preference")
        try:
            changes = validate_update(IngredientStorePreferenceInput, current.to_dict(), data)
        except ValidationError as e:
            return invalid_data("ingredient store preference", e)
        if 'store_id' in changes and storage.stores.get_by_id(changes['store_id']) is None:
            return not_found("Store")
        pref = storage.ingredient_store_preferences.update(pref_id, changes)
    except StorageError:
        return storage_failure("update ingredient store preference")
    if pref is None:
        return not_found("Ingredient store preference")
    return pref.to_dict()


@router.delete('/api/ingredient-store-preferences/{pref_id}', status_code=204)
def delete_preference(pref_id: str, storage: Storage = Depends(get_storage)):
    try:
        deleted = storage.ingredient_store_preferences.delete(pref_id)
    except StorageError:
        return storage_failure("delete ingredient store preference")
    if not deleted:
        return not_found("Ingredient store preference")
    return Response(status_code=204)
