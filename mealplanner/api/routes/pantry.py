from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, Response
from pydantic import ValidationError

from mealplanner.api.deps import get_storage, invalid_data, not_found, storage_failure
from mealplanner.events import web_observers
from mealplanner.infra.Repository import StorageError
from mealplanner.infra.Storage import Storage
from mealplanner.logic.pantry.analysis import compute_pantry_stats, evaluate_pantry_item, group_by_category
from mealplanner.utilities.validators import PantryItemInput, validate_create, validate_update

router = APIRouter()


@router.get('/api/pantry-items')
def list_pantry_items(storage: Storage = Depends(get_storage)):
    try:
        items = storage.pantry_items.get_all()
    except StorageError:
        return storage_failure("fetch pantry items")
    return [i.to_dict() for i in items]


@router.get('/api/pantry-items/stats')
def pantry_stats(storage: Storage = Depends(get_storage)):
    try:
        items = storage.pantry_items.get_all()
    except StorageError:
        return storage_failure("fetch pantry items")
    return {
        **compute_pantry_stats(items),
        'categories': {cat: len(group) for cat, group in group_by_category(items).items()},
    }


@router.get('/api/pantry/alerts')
def pantry_alerts(since: Optional[int] = Query(default=None)):
    """Poll recent low-stock / near-expiry events; pass since=<next_cursor>."""
    return web_observers.get_events(since)


@router.post('/api/pantry-items', status_code=201)
def create_pantry_item(data: dict = Body(...), storage: Storage = Depends(get_storage)):
    try:
        fields = validate_create(PantryItemInput, data)
    except ValidationError as e:
        return invalid_data("pantry item", e)
    try:
        item = storage.pantry_items.create(fields)
    except StorageError:
        return storage_failure("create pantry item")
    evaluate_pantry_item(item)
    return item.to_dict()


@router.put('/api/pantry-items/{item_id}')
def update_pantry_item(item_id: str, data: dict = Body(...), storage: Storage = Depends(get_storage)):
    try:
        current = storage.pantry_items.get_by_id(item_id)
        if current is None:
            return not_found("Pantry item")
        try:
            changes = validate_update(PantryItemInput, current.to_dict(), data)
        except ValidationError as e:
            return invalid_data("pantry item", e)
        item = storage.pantry_items.update(item_id, changes)
    except StorageError:
        return storage_failure("update pantry item")
    if item is None:
        return not_found("Pantry item")
    evaluate_pantry_item(item)
    return item.to_dict()


@router.delete('/api/pantry-items/{item_id}', status_code=204)
def delete_pantry_item(item_id: str, storage: Storage = Depends(get_storage)):
    try:
        deleted = storage.pantry_items.delete(item_id)
    except StorageError:
        return storage_failure("delete pantry item")
    if not deleted:
        return not_found("Pantry item")
    return Response(status_code=204)
