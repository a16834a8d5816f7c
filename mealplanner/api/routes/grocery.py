import logging

from fastapi import APIRouter, Body, Depends, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from mealplanner.api.deps import get_storage, invalid_data, not_found, storage_failure
from mealplanner.infra.Repository import StorageError
from mealplanner.infra.Storage import Storage
from mealplanner.infra.pdf_utils import generate_grocery_pdf
from mealplanner.logic.shopping.grocery_generator import generate_grocery_list
from mealplanner.logic.shopping.summary import (
    clear_completed, group_by_store_and_category, summarize_grocery_items
)
from mealplanner.utilities.dates import is_iso_date
from mealplanner.utilities.validators import GroceryItemInput, validate_create, validate_update

router = APIRouter()
logger = logging.getLogger(__name__)


# -------------------- Grocery Items --------------------
@router.get('/api/grocery-items/{week_start_date}')
def list_grocery_items(week_start_date: str, storage: Storage = Depends(get_storage)):
    try:
        items = storage.grocery_items.get_by_filter(week_start_date=week_start_date)
    except StorageError:
        return storage_failure("fetch grocery items")
    return [i.to_dict() for i in items]


@router.get('/api/grocery-items/{week_start_date}/summary')
def grocery_summary(week_start_date: str, storage: Storage = Depends(get_storage)):
    """Totals plus the list grouped store -> category -> items."""
    try:
        items = storage.grocery_items.get_by_filter(week_start_date=week_start_date)
    except StorageError:
        return storage_failure("fetch grocery items")
    grouped = {
        store: {category: [i.to_dict() for i in category_items]
                for category, category_items in by_category.items()}
        for store, by_category in group_by_store_and_category(items).items()
    }
    return {"week_start_date": week_start_date, **summarize_grocery_items(items), "stores": grouped}


@router.get('/api/grocery-items/{week_start_date}/pdf')
def export_grocery_pdf(week_start_date: str, storage: Storage = Depends(get_storage)):
    if not is_iso_date(week_start_date):
        return JSONResponse(status_code=400, content={"message": "Week must be a YYYY-MM-DD date"})
    try:
        items = storage.grocery_items.get_by_filter(week_start_date=week_start_date)
    except StorageError:
        return storage_failure("export grocery list")
    filename = f"grocery_list_{week_start_date}.pdf"
    return Response(content=generate_grocery_pdf(week_start_date, items), media_type="application/pdf",
                    headers={"Content-Disposition": f"attachment; filename={filename}"})


@router.post('/api/grocery-items/{week_start_date}/clear-completed')
def clear_completed_items(week_start_date: str, storage: Storage = Depends(get_storage)):
    try:
        deleted = clear_completed(storage, week_start_date)
    except StorageError:
        return storage_failure("clear completed grocery items")
    return {"deleted": deleted}


@router.post('/api/grocery-items', status_code=201)
def create_grocery_item(data: dict = Body(...), storage: Storage = Depends(get_storage)):
    try:
        fields = validate_create(GroceryItemInput, data)
    except ValidationError as e:
        return invalid_data("grocery item", e)
    try:
        item = storage.grocery_items.create(fields)
    except StorageError:
        return storage_failure("create grocery item")
    return item.to_dict()


@router.put('/api/grocery-items/{item_id}')
def update_grocery_item(item_id: str, data: dict = Body(...), storage: Storage = Depends(get_storage)):
    try:
        current = storage.grocery_items.get_by_id(item_id)
        if current is None:
            return not_found("Grocery item")
        try:
            changes = validate_update(GroceryItemInput, current.to_dict(), data)
        except ValidationError as e:
            return invalid_data("grocery item", e)
        item = storage.grocery_items.update(item_id, changes)
    except StorageError:
        return storage_failure("update grocery item")
    if item is None:
        return not_found("Grocery item")
    return item.to_dict()


@router.delete('/api/grocery-items/{item_id}', status_code=204)
def delete_grocery_item(item_id: str, storage: Storage = Depends(get_storage)):
    try:
        deleted = storage.grocery_items.delete(item_id)
    except StorageError:
        return storage_failure("delete grocery item")
    if not deleted:
        return not_found("Grocery item")
    return Response(status_code=204)


# -------------------- Grocery list generation --------------------
@router.post('/api/grocery-lists/generate/{week_start_date}')
def generate_week_grocery_list(week_start_date: str, storage: Storage = Depends(get_storage)):
    """Rebuild the meal-derived items of the week; returns only the new items."""
    try:
        items = generate_grocery_list(storage, week_start_date)
    except StorageError:
        return storage_failure("generate grocery list")
    return [i.to_dict() for i in items]
