from fastapi import APIRouter, Body, Depends, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from mealplanner.api.deps import get_storage, invalid_data, not_found, storage_failure
from mealplanner.infra.Repository import StorageError
from mealplanner.infra.Storage import Storage
from mealplanner.infra.pdf_utils import generate_pdf_for_week
from mealplanner.utilities.dates import is_iso_date
from mealplanner.utilities.validators import MealPlanInput, validate_create, validate_update

router = APIRouter()


@router.get('/api/meal-plans/{week_start_date}')
def list_meal_plans(week_start_date: str, storage: Storage = Depends(get_storage)):
    try:
        plans = storage.meal_plans.get_by_filter(week_start_date=week_start_date)
    except StorageError:
        return storage_failure("fetch meal plans")
    return [p.to_dict() for p in plans]


@router.get('/api/meal-plans/{week_start_date}/pdf')
def export_meal_plan_pdf(week_start_date: str, storage: Storage = Depends(get_storage)):
    if not is_iso_date(week_start_date):
        return JSONResponse(status_code=400, content={"message": "Week must be a YYYY-MM-DD date"})
    try:
        plans = storage.meal_plans.get_by_filter(week_start_date=week_start_date)
        recipes = storage.recipes.get_all()
    except StorageError:
        return storage_failure("export meal plan")
    pdf_bytes = generate_pdf_for_week(week_start_date, plans, recipes)
    filename = f"meal_plan_{week_start_date}.pdf"
    return Response(content=pdf_bytes, media_type="application/pdf",
                    headers={"Content-Disposition": f"attachment; filename={filename}"})


@router.post('/api/meal-plans', status_code=201)
def create_meal_plan(data: dict = Body(...), storage: Storage = Depends(get_storage)):
    try:
        fields = validate_create(MealPlanInput, data)
    except ValidationError as e:
        return invalid_data("meal plan", e)
    try:
        plan = storage.meal_plans.create(fields)
    except StorageError:
        return storage_failure("create meal plan")
    return plan.to_dict()


@router.put('/api/meal-plans/{plan_id}')
def update_meal_plan(plan_id: str, data: dict = Body(...), storage: Storage = Depends(get_storage)):
    try:
        current = storage.meal_plans.get_by_id(plan_id)
        if current is None:
            return not_found("Meal plan")
        try:
            changes = validate_update(MealPlanInput, current.to_dict(), data)
        except ValidationError as e:
            return invalid_data("meal plan", e)
        plan = storage.meal_plans.update(plan_id, changes)
    except StorageError:
        return storage_failure("update meal plan")
    if plan is None:
        return not_found("Meal plan")
    return plan.to_dict()


@router.delete('/api/meal-plans/{plan_id}', status_code=204)
def delete_meal_plan(plan_id: str, storage: Storage = Depends(get_storage)):
    # Grocery items generated from this meal are kept (no cascade)
    try:
        deleted = storage.meal_plans.delete(plan_id)
    except StorageError:
        return storage_failure("delete meal plan")
    if not deleted:
        return not_found("Meal plan")
    return Response(status_code=204)
