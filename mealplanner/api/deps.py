"""Shared pieces for the API routers: storage dependency and error responses.

Error bodies:
  400 {"message": "Invalid <entity> data", "errors": [{"field", "message"}]}
  404 {"message": "<Entity> not found"}
  500 {"message": "Failed to <action>"}
"""
import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from mealplanner.infra.Storage import Storage
from mealplanner.utilities.validators import error_details

logger = logging.getLogger("meal_app")


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def invalid_data(entity: str, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={
        "message": f"Invalid {entity} data",
        "errors": error_details(exc),
    })


def not_found(entity: str) -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": f"{entity} not found"})


def storage_failure(action: str) -> JSONResponse:
    """Log the active StorageError with its traceback and answer 500."""
    logger.exception("Failed to %s", action)
    return JSONResponse(status_code=500, content={"message": f"Failed to {action}"})
