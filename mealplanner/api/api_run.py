from datetime import timedelta
from typing import Optional
import logging

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from mealplanner.api.routes import grocery, meal_plans, pantry, recipes, stores
from mealplanner.events.web_observers import start as start_event_observers
from mealplanner.infra.Storage import Storage, create_storage_from_config
from mealplanner.utilities.config import DEBUG
from mealplanner.utilities.dates import gen_weeks, parse_iso_date, week_start_for

# Logging
logger = logging.getLogger("meal_app")

MAX_WEEKS = 52


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """Build the API around ``storage`` (default: the backend named in config)."""
    app = FastAPI(title="Meal Planner & Grocery API", debug=DEBUG)
    app.state.storage = storage if storage is not None else create_storage_from_config()

    # Include routers
    app.include_router(recipes.router)
    app.include_router(meal_plans.router)
    app.include_router(grocery.router)
    app.include_router(pantry.router)
    app.include_router(stores.router)

    @app.get('/api/weeks')
    def list_weeks(start: Optional[str] = Query(default=None), count: int = Query(default=12, ge=1, le=MAX_WEEKS)):
        """Week options for pickers, starting at the Monday of ``start`` (default this week)."""
        try:
            first = parse_iso_date(start or week_start_for())
        except ValueError:
            return JSONResponse(status_code=400, content={"message": "start must be a YYYY-MM-DD date"})
        first_monday = first - timedelta(days=first.weekday())
        return gen_weeks(first_monday, count)

    # Register event bus subscribers for pantry alerts
    start_event_observers()
    logger.info("Web observers for pantry events started")
    return app


app = create_app()
