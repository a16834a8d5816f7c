"""Pantry analysis helpers: expiry, stock statistics, alert evaluation."""
from __future__ import annotations
from collections import OrderedDict
from datetime import date as _date, datetime
from typing import Dict, Iterable, List, Optional

from mealplanner.domain.PantryItem import PantryItem
from mealplanner.events.event_helpers import publish_low_stock, publish_near_expiry
from mealplanner.utilities.config import EXPIRING_WINDOW_DAYS
from mealplanner.utilities.constants import DATE_FORMAT, LOW_STOCK_LEVELS

__all__ = ["days_until_expiry", "compute_pantry_stats", "group_by_category", "evaluate_pantry_item"]


def days_until_expiry(item: PantryItem, today: Optional[_date] = None) -> Optional[int]:
    """Days from today to the item's expiration date (negative once expired), None if unknown."""
    if not item.expiration_date:
        return None
    try:
        exp_date = datetime.strptime(item.expiration_date, DATE_FORMAT).date()
    except (TypeError, ValueError):
        return None
    return (exp_date - (today or _date.today())).days


def _expiring_soon(item: PantryItem, today: _date, window: int) -> bool:
    days_left = days_until_expiry(item, today)
    return days_left is not None and 0 <= days_left <= window


def compute_pantry_stats(items: Iterable[PantryItem], today: Optional[_date] = None,
                         *, window: int | None = None) -> Dict[str, int]:
    """Counts for the pantry header: total, low stock, expiring within the window."""
    expiring_window = window if window is not None else EXPIRING_WINDOW_DAYS
    today = today or _date.today()
    items = list(items)
    return {
        'total': len(items),
        'low_stock': sum(1 for i in items if i.stock_level == 'low'),
        'expiring_soon': sum(1 for i in items if _expiring_soon(i, today, expiring_window)),
    }


def group_by_category(items: Iterable[PantryItem]) -> Dict[str, List[PantryItem]]:
    grouped: Dict[str, List[PantryItem]] = OrderedDict()
    for item in items:
        grouped.setdefault(item.category, []).append(item)
    return grouped


def evaluate_pantry_item(item: PantryItem, today: Optional[_date] = None,
                         *, window: int | None = None) -> None:
    """Publish low-stock / near-expiry events for a freshly written item."""
    expiring_window = window if window is not None else EXPIRING_WINDOW_DAYS
    if item.stock_level in LOW_STOCK_LEVELS:
        publish_low_stock(item)
    days_left = days_until_expiry(item, today)
    if days_left is not None and days_left <= expiring_window:
        publish_near_expiry(item, days_left, expiring_window)
