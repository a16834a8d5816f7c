"""Grocery list views: grouping by store and category, totals, clearing completed items."""
import re
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional

from mealplanner.domain.GroceryItem import GroceryItem
from mealplanner.infra.Storage import Storage

_PRICE_RE = re.compile(r'-?\d+(?:\.\d+)?')


def parse_price(price: Optional[str]) -> float:
    """'$3.99' -> 3.99. Missing or unparseable prices count as 0."""
    if not isinstance(price, str):
        return 0.0
    match = _PRICE_RE.search(price.replace(',', ''))
    return float(match.group()) if match else 0.0


def group_by_store_and_category(items: Iterable[GroceryItem]) -> Dict[str, Dict[str, List[GroceryItem]]]:
    grouped: Dict[str, Dict[str, List[GroceryItem]]] = OrderedDict()
    for item in items:
        by_category = grouped.setdefault(item.preferred_store, OrderedDict())
        by_category.setdefault(item.category, []).append(item)
    return grouped


def summarize_grocery_items(items: Iterable[GroceryItem]) -> Dict[str, float]:
    items = list(items)
    completed = sum(1 for i in items if i.is_completed)
    return {
        'total': len(items),
        'completed': completed,
        'remaining': len(items) - completed,
        'estimated_total': round(sum(parse_price(i.estimated_price) for i in items), 2),
    }


def clear_completed(storage: Storage, week_start_date: str) -> int:
    """Delete every completed item of the week; return how many were removed."""
    deleted = 0
    for item in storage.grocery_items.get_by_filter(week_start_date=week_start_date, is_completed=True):
        if storage.grocery_items.delete(item.id):
            deleted += 1
    return deleted

__all__ = ['parse_price', 'group_by_store_and_category', 'summarize_grocery_items', 'clear_completed']
