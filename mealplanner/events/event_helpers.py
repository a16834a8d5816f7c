"""Publishing shortcuts for pantry alerts on the global event bus.

Quick import:
    from mealplanner.events.event_helpers import publish_low_stock, publish_near_expiry
"""
from mealplanner.domain.PantryItem import PantryItem
from .Event_Bus import publish_event, LowStock, NearExpiry, PANTRY_LOW_STOCK, PANTRY_NEAR_EXPIRY

__all__ = ['publish_low_stock', 'publish_near_expiry', 'PANTRY_LOW_STOCK', 'PANTRY_NEAR_EXPIRY']


def publish_low_stock(item: PantryItem) -> int:
    return publish_event(LowStock(item, item.stock_level))


def publish_near_expiry(item: PantryItem, days_left: int, threshold: int) -> int:
    return publish_event(NearExpiry(item, days_left, threshold))
