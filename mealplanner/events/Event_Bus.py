"""Event bus for pantry alerts.

Events are typed records that carry the name subscribers register for:
  LowStock   (pantry.low_stock)   -> item, stock_level
  NearExpiry (pantry.near_expiry) -> item, days_left, threshold

Subscribers are callables taking the event.
"""
import logging
from collections import defaultdict
from typing import Callable, Dict, List, NamedTuple, Union

from mealplanner.domain.PantryItem import PantryItem

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PANTRY_LOW_STOCK = "pantry.low_stock"
PANTRY_NEAR_EXPIRY = "pantry.near_expiry"


class LowStock(NamedTuple):
	item: PantryItem
	stock_level: str

	event_name = PANTRY_LOW_STOCK


class NearExpiry(NamedTuple):
	item: PantryItem
	days_left: int  # negative once expired
	threshold: int

	event_name = PANTRY_NEAR_EXPIRY


PantryEvent = Union[LowStock, NearExpiry]
Subscriber = Callable[[PantryEvent], None]


class EventBus:
	"""Delivers each event to the callbacks registered for its name, in subscription order."""

	def __init__(self):
		self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Subscriber) -> Callable[[], bool]:
		"""Register ``callback`` once per name; returns a function that removes it again."""
		callbacks = self._subscribers[event_name]
		if callback not in callbacks:
			callbacks.append(callback)
		return lambda: self.unsubscribe(event_name, callback)

	def unsubscribe(self, event_name: str, callback: Subscriber) -> bool:
		callbacks = self._subscribers.get(event_name, [])
		if callback not in callbacks:
			return False
		callbacks.remove(callback)
		return True

	def publish(self, event: PantryEvent) -> int:
		"""Deliver ``event``; returns how many subscribers handled it without error."""
		delivered = 0
		for cb in list(self._subscribers.get(event.event_name, [])):
			try:
				cb(event)
			except Exception:
				# a broken subscriber must not fail the request that published
				logger.exception("Error delivering %s for %r to %r", event.event_name, event.item.name, cb)
			else:
				delivered += 1
		return delivered


# Process-wide bus used by the pantry routes and the web observers
GLOBAL_EVENT_BUS = EventBus()


def publish_event(event: PantryEvent) -> int:
	return GLOBAL_EVENT_BUS.publish(event)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'publish_event', 'LowStock', 'NearExpiry', 'PantryEvent',
	'PANTRY_LOW_STOCK', 'PANTRY_NEAR_EXPIRY'
]
