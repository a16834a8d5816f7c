"""Store selection for grocery items.

``default_store_name`` is what the grocery list generator uses today.
``resolve_store`` consults the ranked ingredient -> store preference table;
it is exposed through the API but the generator does not call it yet.
"""
from typing import Iterable, Optional, Sequence

from mealplanner.domain.IngredientStorePreference import IngredientStorePreference
from mealplanner.domain.Store import Store
from mealplanner.utilities.constants import DEFAULT_STORE_NAME


def default_store_name(stores: Iterable[Store]) -> str:
    """Name of the first store flagged preferred, else the built-in fallback."""
    preferred = next((s for s in stores if s.is_preferred), None)
    return preferred.name if preferred else DEFAULT_STORE_NAME


def resolve_store(ingredient: str, preferences: Sequence[IngredientStorePreference],
                  default_store_name: str, stores: Iterable[Store] = ()) -> str:
    """Pick the store for ``ingredient`` from its ranked preferences.

    Matching on the ingredient text is exact (case-sensitive). The lowest
    ``preference_rank`` wins; equal ranks keep input order. Preferences whose
    store is not in ``stores`` are ignored. With no usable preference the
    ``default_store_name`` is returned.
    """
    names = {s.id: s.name for s in stores}
    best: Optional[IngredientStorePreference] = None
    for pref in preferences:
        if pref.ingredient != ingredient or pref.store_id not in names:
            continue
        if best is None or pref.preference_rank < best.preference_rank:
            best = pref
    return names[best.store_id] if best else default_store_name

__all__ = ['default_store_name', 'resolve_store']
