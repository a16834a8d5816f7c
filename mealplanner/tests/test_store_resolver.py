import unittest
from mealplanner.domain.IngredientStorePreference import IngredientStorePreference
from mealplanner.domain.Store import Store
from mealplanner.logic.shopping.store_resolver import default_store_name, resolve_store


class TestStoreResolver(unittest.TestCase):

    def setUp(self):
        self.stores = [
            Store(id="s1", name="Whole Foods", is_preferred=True),
            Store(id="s2", name="Costco"),
            Store(id="s3", name="Target"),
        ]

    def pref(self, ingredient, store_id, rank):
        return IngredientStorePreference(id=f"{ingredient}-{store_id}", ingredient=ingredient,
                                         store_id=store_id, preference_rank=rank)

    def test_lowest_rank_wins(self):
        prefs = [self.pref("ground beef", "s1", 2), self.pref("ground beef", "s2", 1)]
        self.assertEqual(resolve_store("ground beef", prefs, "Whole Foods", self.stores), "Costco")

    def test_no_match_returns_default(self):
        prefs = [self.pref("ground beef", "s2", 1)]
        self.assertEqual(resolve_store("milk", prefs, "Whole Foods", self.stores), "Whole Foods")
        self.assertEqual(resolve_store("milk", [], "Corner Shop", self.stores), "Corner Shop")

    def test_exact_case_sensitive_match(self):
        prefs = [self.pref("Ground Beef", "s2", 1)]
        self.assertEqual(resolve_store("ground beef", prefs, "Whole Foods", self.stores), "Whole Foods")

    def test_equal_rank_keeps_input_order(self):
        prefs = [self.pref("bacon", "s3", 1), self.pref("bacon", "s2", 1)]
        self.assertEqual(resolve_store("bacon", prefs, "Whole Foods", self.stores), "Target")

    def test_preference_for_deleted_store_is_skipped(self):
        prefs = [self.pref("bacon", "gone", 1), self.pref("bacon", "s2", 5)]
        self.assertEqual(resolve_store("bacon", prefs, "Whole Foods", self.stores), "Costco")

    def test_default_store_name(self):
        self.assertEqual(default_store_name(self.stores), "Whole Foods")
        self.assertEqual(default_store_name([Store(id="x", name="Aldi")]), "Whole Foods")
        self.assertEqual(default_store_name([Store(id="x", name="Aldi", is_preferred=True)]), "Aldi")
        self.assertEqual(default_store_name([]), "Whole Foods")


if __name__ == '__main__':
    unittest.main()
