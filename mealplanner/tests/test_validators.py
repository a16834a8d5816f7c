import unittest

from pydantic import ValidationError

from mealplanner.utilities.validators import (
    GroceryItemInput, MealPlanInput, RecipeInput, error_details, validate_create, validate_update
)


class TestValidators(unittest.TestCase):

    def test_create_fills_defaults(self):
        fields = validate_create(MealPlanInput, {"week_start_date": "2024-01-15", "day_of_week": 0,
                                                 "meal_type": "lunch", "custom_meal_name": "Picnic"})
        self.assertIsNone(fields['recipe_id'])
        self.assertFalse(fields['is_leftover'])

    def test_strict_types(self):
        with self.assertRaises(ValidationError):
            validate_create(MealPlanInput, {"week_start_date": "2024-01-15", "day_of_week": "1",
                                            "meal_type": "lunch"})

    def test_update_returns_only_changes(self):
        current = {"name": "Soup", "cuisine": "French", "prep_time": 40, "servings": 2,
                   "ingredients": ["onion"], "instructions": "", "tags": [], "id": "r1"}
        changes = validate_update(RecipeInput, current, {"servings": 3, "id": "x", "unknown": 1})
        self.assertEqual(changes, {"servings": 3})

    def test_update_checks_cross_field_rules(self):
        current = {"name": "Milk", "category": "Dairy", "quantity": "1", "preferred_store": "Target",
                   "week_start_date": "2024-01-15", "is_from_meal": False, "associated_meal_id": None}
        with self.assertRaises(ValidationError):
            validate_update(GroceryItemInput, current, {"is_from_meal": True})
        changes = validate_update(GroceryItemInput, current, {"is_from_meal": True, "associated_meal_id": "m1"})
        self.assertEqual(changes, {"is_from_meal": True, "associated_meal_id": "m1"})

    def test_error_details(self):
        with self.assertRaises(ValidationError) as cm:
            validate_create(RecipeInput, {"name": ""})
        details = error_details(cm.exception)
        fields = [d['field'] for d in details]
        self.assertIn('name', fields)
        self.assertIn('ingredients', fields)
        self.assertTrue(all(d['message'] for d in details))


if __name__ == '__main__':
    unittest.main()
