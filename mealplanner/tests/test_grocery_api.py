import unittest
from unittest import mock

from fastapi.testclient import TestClient

from mealplanner.api.api_run import create_app
from mealplanner.infra.Repository import StorageError
from mealplanner.infra.Storage import create_memory_storage

WEEK = "2024-01-15"


class TestGroceryAPI(unittest.TestCase):

    def setUp(self):
        self.storage = create_memory_storage()
        self.client = TestClient(create_app(self.storage))
        self.storage.stores.create({"name": "Whole Foods", "categories": [], "is_preferred": True})
        recipe = self.storage.recipes.create({
            "name": "Spaghetti Carbonara", "cuisine": "Italian", "prep_time": 25, "servings": 4,
            "ingredients": ["spaghetti pasta", "eggs", "parmesan cheese", "bacon", "black pepper"],
            "instructions": "", "tags": [],
        })
        self.meal = self.storage.meal_plans.create({
            "week_start_date": WEEK, "day_of_week": 1, "meal_type": "dinner", "recipe_id": recipe.id,
        })

    def add_item(self, **overrides):
        data = {"name": "Paper Towels", "category": "Custom", "quantity": "2 rolls",
                "estimated_price": "$5.50", "preferred_store": "Target", "week_start_date": WEEK}
        data.update(overrides)
        return self.client.post('/api/grocery-items', json=data)

    def test_generate(self):
        resp = self.client.post(f'/api/grocery-lists/generate/{WEEK}')
        self.assertEqual(resp.status_code, 200)
        items = resp.json()
        self.assertEqual(len(items), 5)
        self.assertTrue(all(i['is_from_meal'] for i in items))
        self.assertTrue(all(i['associated_meal_id'] == self.meal.id for i in items))
        self.assertEqual(items[0]['category'], "Grains & Pasta")

    def test_generate_preserves_manual_items(self):
        manual = self.add_item().json()
        self.client.post(f'/api/grocery-lists/generate/{WEEK}')
        resp = self.client.post(f'/api/grocery-lists/generate/{WEEK}')
        self.assertNotIn(manual['id'], [i['id'] for i in resp.json()])
        listed = self.client.get(f'/api/grocery-items/{WEEK}').json()
        self.assertEqual(len(listed), 6)
        self.assertIn(manual['id'], [i['id'] for i in listed])

    def test_generate_storage_failure(self):
        with mock.patch.object(self.storage.meal_plans, "get_by_filter", side_effect=StorageError("boom")):
            resp = self.client.post(f'/api/grocery-lists/generate/{WEEK}')
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"message": "Failed to generate grocery list"})

    def test_manual_item_validation(self):
        self.assertEqual(self.add_item().status_code, 201)
        self.assertEqual(self.add_item(category="Snacks").status_code, 400)
        self.assertEqual(self.add_item(name="").status_code, 400)
        self.assertEqual(self.add_item(week_start_date="2024-13-01").status_code, 400)
        resp = self.add_item(is_from_meal=True)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()['message'], "Invalid grocery item data")

    def test_toggle_completed(self):
        item = self.add_item().json()
        self.assertFalse(item['is_completed'])
        resp = self.client.put(f"/api/grocery-items/{item['id']}", json={"is_completed": True})
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()['is_completed'])
        self.assertEqual(resp.json()['name'], "Paper Towels")

    def test_update_and_delete_missing(self):
        self.assertEqual(self.client.put('/api/grocery-items/missing', json={"is_completed": True}).status_code, 404)
        resp = self.client.delete('/api/grocery-items/missing')
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Grocery item not found"})

    def test_delete(self):
        item = self.add_item().json()
        self.assertEqual(self.client.delete(f"/api/grocery-items/{item['id']}").status_code, 204)
        self.assertEqual(self.client.get(f'/api/grocery-items/{WEEK}').json(), [])

    def test_summary(self):
        self.client.post(f'/api/grocery-lists/generate/{WEEK}')
        item = self.add_item().json()
        self.client.put(f"/api/grocery-items/{item['id']}", json={"is_completed": True})

        summary = self.client.get(f'/api/grocery-items/{WEEK}/summary').json()
        self.assertEqual(summary['total'], 6)
        self.assertEqual(summary['completed'], 1)
        self.assertEqual(summary['remaining'], 5)
        self.assertAlmostEqual(summary['estimated_total'], 5 * 3.99 + 5.50)
        self.assertEqual(list(summary['stores']), ["Whole Foods", "Target"])
        self.assertEqual(len(summary['stores']['Whole Foods']['Pantry Essentials']), 3)

    def test_clear_completed(self):
        done = self.add_item(is_completed=True).json()
        open_item = self.add_item(name="Sponges").json()
        resp = self.client.post(f'/api/grocery-items/{WEEK}/clear-completed')
        self.assertEqual(resp.json(), {"deleted": 1})
        ids = [i['id'] for i in self.client.get(f'/api/grocery-items/{WEEK}').json()]
        self.assertEqual(ids, [open_item['id']])
        self.assertNotIn(done['id'], ids)

    def test_pdf(self):
        self.client.post(f'/api/grocery-lists/generate/{WEEK}')
        resp = self.client.get(f'/api/grocery-items/{WEEK}/pdf')
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.content.startswith(b'%PDF'))
        self.assertEqual(self.client.get('/api/grocery-items/bad/pdf').status_code, 400)


if __name__ == '__main__':
    unittest.main()
