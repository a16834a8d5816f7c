import unittest
from unittest import mock

from fastapi.testclient import TestClient

from mealplanner.api.api_run import create_app
from mealplanner.infra.Storage import create_memory_storage
from mealplanner.utilities import config


class TestStoresAPI(unittest.TestCase):

    def setUp(self):
        self.storage = create_memory_storage()
        self.client = TestClient(create_app(self.storage))

    def add_store(self, name, is_preferred=False, categories=None):
        resp = self.client.post('/api/stores', json={
            "name": name, "categories": categories or [], "is_preferred": is_preferred,
        })
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def add_pref(self, ingredient, store_id, rank):
        return self.client.post('/api/ingredient-store-preferences', json={
            "ingredient": ingredient, "store_id": store_id, "preference_rank": rank,
        })

    def resolve(self, ingredient):
        resp = self.client.get('/api/ingredient-store-preferences/resolve', params={"ingredient": ingredient})
        self.assertEqual(resp.status_code, 200)
        return resp.json()['store']

    def test_store_crud(self):
        store = self.add_store("Aldi", categories=["produce", "produce", "dairy"])
        self.assertEqual(store['categories'], ["produce", "dairy"])
        resp = self.client.put(f"/api/stores/{store['id']}", json={"is_preferred": True})
        self.assertTrue(resp.json()['is_preferred'])
        self.assertEqual(resp.json()['name'], "Aldi")
        self.assertEqual(len(self.client.get('/api/stores').json()), 1)
        self.assertEqual(self.client.delete(f"/api/stores/{store['id']}").status_code, 204)
        self.assertEqual(self.client.delete(f"/api/stores/{store['id']}").status_code, 404)

    def test_store_validation(self):
        resp = self.client.post('/api/stores', json={"name": " ", "categories": []})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()['message'], "Invalid store data")

    def test_resolve_by_rank(self):
        whole_foods = self.add_store("Whole Foods", is_preferred=True)
        costco = self.add_store("Costco")
        self.assertEqual(self.add_pref("ground beef", whole_foods['id'], 2).status_code, 201)
        self.add_pref("ground beef", costco['id'], 1)

        self.assertEqual(self.resolve("ground beef"), "Costco")
        self.assertEqual(self.resolve("Ground Beef"), "Whole Foods")
        self.assertEqual(self.resolve("milk"), "Whole Foods")

    def test_resolve_default_without_preferred_store(self):
        self.add_store("Target")
        self.assertEqual(self.resolve("milk"), "Whole Foods")

    def test_resolve_skips_deleted_store(self):
        target = self.add_store("Target", is_preferred=True)
        costco = self.add_store("Costco")
        self.add_pref("bacon", costco['id'], 1)
        self.client.delete(f"/api/stores/{costco['id']}")
        self.assertEqual(self.resolve("bacon"), target['name'])

    def test_preference_crud(self):
        store = self.add_store("Costco")
        pref = self.add_pref("eggs", store['id'], 1).json()
        self.add_pref("milk", store['id'], 1)

        listed = self.client.get('/api/ingredient-store-preferences', params={"ingredient": "eggs"}).json()
        self.assertEqual([p['id'] for p in listed], [pref['id']])
        self.assertEqual(len(self.client.get('/api/ingredient-store-preferences').json()), 2)

        resp = self.client.put(f"/api/ingredient-store-preferences/{pref['id']}", json={"preference_rank": 3})
        self.assertEqual(resp.json()['preference_rank'], 3)
        self.assertEqual(self.client.put(f"/api/ingredient-store-preferences/{pref['id']}",
                                         json={"preference_rank": 0}).status_code, 400)
        self.assertEqual(self.client.delete(f"/api/ingredient-store-preferences/{pref['id']}").status_code, 204)
        self.assertEqual(self.client.delete(f"/api/ingredient-store-preferences/{pref['id']}").status_code, 404)

    def test_preference_unknown_store(self):
        resp = self.add_pref("eggs", "missing", 1)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Store not found"})

    def test_preference_update_to_unknown_store(self):
        store = self.add_store("Costco")
        pref = self.add_pref("eggs", store['id'], 1).json()
        resp = self.client.put(f"/api/ingredient-store-preferences/{pref['id']}", json={"store_id": "missing"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Store not found"})
        self.assertEqual(self.storage.ingredient_store_preferences.get_by_id(pref['id']).store_id, store['id'])
        self.assertEqual(self.resolve("eggs"), "Costco")


class TestWeeksAPI(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(create_app(create_memory_storage()))

    def test_weeks_from_start(self):
        weeks = self.client.get('/api/weeks', params={"start": "2024-01-17", "count": 2}).json()
        self.assertEqual([w['start'] for w in weeks], ["2024-01-15", "2024-01-22"])
        self.assertEqual(weeks[0]['end'], "2024-01-21")
        self.assertEqual(weeks[0]['label'], "1/15/2024 - 1/21/2024")

    def test_default_includes_current_week(self):
        weeks = self.client.get('/api/weeks').json()
        self.assertEqual(len(weeks), 12)
        self.assertTrue(weeks[0]['is_current'])

    def test_bad_start(self):
        self.assertEqual(self.client.get('/api/weeks', params={"start": "soon"}).status_code, 400)


class TestAppFactory(unittest.TestCase):

    def test_debug_follows_config(self):
        self.assertEqual(create_app(create_memory_storage()).debug, config.DEBUG)
        with mock.patch("mealplanner.api.api_run.DEBUG", True):
            self.assertTrue(create_app(create_memory_storage()).debug)
        with mock.patch("mealplanner.api.api_run.DEBUG", False):
            self.assertFalse(create_app(create_memory_storage()).debug)


if __name__ == '__main__':
    unittest.main()
