import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient
from packlist.api.api_run import app
from packlist.api.dependencies import get_repository
from packlist.infra.List_Repository import ListRepository


class TestItemsAPI(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        repo = ListRepository(Path(self._tmp.name) / "lists.json")
        app.dependency_overrides[get_repository] = lambda: repo
        self.client = TestClient(app)
        resp = self.client.post('/api/lists', json={"name": "Weekend hike"})
        self.assertEqual(resp.status_code, 201)
        self.list_id = resp.json()['id']
        resp = self.client.post(f'/api/lists/{self.list_id}/categories', json={"name": "Clothes"})
        self.assertEqual(resp.status_code, 201)
        self.category_id = resp.json()['id']

    def tearDown(self):
        app.dependency_overrides.clear()
        self._tmp.cleanup()

    def _add(self, name, **extra):
        return self.client.post(f'/api/lists/{self.list_id}/categories/{self.category_id}/items',
                                json={"name": name, **extra})

    def test_add_item(self):
        resp = self._add("Hiking Boots", quantity=1, priority="essential")
        self.assertEqual(resp.status_code, 201)
        data = resp.json()
        self.assertEqual(data['name'], "Hiking Boots")
        self.assertEqual(data['category_id'], self.category_id)
        self.assertFalse(data['packed'])

    def test_duplicate_prompt_then_force(self):
        self._add("Hiking Boots")
        self._add("Rain Jacket")

        resp = self._add("Hiking Boot")
        self.assertEqual(resp.status_code, 409)
        data = resp.json()
        self.assertEqual(data['count'], 1)
        self.assertEqual(data['duplicates'][0]['name'], "Hiking Boots")
        self.assertEqual(data['duplicates'][0]['label'], "Exact Match")

        listed = self.client.get(f'/api/lists/{self.list_id}').json()
        self.assertEqual(len(listed['categories'][0]['items']), 2)

        resp = self._add("Hiking Boot", force=True)
        self.assertEqual(resp.status_code, 201)
        listed = self.client.get(f'/api/lists/{self.list_id}').json()
        self.assertEqual(len(listed['categories'][0]['items']), 3)

    def test_duplicate_check_spans_categories(self):
        self._add("Sunscreen")
        other = self.client.post(f'/api/lists/{self.list_id}/categories', json={"name": "Toiletries"}).json()
        resp = self.client.post(f'/api/lists/{self.list_id}/categories/{other["id"]}/items', json={"name": "sunscreen!"})
        self.assertEqual(resp.status_code, 409)

    def test_blank_name_rejected(self):
        self.assertEqual(self._add("   ").status_code, 422)

    def test_unknown_category(self):
        resp = self.client.post(f'/api/lists/{self.list_id}/categories/nope/items', json={"name": "Map"})
        self.assertEqual(resp.status_code, 404)

    def test_toggle_completes_list(self):
        a = self._add("Passport").json()
        b = self._add("Tickets").json()
        first = self.client.post(f'/api/lists/{self.list_id}/items/{a["id"]}/toggle').json()
        self.assertTrue(first['item']['packed'])
        self.assertFalse(first['list_completed'])
        second = self.client.post(f'/api/lists/{self.list_id}/items/{b["id"]}/toggle').json()
        self.assertTrue(second['list_completed'])

        stats = self.client.get(f'/api/lists/{self.list_id}/stats').json()
        self.assertEqual(stats['completion_percentage'], 100)
        self.assertEqual(stats['packed_items'], 2)

    def test_update_and_delete_item(self):
        item = self._add("Socks").json()
        resp = self.client.patch(f'/api/lists/{self.list_id}/items/{item["id"]}', json={"quantity": 4, "notes": "wool"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['quantity'], 4)

        resp = self.client.delete(f'/api/lists/{self.list_id}/items/{item["id"]}')
        self.assertEqual(resp.json(), {"success": True})
        resp = self.client.delete(f'/api/lists/{self.list_id}/items/{item["id"]}')
        self.assertEqual(resp.status_code, 404)

    def test_move_item(self):
        item = self._add("Headlamp").json()
        gear = self.client.post(f'/api/lists/{self.list_id}/categories', json={"name": "Gear"}).json()
        resp = self.client.post(f'/api/lists/{self.list_id}/items/{item["id"]}/move', json={"category_id": gear['id']})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['category_id'], gear['id'])

    def test_duplicate_event_published(self):
        with TestClient(app) as client:
            client.post(f'/api/lists/{self.list_id}/categories/{self.category_id}/items', json={"name": "Water bottle"})
            client.post(f'/api/lists/{self.list_id}/categories/{self.category_id}/items', json={"name": "Water bottles"})
            events = client.get('/api/events').json()['events']
        ours = [e for e in events if e.get('list_id') == self.list_id]
        self.assertEqual(ours[-1]['type'], 'items.duplicate_detected')
        self.assertEqual(ours[-1]['duplicates'], ["Water bottle"])
