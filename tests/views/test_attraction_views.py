from aiohttp.test_utils import TestClient
from marshmallow.fields import String

from park.models import Attraction
from park.serializer import JSendSchema, JSendStatus, Many
from park.serializer.models import AttractionSchema


class TestAttractionsView:

    async def test_get_attractions(self, client: TestClient, random_attraction_factory):
        closed = await random_attraction_factory()
        opened = await random_attraction_factory(is_open=True)
        response_schema = JSendSchema.of(attractions=Many(AttractionSchema()))

        response = await client.get('/api/v1/attractions')
        response_data = response_schema.load(await response.json())
        assert [a["id"] for a in response_data["data"]["attractions"]] == [closed.id, opened.id]

        response = await client.get('/api/v1/attractions', params={"open": "true"})
        response_data = response_schema.load(await response.json())
        assert [a["id"] for a in response_data["data"]["attractions"]] == [opened.id]

    async def test_get_attractions_bad_filter(self, client: TestClient):
        response = await client.get('/api/v1/attractions', params={"open": "sometimes"})
        response_data = JSendSchema().load(await response.json())

        assert response.status == 400
        assert "open" in response_data["data"]["errors"]

    async def test_create_attraction(self, client: TestClient, manager_headers):
        response = await client.post('/api/v1/attractions', json={"name": "Log Flume"}, headers=manager_headers)
        response_data = JSendSchema.of(attraction=AttractionSchema()).load(await response.json())

        assert response.status == 201
        assert response_data["data"]["attraction"]["name"] == "Log Flume"
        assert response_data["data"]["attraction"]["is_open"] is False

    async def test_create_attraction_not_manager(self, client: TestClient):
        response = await client.post('/api/v1/attractions', json={"name": "Log Flume"})

        assert response.status == 401
        assert await Attraction.all().count() == 0


class TestAttractionView:

    async def test_get_attraction(self, client: TestClient, random_attraction):
        response = await client.get(f'/api/v1/attractions/{random_attraction.id}')
        response_data = JSendSchema.of(attraction=AttractionSchema()).load(await response.json())

        assert response_data["data"]["attraction"]["name"] == random_attraction.name

    async def test_delete_attraction(self, client: TestClient, random_attraction, manager_headers):
        response = await client.delete(f'/api/v1/attractions/{random_attraction.id}', headers=manager_headers)

        assert response.status == 204
        assert await Attraction.all().count() == 0


class TestAttractionStatusView:

    async def test_open_and_close(self, client: TestClient, random_attraction, manager_headers):
        """Assert that a manager can open and then close an attraction."""
        response_schema = JSendSchema.of(attraction=AttractionSchema(), action=String())

        response = await client.patch(f'/api/v1/attractions/{random_attraction.id}/open', headers=manager_headers)
        response_data = response_schema.load(await response.json())
        assert response_data["data"]["attraction"]["is_open"] is True
        assert response_data["data"]["action"] == "open"

        response = await client.patch(f'/api/v1/attractions/{random_attraction.id}/close', headers=manager_headers)
        response_data = response_schema.load(await response.json())
        assert response_data["data"]["attraction"]["is_open"] is False

    async def test_invalid_action(self, client: TestClient, random_attraction, manager_headers):
        response = await client.patch(f'/api/v1/attractions/{random_attraction.id}/paint', headers=manager_headers)
        response_data = JSendSchema().load(await response.json())

        assert response.status == 404
        assert response_data["data"]["action"] == "paint"

    async def test_attraction_id_out_of_range(self, client: TestClient, manager_headers):
        response = await client.patch('/api/v1/attractions/99999999999999999999999/open', headers=manager_headers)
        assert response.status == 404

    async def test_missing_attraction(self, client: TestClient, manager_headers):
        response = await client.patch('/api/v1/attractions/42/open', headers=manager_headers)
        assert response.status == 404
