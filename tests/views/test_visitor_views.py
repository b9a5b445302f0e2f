from datetime import datetime, timezone
from decimal import Decimal

from aiohttp.test_utils import TestClient

from park.models import Visitor
from park.serializer import JSendSchema, JSendStatus, Many
from park.serializer.models import VisitorSchema, TicketSchema


class TestVisitorsView:

    async def test_get_visitors(self, client: TestClient, random_visitor, manager_headers):
        response = await client.get('/api/v1/visitors', headers=manager_headers)
        response_data = JSendSchema.of(visitors=Many(VisitorSchema())).load(await response.json())

        assert response_data["status"] == JSendStatus.SUCCESS
        assert any(visitor["id"] == random_visitor.id for visitor in response_data["data"]["visitors"])

    async def test_get_visitors_not_manager(self, client: TestClient, random_visitor):
        response = await client.get('/api/v1/visitors')
        assert response.status == 401

    async def test_create_visitor(self, client: TestClient):
        """Assert that anyone can register as a visitor."""
        request_data = {"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com"}

        response = await client.post('/api/v1/visitors', json=request_data)
        response_data = JSendSchema.of(visitor=VisitorSchema()).load(await response.json())

        assert response.status == 201
        assert response_data["status"] == JSendStatus.SUCCESS
        assert all(response_data["data"]["visitor"][key] == value for key, value in request_data.items())
        assert await Visitor.all().count() == 1

    async def test_create_visitor_duplicate(self, client: TestClient, random_visitor):
        """Assert that registering an email twice gives a descriptive error."""
        response = await client.post('/api/v1/visitors', json={
            "first_name": "Ada", "last_name": "Lovelace", "email": random_visitor.email
        })
        response_data = JSendSchema().load(await response.json())

        assert response.status == 400
        assert response_data["status"] == JSendStatus.FAIL
        assert "email" in response_data["data"]["errors"]

    async def test_create_visitor_bad_email(self, client: TestClient):
        response = await client.post('/api/v1/visitors', json={"first_name": "Ada", "last_name": "Lovelace", "email": "ada"})
        response_data = JSendSchema().load(await response.json())

        assert response.status == 400
        assert "email" in response_data["data"]["errors"]


class TestVisitorView:

    async def test_get_visitor(self, client: TestClient, random_visitor):
        response = await client.get(f'/api/v1/visitors/{random_visitor.id}')
        response_data = JSendSchema.of(visitor=VisitorSchema()).load(await response.json())

        assert response_data["status"] == JSendStatus.SUCCESS
        assert response_data["data"]["visitor"]["email"] == random_visitor.email

    async def test_get_missing_visitor(self, client: TestClient):
        response = await client.get('/api/v1/visitors/42')
        response_data = JSendSchema().load(await response.json())

        assert response.status == 404
        assert response_data["status"] == JSendStatus.FAIL

    async def test_visitor_id_out_of_range(self, client: TestClient):
        response = await client.get('/api/v1/visitors/99999999999999999999999')
        assert response.status == 404

    async def test_delete_visitor(self, client: TestClient, random_visitor, manager_headers):
        response = await client.delete(f'/api/v1/visitors/{random_visitor.id}', headers=manager_headers)

        assert response.status == 204
        assert await Visitor.all().count() == 0


class TestVisitorTicketsView:

    async def test_get_tickets(self, client: TestClient, random_visitor, database_ticket_manager):
        """Assert that a visitor's tickets can be listed, and only theirs."""
        visit_date = datetime(2019, 5, 15, 12, tzinfo=timezone.utc)
        ticket = await database_ticket_manager.create(visit_date, Decimal("30.00"), random_visitor.id)
        await database_ticket_manager.create(visit_date, Decimal("30.00"), None)

        response = await client.get(f'/api/v1/visitors/{random_visitor.id}/tickets')
        response_data = JSendSchema.of(tickets=Many(TicketSchema())).load(await response.json())

        assert response_data["status"] == JSendStatus.SUCCESS
        assert [t["id"] for t in response_data["data"]["tickets"]] == [ticket.id]
