from datetime import datetime, timezone
from decimal import Decimal
from itertools import count

import pytest
from aiohttp import web
from aiohttp.test_utils import TestClient
from faker import Faker
from tortoise import Tortoise

from park.models import Attraction, Manager, Visitor
from park.service.manager import TicketManager
from park.signals import register_signals
from park.store import DatabaseTicketStore, DatabaseVisitorStore, MemoryTicketStore, MemoryVisitorStore, \
    TicketRecord, VisitorRecord
from park.views import register_views

fake = Faker()


@pytest.fixture
def now() -> datetime:
    """The moment the ticket manager believes it is."""
    return datetime(2019, 5, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def visitor_record() -> VisitorRecord:
    return VisitorRecord(id=1, first_name=fake.first_name(), last_name=fake.last_name(), email=fake.email())


@pytest.fixture
def memory_ticket_store() -> MemoryTicketStore:
    return MemoryTicketStore()


@pytest.fixture
def ticket_manager(memory_ticket_store, visitor_record, now) -> TicketManager:
    """A ticket manager over in-memory stores, with the clock frozen at ``now``."""
    return TicketManager(memory_ticket_store, MemoryVisitorStore(visitor_record), clock=lambda: now)


@pytest.fixture
def stored_ticket_factory(memory_ticket_store, visitor_record):
    """Puts a ticket straight into the store, in whatever state is asked for."""

    async def create_ticket(visit_date, state, price=Decimal("30.00")):
        return await memory_ticket_store.create(TicketRecord(
            visit_date=visit_date, price=price, state=state, visitor_id=visitor_record.id
        ))

    return create_ticket


@pytest.fixture
async def database():
    await Tortoise.init(
        db_url="sqlite://:memory:",
        modules={'models': ['park.models']},
    )
    await Tortoise.generate_schemas(safe=True)
    yield
    await Tortoise.close_connections()


@pytest.fixture
def random_visitor_factory(database):
    async def create_visitor():
        return await Visitor.create(first_name=fake.first_name(), last_name=fake.last_name(), email=fake.unique.email())

    return create_visitor


@pytest.fixture
async def random_visitor(random_visitor_factory) -> Visitor:
    """Creates a random visitor in the database."""
    return await random_visitor_factory()


@pytest.fixture
async def random_manager(database) -> Manager:
    """Creates a random manager in the database."""
    return await Manager.create(
        id=fake.sha1(), first_name=fake.first_name(), last_name=fake.last_name(), email=fake.unique.email()
    )


@pytest.fixture
def manager_headers(random_manager):
    return {"Authorization": f"Bearer {random_manager.id}"}


@pytest.fixture
def random_attraction_factory(database):
    names = count(1)

    async def create_attraction(is_open=False):
        return await Attraction.create(name=f"{fake.color_name()} Coaster {next(names)}", is_open=is_open)

    return create_attraction


@pytest.fixture
async def random_attraction(random_attraction_factory) -> Attraction:
    return await random_attraction_factory()


@pytest.fixture
def database_ticket_manager(database) -> TicketManager:
    return TicketManager(DatabaseTicketStore(), DatabaseVisitorStore())


@pytest.fixture
async def client(aiohttp_client, database, database_ticket_manager) -> TestClient:
    app = web.Application()
    app['ticket_manager'] = database_ticket_manager

    register_signals(app, init_database=False)  # we get the database from a fixture
    register_views(app, "/api/v1")

    return await aiohttp_client(app)
