import os
from datetime import timedelta
from decimal import Decimal

import pytest
from faker import Faker
from faker.providers import address, internet, misc
from tortoise import Tortoise, timezone

from lockrental.database import initialize_database, close_database_connections
from lockrental.models import Lock, Station
from lockrental.models.lock import SECRET_LENGTH
from lockrental.service import EndRentalOrchestrator

pytest_plugins = 'aiohttp.pytest_plugin'

fake = Faker()
fake.add_provider(address)
fake.add_provider(internet)
fake.add_provider(misc)


@pytest.fixture(scope="session")
def database_url():
    return os.getenv("DATABASE_URL", "sqlite://:memory:")


@pytest.fixture
async def database(loop, database_url):
    await initialize_database(database_url, create_db=True)
    yield
    if database_url.endswith(":memory:"):
        await close_database_connections()
    else:
        await Tortoise._drop_databases()


@pytest.fixture
def now():
    return timezone.now().replace(microsecond=0)


@pytest.fixture
def orchestrator(now):
    return EndRentalOrchestrator(clock=lambda: now)


@pytest.fixture
async def random_station(database) -> Station:
    """Creates a random station in the database."""
    return await Station.create(
        name=fake.street_name(), latitude=float(fake.latitude()), longitude=float(fake.longitude())
    )


@pytest.fixture
def random_lock_factory(random_station):
    async def create_lock(*, user_id=None, start_time=None, hourly_rate=None, deleted=False, station=None):
        return await Lock.create(
            name=fake.word(), station=station if station is not None else random_station,
            user_id=user_id, start_time=start_time, hourly_rate=hourly_rate,
            url=fake.url(), secret=fake.binary(length=SECRET_LENGTH), mac=fake.mac_address(),
            deleted=deleted
        )

    return create_lock


@pytest.fixture
async def random_lock(random_lock_factory) -> Lock:
    """Creates an idle lock in the database."""
    return await random_lock_factory()


@pytest.fixture
def user_id():
    return fake.sha1()


@pytest.fixture
async def held_lock(random_lock_factory, user_id, now) -> Lock:
    """Creates a lock rented by ``user_id`` for the last 90 minutes at 2 an hour."""
    return await random_lock_factory(user_id=user_id, start_time=now - timedelta(minutes=90), hourly_rate=Decimal(2))
