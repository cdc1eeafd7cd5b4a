from datetime import timedelta
from decimal import Decimal

import pytest

from lockrental.exceptions import ImmutableRentalError
from lockrental.models import Rental
from lockrental.service import RentalFinalizer


@pytest.fixture
async def random_rental(held_lock, now) -> Rental:
    rental, _ = await RentalFinalizer().finalize(held_lock, now)
    return rental


async def test_rental_cannot_be_updated(random_rental):
    """Assert that a written rental is append-only."""
    random_rental.cost = Decimal(0)
    with pytest.raises(ImmutableRentalError):
        await random_rental.save()
    assert (await Rental.get(id=random_rental.id)).cost == Decimal(2)


async def test_rental_cannot_be_deleted(random_rental):
    with pytest.raises(ImmutableRentalError):
        await random_rental.delete()
    assert await Rental.all().count() == 1


async def test_serialize_rental(random_rental, held_lock, random_station):
    data = random_rental.serialize()
    assert data["lock_id"] == str(held_lock.id)
    assert data["station"]["name"] == random_station.name
    assert data["station"]["location"]["type"] == "Point"
    assert data["duration"] == timedelta(minutes=90).total_seconds()
    assert data["cost"] == Decimal(2)
