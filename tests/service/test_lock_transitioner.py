from decimal import Decimal

import pytest

from lockrental.exceptions import LockVanishedError, TransactionConflictError
from lockrental.models import Lock
from lockrental.service import LockStateTransitioner, LockTransition


@pytest.fixture
def transitioner():
    return LockStateTransitioner()


async def test_release_lock(transitioner, held_lock, user_id):
    """Assert that releasing clears the rental but keeps the lock and its secrets."""
    assert await transitioner.transition(held_lock, holder=user_id, retired=False) is LockTransition.RELEASED

    lock = await Lock.get(id=held_lock.id)
    assert lock.user_id is None
    assert lock.start_time is None
    assert lock.hourly_rate is None
    assert (lock.name, lock.url, lock.secret, lock.mac) == (held_lock.name, held_lock.url, held_lock.secret,
                                                           held_lock.mac)


async def test_remove_lock(transitioner, held_lock, user_id):
    assert await transitioner.transition(held_lock, holder=user_id, retired=True) is LockTransition.REMOVED
    assert not await Lock.filter(id=held_lock.id).exists()


async def test_remove_twice(transitioner, held_lock, user_id):
    """Assert that removing an already removed lock reports that it is gone."""
    await transitioner.transition(held_lock, holder=user_id, retired=True)
    with pytest.raises(LockVanishedError):
        await transitioner.transition(held_lock, holder=user_id, retired=True)


async def test_release_wrong_holder(transitioner, held_lock):
    with pytest.raises(TransactionConflictError):
        await transitioner.transition(held_lock, holder="someone else", retired=False)
    assert (await Lock.get(id=held_lock.id)).hourly_rate == Decimal(2)


async def test_remove_wrong_holder(transitioner, held_lock):
    with pytest.raises(TransactionConflictError):
        await transitioner.transition(held_lock, holder="someone else", retired=True)
    assert await Lock.filter(id=held_lock.id).exists()
