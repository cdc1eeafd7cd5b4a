"""
Lock Transitioner
-----------------

Moves a lock out of its active state once its rental is billed. A retired
lock is removed entirely, any other lock is reset so it may be rented again.

Both mutations are conditioned on the lock still being held by the
expected user, so a transaction that lost a race affects no rows.
"""
from enum import Enum
from typing import Union
from uuid import UUID

from tortoise.backends.base.client import BaseDBAsyncClient

from lockrental import logger
from lockrental.exceptions import LockVanishedError, TransactionConflictError
from lockrental.models import Lock
from lockrental.models.util import resolve_id


class LockTransition(str, Enum):
    REMOVED = "removed"
    RELEASED = "released"


class LockStateTransitioner:

    async def transition(self, lock: Union[Lock, UUID, str], *, holder: str, retired: bool,
                         using_db: BaseDBAsyncClient = None) -> LockTransition:
        """
        Deletes or releases the lock.

        :param lock: The lock or its id.
        :param holder: The user the lock is expected to be held by.
        :param retired: The retirement flag as observed by the caller.
        :param using_db: The transaction to write in.
        :raises LockVanishedError: When there is no such lock (for example, it was already removed).
        :raises TransactionConflictError: When the lock is not held by the holder anymore.
        """
        lock_id = resolve_id(lock)
        query = Lock.filter(id=lock_id, user_id=holder).using_db(using_db)

        if retired:
            affected = await query.delete()
            transition = LockTransition.REMOVED
        else:
            affected = await query.update(user_id=None, hourly_rate=None, start_time=None)
            transition = LockTransition.RELEASED

        if not affected:
            if not await Lock.filter(id=lock_id).using_db(using_db).exists():
                raise LockVanishedError(lock_id)
            raise TransactionConflictError(lock_id)

        logger.debug("Lock %s %s", lock_id, transition.value)
        return transition
