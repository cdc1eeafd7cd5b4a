"""
Lock Status
-----------

Decides whether a given user currently holds a given lock.

The answer is a single bit: a lock that does not exist and a lock
held by somebody else are indistinguishable to the caller.
"""
from enum import IntEnum
from typing import Union
from uuid import UUID

from tortoise.backends.base.client import BaseDBAsyncClient
from tortoise.queryset import QuerySet

from lockrental.models import Lock
from lockrental.models.util import resolve_id


class LockStatus(IntEnum):
    NOT_HELD = 0
    HELD = 1


class LockStatusValidator:
    """Checks the holder of a lock with a plain read."""

    def _query(self, lock_id: UUID) -> QuerySet:
        return Lock.filter(id=lock_id)

    async def get_lock_status(self, user_id: str, lock: Union[Lock, UUID, str], *,
                              using_db: BaseDBAsyncClient = None) -> LockStatus:
        """
        Gets the status of the lock for the given user.

        :param user_id: The (already authenticated) user asking.
        :param lock: The lock or its id.
        :param using_db: The transaction to run the check in.
        :return: :attr:`LockStatus.HELD` if the user is renting the lock, otherwise :attr:`LockStatus.NOT_HELD`
        """
        found = await self._query(resolve_id(lock)).using_db(using_db).first()

        if found is not None and found.is_held_by(user_id):
            return LockStatus.HELD
        return LockStatus.NOT_HELD


class RowLockingStatusValidator(LockStatusValidator):
    """
    Checks the holder of a lock while taking a row lock on it, so that
    the lock may not change until the surrounding transaction completes.

    .. note:: Backends without ``SELECT ... FOR UPDATE`` (sqlite) already
        serialize their transactions, so tortoise simply leaves it out.
    """

    def _query(self, lock_id: UUID) -> QuerySet:
        return super()._query(lock_id).select_for_update()
