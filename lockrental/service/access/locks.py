"""
Locks
-----

Handles looking up and retiring locks.
"""
from typing import List, Optional, Union
from uuid import UUID

from tortoise.expressions import Q
from tortoise.transactions import in_transaction

from lockrental import logger
from lockrental.exceptions import LockVanishedError
from lockrental.models import Lock, Station
from lockrental.models.util import resolve_id


async def get_lock(lock: Union[Lock, UUID, str]) -> Optional[Lock]:
    return await Lock.filter(id=resolve_id(lock)).first().prefetch_related('station')


async def get_locks(*, station: Union[Station, UUID, str] = None, available: bool = None) -> List[Lock]:
    """
    Gets the locks that match the given filters.

    :param station: Only include locks docked at this station.
    :param available: Only include locks that are (or are not) free to rent.
    """
    query = Lock.all()

    if station is not None:
        query = query.filter(station_id=resolve_id(station))

    if available is True:
        query = query.filter(user_id__isnull=True, deleted=False)
    elif available is False:
        query = query.filter(Q(user_id__isnull=False) | Q(deleted=True))

    return await query.prefetch_related('station')


async def retire_lock(lock: Union[Lock, UUID, str]) -> bool:
    """
    Takes a lock out of circulation. An idle lock is removed right away,
    a rented one is flagged and removed when its rental ends.

    :return: Whether the lock was removed.
    :raises LockVanishedError: If there is no such lock.
    """
    lock_id = resolve_id(lock)

    async with in_transaction() as connection:
        found = await Lock.filter(id=lock_id).select_for_update().using_db(connection).first()
        if found is None:
            raise LockVanishedError(lock_id)

        if found.is_active:
            await Lock.filter(id=lock_id).using_db(connection).update(deleted=True)
            logger.info("Lock %s retired, removing when its rental ends", lock_id)
            return False

        await Lock.filter(id=lock_id).using_db(connection).delete()
        logger.info("Lock %s retired and removed", lock_id)
        return True
