"""
Rental Finalizer
----------------

Writes the billing record of a rental that is ending.
"""
from datetime import datetime
from decimal import Decimal
from typing import Tuple, Union
from uuid import UUID

from tortoise.backends.base.client import BaseDBAsyncClient
from tortoise.queryset import QuerySet

from lockrental import logger
from lockrental.exceptions import LockVanishedError, TransactionConflictError
from lockrental.models import Lock, Rental
from lockrental.models.util import ActiveRental, resolve_id
from lockrental.pricing import get_cost


class RentalFinalizer:

    def _snapshot_query(self, lock_id: UUID) -> QuerySet:
        """
        Reads the lock row alone. A row lock may not be taken across
        the outer join to the station, so the station is loaded separately.
        """
        return Lock.filter(id=lock_id).select_for_update()

    async def finalize(self, lock: Union[Lock, UUID, str], end_time: datetime, *,
                       using_db: BaseDBAsyncClient = None) -> Tuple[Rental, Lock]:
        """
        Computes the duration and cost of the lock's current rental
        and persists it as a :class:`~lockrental.models.Rental`.

        The lock is re-read (with a row lock, where supported) so that the
        snapshot is the one the rest of the transaction acts on.

        :param lock: The lock or its id.
        :param end_time: When the rental ended.
        :param using_db: The transaction to write in.
        :return: The new rental and the lock snapshot it was built from.
        :raises LockVanishedError: When the lock no longer exists.
        :raises TransactionConflictError: When the lock is no longer rented.
        """
        lock_id = resolve_id(lock)
        snapshot = await self._snapshot_query(lock_id).using_db(using_db).first()

        if snapshot is None:
            raise LockVanishedError(lock_id)

        await snapshot.fetch_related("station", using_db=using_db)

        state = snapshot.rental_state
        if not isinstance(state, ActiveRental):
            raise TransactionConflictError(lock_id)

        if state.hourly_rate is None:
            logger.warning("Lock %s has no hourly rate, billing nothing", lock_id)

        station = snapshot.station
        rental = await Rental.create(
            station_id=station.id,
            station_name=station.name,
            latitude=station.latitude,
            longitude=station.longitude,
            lock_id=snapshot.id,
            lock_name=snapshot.name,
            user_id=state.user_id,
            hourly_rate=state.hourly_rate if state.hourly_rate is not None else Decimal(0),
            start_time=state.start_time,
            end_time=end_time,
            duration=end_time - state.start_time,
            cost=get_cost(state.start_time, end_time, state.hourly_rate),
            using_db=using_db,
        )

        logger.debug("Wrote rental %s for lock %s (cost %s)", rental.id, lock_id, rental.cost)
        return rental, snapshot
