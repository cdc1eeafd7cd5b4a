"""
Rentals
-------

The billing history. Rentals are only ever created when a rental ends.
"""
from typing import List, Optional, Union
from uuid import UUID

from lockrental.models import Lock, Rental
from lockrental.models.util import resolve_id


async def get_rentals(*, user_id: str = None, lock: Union[Lock, UUID, str] = None) -> List[Rental]:
    """
    Gets completed rentals, most recent first.

    :param user_id: Only include rentals by this user.
    :param lock: Only include rentals of this lock (which may since have been removed).
    """
    options = {}

    if user_id is not None:
        options["user_id"] = user_id
    if lock is not None:
        options["lock_id"] = resolve_id(lock)

    return await Rental.filter(**options).order_by('-end_time', '-id')


async def get_rental(rental_id: int) -> Optional[Rental]:
    return await Rental.filter(id=rental_id).first()
