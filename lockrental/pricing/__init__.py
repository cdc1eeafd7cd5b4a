"""
The pricing module determines the cost of a rental from the time
a lock was held and the hourly rate it was rented at.

Only whole hours are billed: a rental of 59 minutes costs nothing
and one of 61 minutes costs a single hour. The exact duration is
stored alongside the cost for auditing.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from tortoise import timezone

from lockrental.models import Lock
from lockrental.models.util import ActiveRental

HOUR = timedelta(hours=1)


def billable_hours(start_date: datetime, end_date: datetime) -> int:
    """
    The number of whole hours between the two dates, truncated toward zero.

    An end date before the start date bills nothing. Naive dates are taken
    to be in the configured timezone, as tortoise does when reading them.
    """
    return max(0, int((_aware(end_date) - _aware(start_date)) / HOUR))


def _aware(value: datetime) -> datetime:
    return timezone.make_aware(value) if timezone.is_naive(value) else value


def get_cost(start_date: datetime, end_date: datetime, hourly_rate: Optional[Decimal]) -> Decimal:
    """
    Given the start and end of a rental, returns its cost.

    :param hourly_rate: The rate the lock was rented at. A missing rate is free.
    :return: The cost, in the same unit as the rate.
    """
    rate = Decimal(0) if hourly_rate is None else Decimal(hourly_rate)
    return billable_hours(start_date, end_date) * rate


def estimate_cost(lock: Lock, now: datetime = None) -> Optional[Decimal]:
    """Gets the cost of the lock's current rental so far, or None if it is idle."""
    state = lock.rental_state
    if not isinstance(state, ActiveRental):
        return None

    return get_cost(state.start_time, now if now is not None else timezone.now(), state.hourly_rate)
