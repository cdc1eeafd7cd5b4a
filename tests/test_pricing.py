from datetime import datetime, timedelta, timezone
from decimal import Decimal

from lockrental.pricing import billable_hours, get_cost, estimate_cost

START = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_billable_hours_truncates():
    assert billable_hours(START, START + timedelta(minutes=59)) == 0
    assert billable_hours(START, START + timedelta(minutes=61)) == 1
    assert billable_hours(START, START + timedelta(hours=26, minutes=59, seconds=59)) == 26


def test_billable_hours_negative_is_free():
    assert billable_hours(START, START - timedelta(hours=3)) == 0


def test_cost_uses_whole_hours():
    assert get_cost(START, START + timedelta(minutes=90), Decimal(2)) == Decimal(2)
    assert get_cost(START, START + timedelta(hours=3), Decimal("1.25")) == Decimal("3.75")


def test_cost_under_an_hour_is_zero():
    assert get_cost(START, START + timedelta(minutes=59, seconds=59), Decimal(5)) == 0


def test_cost_without_rate_is_zero():
    assert get_cost(START, START + timedelta(hours=5), None) == 0


async def test_estimate_cost_of_idle_lock(random_lock):
    assert estimate_cost(random_lock) is None


async def test_estimate_cost_of_active_lock(random_lock_factory):
    lock = await random_lock_factory(user_id="someone", start_time=START, hourly_rate=Decimal(3))
    assert estimate_cost(lock, START + timedelta(hours=2, minutes=30)) == Decimal(6)


def test_billable_hours_mixed_awareness():
    """Assert that a naive date is read as utc rather than refused."""
    naive_end = (START + timedelta(minutes=150)).replace(tzinfo=None)
    assert billable_hours(START, naive_end) == 2
    assert billable_hours(START.replace(tzinfo=None), START + timedelta(minutes=61)) == 1


async def test_estimate_cost_with_naive_clock(random_lock_factory):
    lock = await random_lock_factory(user_id="someone", start_time=START, hourly_rate=Decimal(4))
    assert estimate_cost(lock, (START + timedelta(hours=1, minutes=5)).replace(tzinfo=None)) == Decimal(4)
