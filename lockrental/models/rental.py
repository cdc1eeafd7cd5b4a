"""
Rental
---------------------------

An append-only record of one completed rental. It snapshots the station and
the lock at the moment the rental ended so that the billing history survives
the lock being retired.
"""
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Dict, Any

from shapely.geometry import Point, mapping
from tortoise import Model, fields

from lockrental.exceptions import ImmutableRentalError


class Rental(Model):
    id = fields.IntField(pk=True)

    station_id = fields.UUIDField()
    station_name = fields.CharField(max_length=255)
    latitude = fields.FloatField()
    longitude = fields.FloatField()

    lock_id = fields.UUIDField()
    lock_name = fields.CharField(max_length=255)

    user_id = fields.CharField(max_length=255)
    hourly_rate: Decimal = fields.DecimalField(max_digits=10, decimal_places=2)
    start_time: datetime = fields.DatetimeField()
    end_time: datetime = fields.DatetimeField()
    duration: timedelta = fields.TimeDeltaField()
    """The exact time the lock was held for."""
    cost: Decimal = fields.DecimalField(max_digits=12, decimal_places=2)
    """The billed cost, only counting whole hours."""

    class Meta:
        table = "rentals"

    async def save(self, *args, **kwargs):
        if self._saved_in_db:
            raise ImmutableRentalError(self.id)
        await super().save(*args, **kwargs)

    async def delete(self, *args, **kwargs):
        raise ImmutableRentalError(self.id)

    def serialize(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "lock_id": str(self.lock_id),
            "lock_name": self.lock_name,
            "station": {
                "id": str(self.station_id),
                "name": self.station_name,
                "location": mapping(Point(self.longitude, self.latitude)),
            },
            "hourly_rate": self.hourly_rate,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "duration": self.duration.total_seconds(),
            "cost": self.cost,
        }
