"""
Lock
-------------------------

Represents a physical lock docked at a :class:`~lockrental.models.station.Station`.

A lock is either idle, or held by exactly one user since some start time.
The two rental columns are only ever set or cleared together, which is
exposed through :attr:`Lock.rental_state`. The hardware secrets stay with the
lock between rentals so that it may be opened again.
"""
from datetime import datetime
from typing import Dict, Any

from tortoise import Model, fields

from lockrental.exceptions import RentalStateError
from lockrental.models.fields import FixedBinaryField
from lockrental.models.util import Idle, ActiveRental, RentalState

SECRET_LENGTH = 512
"""The width of the hardware secret (in bytes)."""


class Lock(Model):
    id = fields.UUIDField(pk=True)
    name = fields.CharField(max_length=255)
    station = fields.ForeignKeyField("models.Station", related_name="locks")

    hourly_rate = fields.DecimalField(max_digits=10, decimal_places=2, null=True)
    user_id = fields.CharField(max_length=255, null=True)
    start_time: datetime = fields.DatetimeField(null=True)

    url = fields.TextField()
    secret: bytes = FixedBinaryField(SECRET_LENGTH)
    mac = fields.CharField(max_length=255)

    deleted = fields.BooleanField(default=False)
    """Whether the lock is retired, and should be removed once its rental ends."""

    class Meta:
        table = "locks"

    @property
    def rental_state(self) -> RentalState:
        if self.user_id is None and self.start_time is None:
            return Idle()
        if self.user_id is None or self.start_time is None:
            raise RentalStateError(self.id)
        return ActiveRental(self.user_id, self.start_time, self.hourly_rate)

    @rental_state.setter
    def rental_state(self, state: RentalState):
        if isinstance(state, ActiveRental):
            self.user_id, self.start_time, self.hourly_rate = state
        else:
            self.user_id, self.start_time, self.hourly_rate = None, None, None

    @property
    def is_active(self) -> bool:
        return isinstance(self.rental_state, ActiveRental)

    def is_held_by(self, user_id: str) -> bool:
        state = self.rental_state
        return isinstance(state, ActiveRental) and state.user_id == user_id

    async def save(self, *args, **kwargs):
        if (self.user_id is None) != (self.start_time is None):
            raise RentalStateError(self.id)
        await super().save(*args, **kwargs)

    def serialize(self) -> Dict[str, Any]:
        """
        Serializes the lock into a format that can be turned into JSON.

        .. note:: The hardware secrets are never serialized, they are only
            handed out when a rental ends.
        """
        data = {
            "id": str(self.id),
            "name": self.name,
            "station_id": str(self.station_id),
            "available": not self.is_active and not self.deleted,
            "deleted": self.deleted,
        }

        if self.is_active:
            data["user_id"] = self.user_id
            data["start_time"] = self.start_time
            data["hourly_rate"] = self.hourly_rate

        return data

    def __str__(self):
        return f"[{self.id}] {self.name}"
