from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Union, NamedTuple, Optional
from uuid import UUID

from tortoise import Model


class GeoJSONType(str, Enum):
    FEATURE = "Feature"


class Idle(NamedTuple):
    """The lock has no holder."""


class ActiveRental(NamedTuple):
    """The lock is held by a user since the start time."""
    user_id: str
    start_time: datetime
    hourly_rate: Optional[Decimal] = None


RentalState = Union[Idle, ActiveRental]


def resolve_id(target: Union[Model, UUID, str]) -> UUID:
    """
    Resolves a model or an identifier into a uuid.

    :raises ValueError: If the target is a malformed uuid string.
    """
    if isinstance(target, Model):
        return target.id
    elif isinstance(target, UUID):
        return target
    elif isinstance(target, str):
        return UUID(target)
    else:
        raise TypeError(f"Target {target} is neither a Model, a UUID or a str.")
