"""
Stations
--------
"""
from typing import List, Optional, Union
from uuid import UUID

from lockrental.models import Station
from lockrental.models.util import resolve_id


async def get_stations() -> List[Station]:
    return await Station.all().prefetch_related('locks')


async def get_station(station: Union[Station, UUID, str]) -> Optional[Station]:
    return await Station.filter(id=resolve_id(station)).first().prefetch_related('locks')
