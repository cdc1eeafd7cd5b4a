"""
Station
---------------------------

A fixed docking site which hosts one or more locks.
"""
from typing import Dict, Any

from shapely.geometry import Point, mapping
from tortoise import Model, fields

from lockrental.models.util import GeoJSONType


class Station(Model):
    id = fields.UUIDField(pk=True)
    name = fields.CharField(max_length=255)
    latitude = fields.FloatField()
    longitude = fields.FloatField()

    class Meta:
        table = "stations"

    @property
    def location(self) -> Point:
        return Point(self.longitude, self.latitude)

    def serialize(self, lock_count: int = None) -> Dict[str, Any]:
        """
        Serializes the station into a GeoJSON feature.

        :param lock_count: The optional number of available locks at the station.
        """
        data = {
            "type": GeoJSONType.FEATURE,
            "geometry": mapping(self.location),
            "properties": {
                "id": str(self.id),
                "name": self.name,
            }
        }

        if lock_count is not None:
            data["properties"]["available_locks"] = lock_count

        return data

    def __str__(self):
        return f"[{self.id}] {self.name}"
