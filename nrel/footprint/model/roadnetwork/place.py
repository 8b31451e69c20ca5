from __future__ import annotations

from typing import NamedTuple

from nrel.footprint.util.exception import InvalidCoordinateError
from nrel.footprint.util.typealiases import Coordinate, Latitude, Longitude


class Place(NamedTuple):
    latitude: Latitude
    longitude: Longitude

    @classmethod
    def build(cls, latitude: float, longitude: float) -> Place:
        lat, lon = float(latitude), float(longitude)
        if not -90 <= lat <= 90:
            raise InvalidCoordinateError(f"latitude must be within [-90, 90], found {lat}")
        if not -180 <= lon <= 180:
            raise InvalidCoordinateError(f"longitude must be within [-180, 180], found {lon}")
        return Place(latitude=lat, longitude=lon)

    def to_coordinate(self) -> Coordinate:
        """
        lon/lat ordering, as GeoJSON expects
        """
        return self.longitude, self.latitude


class PlaceSearchResult(NamedTuple):
    """
    a place found by searching for an address or the name of a venue
    """

    label: str
    latitude: Latitude
    longitude: Longitude

    @property
    def place(self) -> Place:
        return Place(self.latitude, self.longitude)
