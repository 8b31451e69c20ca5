from __future__ import annotations

from typing import NamedTuple

from nrel.footprint.model.roadnetwork.road_type import RoadType
from nrel.footprint.util.units import Kilometers, Kmph


class RouteSegment(NamedTuple):
    """
    a stretch of a route as reported by a routing provider, tagged with its speed

    :param distance_km: the length of the stretch
    :param speed_kmph: the speed along the stretch
    """

    distance_km: Kilometers
    speed_kmph: Kmph

    @property
    def road_type(self) -> RoadType:
        return RoadType.from_speed(self.speed_kmph)
