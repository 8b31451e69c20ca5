from __future__ import annotations

from enum import Enum

from nrel.footprint.util.units import Kmph

URBAN_MAX_SPEED_KMPH = 50
NON_URBAN_MAX_SPEED_KMPH = 100


class RoadType(Enum):
    """
    the speed-classified kinds of road a car route is split into
    """

    URBAN = "urban"
    NON_URBAN = "non_urban"
    AUTOBAHN = "autobahn"

    @classmethod
    def from_speed(cls, speed_kmph: Kmph) -> RoadType:
        """
        classifies a stretch of road by its speed. below 50 km/h is urban, 50 through 100 km/h
        (both inclusive) is non-urban and anything faster is autobahn.

        :param speed_kmph: the speed on this stretch of road
        :return: the road type
        """
        if speed_kmph < URBAN_MAX_SPEED_KMPH:
            return RoadType.URBAN
        elif speed_kmph <= NON_URBAN_MAX_SPEED_KMPH:
            return RoadType.NON_URBAN
        else:
            return RoadType.AUTOBAHN
