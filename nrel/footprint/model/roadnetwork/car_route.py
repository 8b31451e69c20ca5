from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, Iterable, NamedTuple

import immutables

from nrel.footprint.model.roadnetwork.road_type import RoadType
from nrel.footprint.model.roadnetwork.route_segment import RouteSegment
from nrel.footprint.util.exception import InvalidDistanceError, RouteNotFoundError
from nrel.footprint.util.units import Kilometers

if TYPE_CHECKING:
    from nrel.footprint.model.roadnetwork.place import Place
    from nrel.footprint.model.roadnetwork.routing_provider import RoutingProvider

log = logging.getLogger(__name__)


class CarRoute(NamedTuple):
    """
    a car trip split by road type


    :param urban_km: distance driven below 50 km/h
    :param non_urban_km: distance driven between 50 and 100 km/h
    :param autobahn_km: distance driven above 100 km/h
    """

    urban_km: Kilometers
    non_urban_km: Kilometers
    autobahn_km: Kilometers

    @property
    def total_km(self) -> Kilometers:
        return self.urban_km + self.non_urban_km + self.autobahn_km

    def distance_km(self, road_type: RoadType) -> Kilometers:
        if road_type == RoadType.URBAN:
            return self.urban_km
        elif road_type == RoadType.NON_URBAN:
            return self.non_urban_km
        else:
            return self.autobahn_km

    @classmethod
    def from_segments(cls, urban_km: Any, non_urban_km: Any, autobahn_km: Any) -> CarRoute:
        """
        builds a route from known road type distances

        :param urban_km: urban distance
        :param non_urban_km: non-urban distance
        :param autobahn_km: autobahn distance
        :return: the route
        :raises InvalidDistanceError: if any distance is negative or not a number
        """
        return CarRoute(
            urban_km=validate_distance(urban_km, "urban_km"),
            non_urban_km=validate_distance(non_urban_km, "non_urban_km"),
            autobahn_km=validate_distance(autobahn_km, "autobahn_km"),
        )

    @classmethod
    def from_route_segments(cls, segments: Iterable[RouteSegment]) -> CarRoute:
        """
        classifies each speed-tagged segment by road type and sums the distances per road type

        :param segments: the segments of a routed trip
        :return: the route
        """
        totals = immutables.Map({road_type: 0.0 for road_type in RoadType})
        for segment in segments:
            distance_km = validate_distance(segment.distance_km, "segment distance_km")
            road_type = segment.road_type
            totals = totals.set(road_type, totals[road_type] + distance_km)

        return CarRoute(
            urban_km=totals[RoadType.URBAN],
            non_urban_km=totals[RoadType.NON_URBAN],
            autobahn_km=totals[RoadType.AUTOBAHN],
        )

    @classmethod
    def from_places(
        cls, start: Place, destination: Place, routing_provider: RoutingProvider
    ) -> CarRoute:
        """
        asks the routing provider for the route between two places and splits it by road type

        :param start: where the trip begins
        :param destination: where the trip ends
        :param routing_provider: the provider used to find the route
        :return: the route
        :raises RouteNotFoundError: if the provider finds no path
        :raises ExternalServiceError: if the provider could not be queried
        """
        segments = routing_provider.route(start, destination)
        if len(segments) == 0:
            raise RouteNotFoundError(f"no route found from {start} to {destination}")
        route = cls.from_route_segments(segments)
        log.debug(f"routed {start} -> {destination} as {route}")
        return route


def validate_distance(value: Any, name: str) -> Kilometers:
    """
    parses a distance in kilometers

    :param value: the distance
    :param name: the name of the distance, for error reporting
    :return: the distance as a float
    :raises InvalidDistanceError: if the distance is negative or not a finite number
    """
    try:
        distance = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidDistanceError(f"{name} must be a number, found {value!r}") from e
    if math.isnan(distance) or math.isinf(distance):
        raise InvalidDistanceError(f"{name} must be a finite number, found {value!r}")
    elif distance < 0:
        raise InvalidDistanceError(f"{name} must not be negative, found {distance}")
    return distance
