from __future__ import annotations

from typing import Any, NamedTuple

from nrel.footprint.model.roadnetwork.car_route import CarRoute, validate_distance
from nrel.footprint.util.units import Kilometers


class PublicTransportRoute(NamedTuple):
    """
    a public transport trip split by kind of service


    :param short_distance_km: distance by local bus, underground and (sub)urban railway
    :param long_distance_km: distance by regional trains and mainline rail services
    """

    short_distance_km: Kilometers
    long_distance_km: Kilometers

    @classmethod
    def from_distances(cls, short_distance_km: Any, long_distance_km: Any) -> PublicTransportRoute:
        return PublicTransportRoute(
            short_distance_km=validate_distance(short_distance_km, "short_distance_km"),
            long_distance_km=validate_distance(long_distance_km, "long_distance_km"),
        )

    @classmethod
    def from_car_route(cls, car_route: CarRoute) -> PublicTransportRoute:
        """
        the public transport equivalent of a car trip: urban stretches are served by local
        transport, everything else by rail

        :param car_route: the car trip
        :return: the public transport trip
        """
        return PublicTransportRoute(
            short_distance_km=car_route.urban_km,
            long_distance_km=car_route.non_urban_km + car_route.autobahn_km,
        )
