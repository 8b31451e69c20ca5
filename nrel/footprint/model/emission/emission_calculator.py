from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from nrel.footprint.model.emission.emission_factor_table import EmissionFactorTable
from nrel.footprint.model.energy.fueltype import FuelType
from nrel.footprint.model.roadnetwork.car_route import CarRoute
from nrel.footprint.model.roadnetwork.public_transport_route import PublicTransportRoute
from nrel.footprint.model.roadnetwork.road_type import RoadType
from nrel.footprint.model.vehicle.vehicle import Vehicle
from nrel.footprint.util.exception import MissingParameterError
from nrel.footprint.util.typealiases import MixId
from nrel.footprint.util.units import CONSUMPTION_DISTANCE_KM, GramsCO2

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmissionCalculator:
    """
    applies an emission factor table to vehicles traveling car routes and to public transport routes.
    every calculation is a pure function of its inputs.
    """

    emission_factor_table: EmissionFactorTable

    def emission_factor(self, vehicle: Vehicle, mix_id: Optional[MixId] = None) -> float:
        """
        grams of CO2 per liter of fuel, or per kilowatt-hour for an electric vehicle

        :raises MissingParameterError: for an electric vehicle without a mix
        :raises UnknownMixError: for an electric vehicle with a mix that is not configured
        """
        if vehicle.fuel_type == FuelType.ELECTRICITY:
            if mix_id is None:
                raise MissingParameterError(
                    f"vehicle {vehicle.id} runs on electricity and requires an electricity mix"
                )
            return self.emission_factor_table.mix_factor(mix_id)
        return self.emission_factor_table.fuel_factor(vehicle.fuel_type)

    def car_emissions(
        self, vehicle: Vehicle, route: CarRoute, mix_id: Optional[MixId] = None
    ) -> GramsCO2:
        """
        the emissions of a vehicle along a route, summed over the urban, non-urban and autobahn segments.
        the electricity mix is required for electric vehicles and ignored for all others.

        :param vehicle: the vehicle driving the route
        :param route: the road-type split of the route
        :param mix_id: the electricity mix powering an electric vehicle
        :return: grams of CO2
        :raises MissingParameterError: for an electric vehicle without a mix
        :raises UnknownMixError: for an electric vehicle with a mix that is not configured
        """
        factor = self.emission_factor(vehicle, mix_id)

        emissions = 0.0
        for road_type in RoadType:
            consumption = vehicle.consumption(road_type)
            distance_km = route.distance_km(road_type)
            emissions += consumption / CONSUMPTION_DISTANCE_KM * distance_km * factor

        log.debug(
            f"vehicle {vehicle.id} ({vehicle.fuel_type.value}) emits {emissions} gCO2 "
            f"over {route.total_km} km"
        )
        return emissions

    def public_transport_emissions(self, route: PublicTransportRoute) -> GramsCO2:
        """
        the emissions of traveling a route by public transport

        :param route: the short and long distance split of the trip
        :return: grams of CO2
        """
        table = self.emission_factor_table
        short_distance = route.short_distance_km * table.short_distance_factor
        long_distance = route.long_distance_km * table.long_distance_factor
        return short_distance + long_distance
