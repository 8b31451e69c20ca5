from __future__ import annotations

import logging
from typing import Dict, NamedTuple, Optional, Tuple

from nrel.footprint.config import FootprintConfig
from nrel.footprint.external.dataset.dataset_client import DatasetClient
from nrel.footprint.model.emission.emission_calculator import EmissionCalculator
from nrel.footprint.model.emission.emission_factor_table import EmissionFactorTable
from nrel.footprint.model.roadnetwork.car_route import CarRoute
from nrel.footprint.model.roadnetwork.openrouteservice.ors_routing_provider import (
    OpenRouteServiceProvider,
)
from nrel.footprint.model.roadnetwork.place import Place, PlaceSearchResult
from nrel.footprint.model.roadnetwork.public_transport_route import PublicTransportRoute
from nrel.footprint.model.roadnetwork.routing_provider import RoutingProvider
from nrel.footprint.model.vehicle.vehicle import Vehicle
from nrel.footprint.model.vehicle.vehicle_catalog import VehicleCatalog
from nrel.footprint.model.vehicle.vehicle_store import CsvVehicleStore, VehicleStore
from nrel.footprint.util.typealiases import Brand, CanonicalFuelLabel, MixId, Model, VehicleId
from nrel.footprint.util.units import GramsCO2, Kilometers

log = logging.getLogger(__name__)


class TripEmissions(NamedTuple):
    """
    the emissions of a trip by car and by public transport, for comparison
    """

    car_emissions: GramsCO2
    public_transport_emissions: GramsCO2

    def asdict(self) -> Dict:
        return self._asdict()


class FootprintService(NamedTuple):
    """
    the operations of the footprint engine, as offered to a request front-end
    """

    emission_factor_table: EmissionFactorTable
    vehicle_catalog: VehicleCatalog
    vehicle_store: VehicleStore
    routing_provider: RoutingProvider

    @classmethod
    def build(cls, config: FootprintConfig) -> FootprintService:
        """
        wires up the service from a config. vehicles are looked up in the local vehicle store
        when one is configured, otherwise in the vehicle dataset.

        :param config: the footprint config
        :return: the service
        """
        emission_factor_table = EmissionFactorTable.build(config.emissions.emission_factors_file)

        vehicle_store: VehicleStore
        if config.store.vehicle_store_file is not None:
            vehicle_store = CsvVehicleStore.build(config.store.vehicle_store_file)
        else:
            vehicle_store = DatasetClient(config.dataset)

        vehicle_catalog = VehicleCatalog.build(
            config.emissions.generic_vehicles_file, vehicle_store
        )
        routing_provider = OpenRouteServiceProvider(config.routing)
        log.info(f"footprint service using {vehicle_store.__class__.__name__} for vehicle lookups")

        return FootprintService(
            emission_factor_table=emission_factor_table,
            vehicle_catalog=vehicle_catalog,
            vehicle_store=vehicle_store,
            routing_provider=routing_provider,
        )

    @property
    def calculator(self) -> EmissionCalculator:
        return EmissionCalculator(self.emission_factor_table)

    def electricity_mixes(self) -> Tuple[Dict[str, str], ...]:
        return self.emission_factor_table.list_electricity_mixes()

    def generic_vehicles(self) -> Tuple[Vehicle, ...]:
        return self.vehicle_catalog.list_generic_vehicles()

    def car_emissions(
        self,
        vehicle_id: VehicleId,
        urban_km: Kilometers,
        non_urban_km: Kilometers,
        autobahn_km: Kilometers,
        mix_id: Optional[MixId] = None,
    ) -> GramsCO2:
        """
        the emissions of a vehicle driving known road type distances

        :param vehicle_id: a generic vehicle id or a vehicle store id
        :param urban_km: distance driven below 50 km/h
        :param non_urban_km: distance driven between 50 and 100 km/h
        :param autobahn_km: distance driven above 100 km/h
        :param mix_id: the electricity mix, required for electric vehicles
        :return: grams of CO2
        """
        route = CarRoute.from_segments(urban_km, non_urban_km, autobahn_km)
        vehicle = self.vehicle_catalog.resolve(vehicle_id)
        return self.calculator.car_emissions(vehicle, route, mix_id)

    def trip_emissions(
        self,
        vehicle_id: VehicleId,
        start: Place,
        destination: Place,
        mix_id: Optional[MixId] = None,
    ) -> TripEmissions:
        """
        the emissions of driving from start to destination, along with the emissions of taking
        public transport over the same distances

        :param vehicle_id: a generic vehicle id or a vehicle store id
        :param start: where the trip begins
        :param destination: where the trip ends
        :param mix_id: the electricity mix, required for electric vehicles
        :return: the car and public transport emissions
        :raises MissingParameterError: for an electric vehicle without a mix
        """
        vehicle = self.vehicle_catalog.resolve(vehicle_id)
        calculator = self.calculator
        # fail on a missing or unknown mix before querying the routing provider
        calculator.emission_factor(vehicle, mix_id)
        car_route = CarRoute.from_places(start, destination, self.routing_provider)
        car_emissions = calculator.car_emissions(vehicle, car_route, mix_id)
        public_transport_route = PublicTransportRoute.from_car_route(car_route)
        public_transport_emissions = calculator.public_transport_emissions(public_transport_route)
        return TripEmissions(
            car_emissions=car_emissions,
            public_transport_emissions=public_transport_emissions,
        )

    def public_transport_emissions(
        self, short_distance_km: Kilometers, long_distance_km: Kilometers
    ) -> GramsCO2:
        route = PublicTransportRoute.from_distances(short_distance_km, long_distance_km)
        return self.calculator.public_transport_emissions(route)

    def search_places(self, query: str) -> Tuple[PlaceSearchResult, ...]:
        return self.routing_provider.search_place(query)

    def brands(self) -> Tuple[Brand, ...]:
        return self.vehicle_store.list_brands()

    def models(self, brand: Brand) -> Tuple[Model, ...]:
        return self.vehicle_store.list_models(brand)

    def models_by_fuel(self, brand: Brand, fuel: CanonicalFuelLabel) -> Tuple[Model, ...]:
        return self.vehicle_store.list_models_by_fuel(brand, fuel)

    def fuels(self, brand: Brand, model: Model) -> Tuple[CanonicalFuelLabel, ...]:
        return self.vehicle_store.list_fuels(brand, model)

    def fuels_by_brand(self, brand: Brand) -> Tuple[CanonicalFuelLabel, ...]:
        return self.vehicle_store.list_fuels_by_brand(brand)

    def vehicle_id(self, brand: Brand, model: Model, fuel: CanonicalFuelLabel) -> VehicleId:
        return self.vehicle_store.resolve_id(brand, model, fuel)
