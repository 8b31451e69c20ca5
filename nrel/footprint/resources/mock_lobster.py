from typing import Any, Dict, Iterable, Optional, Tuple
from unittest.mock import MagicMock

import immutables
import requests

from nrel.footprint.config.dataset import Dataset
from nrel.footprint.config.routing import Routing
from nrel.footprint.external.dataset.dataset_client import DatasetClient
from nrel.footprint.model.emission.emission_calculator import EmissionCalculator
from nrel.footprint.model.emission.emission_factor_table import EmissionFactorTable
from nrel.footprint.model.roadnetwork.car_route import CarRoute
from nrel.footprint.model.roadnetwork.openrouteservice.ors_routing_provider import (
    OpenRouteServiceProvider,
)
from nrel.footprint.model.roadnetwork.place import Place, PlaceSearchResult
from nrel.footprint.model.roadnetwork.route_segment import RouteSegment
from nrel.footprint.model.roadnetwork.routing_provider import RoutingProvider
from nrel.footprint.model.vehicle.vehicle import Vehicle
from nrel.footprint.model.vehicle.vehicle_catalog import VehicleCatalog
from nrel.footprint.model.vehicle.vehicle_store import CsvVehicleStore, VehicleStore
from nrel.footprint.service.footprint_service import FootprintService
from nrel.footprint.util.typealiases import VehicleId
from nrel.footprint.util.units import GramsCO2PerKm, GramsCO2PerKwH, GramsCO2PerLiter, Kilometers


class DefaultIds:
    @classmethod
    def mock_vehicle_id(cls) -> VehicleId:
        return "v0"

    @classmethod
    def mock_mix_id(cls) -> str:
        return "test_mix"


def mock_vehicle(
    vehicle_id: VehicleId = DefaultIds.mock_vehicle_id(),
    brand: str = "RENAULT",
    model: str = "CLIO",
    fuel_type: str = "petrol",
    urban_consumption: float = 6.0,
    non_urban_consumption: float = 4.8,
    autobahn_consumption: float = 5.9,
    official_co2_g_km: Optional[float] = None,
) -> Vehicle:
    return Vehicle.build(
        id=vehicle_id,
        brand=brand,
        model=model,
        fuel_type=fuel_type,
        urban_consumption=urban_consumption,
        non_urban_consumption=non_urban_consumption,
        autobahn_consumption=autobahn_consumption,
        official_co2_g_km=official_co2_g_km,
    )


def mock_electric_vehicle(vehicle_id: VehicleId = "ev0", consumption: float = 15.0) -> Vehicle:
    return mock_vehicle(
        vehicle_id=vehicle_id,
        brand="RENAULT",
        model="ZOE",
        fuel_type="electricity",
        urban_consumption=consumption,
        non_urban_consumption=consumption,
        autobahn_consumption=consumption,
    )


def mock_emission_factors_dict(
    petrol: GramsCO2PerLiter = 2370,
    diesel: GramsCO2PerLiter = 2650,
    cng: GramsCO2PerLiter = 1630,
    mix_factor: GramsCO2PerKwH = 400,
    short_distance: GramsCO2PerKm = 60,
    long_distance: GramsCO2PerKm = 30,
) -> Dict:
    return {
        "fuel": {"petrol": petrol, "diesel": diesel, "cng": cng},
        "electricity_mixes": [
            {
                "id": DefaultIds.mock_mix_id(),
                "description": "a test electricity mix",
                "emission_factor": mix_factor,
            },
            {"id": "clean_mix", "description": "a clean test mix", "emission_factor": 0},
        ],
        "public_transport": {"short_distance": short_distance, "long_distance": long_distance},
    }


def mock_emission_factor_table(**kwargs) -> EmissionFactorTable:
    return EmissionFactorTable.from_dict(mock_emission_factors_dict(**kwargs))


def mock_calculator(**kwargs) -> EmissionCalculator:
    return EmissionCalculator(mock_emission_factor_table(**kwargs))


def mock_car_route(
    urban_km: Kilometers = 10, non_urban_km: Kilometers = 0, autobahn_km: Kilometers = 0
) -> CarRoute:
    return CarRoute.from_segments(urban_km, non_urban_km, autobahn_km)


def mock_generic_vehicles() -> immutables.Map:
    vehicles = (
        mock_vehicle("generic_petrol", brand="generic", model="petrol car", fuel_type="petrol"),
        mock_vehicle("generic_diesel", brand="generic", model="diesel car", fuel_type="diesel"),
        mock_electric_vehicle("generic_electricity"),
    )
    return immutables.Map({v.id: v for v in vehicles})


def mock_vehicle_store(vehicles: Optional[Iterable[Vehicle]] = None) -> CsvVehicleStore:
    if vehicles is None:
        vehicles = (
            mock_vehicle("v0", "RENAULT", "CLIO", "petrol"),
            mock_vehicle("v1", "RENAULT", "CLIO", "diesel", 5.0, 4.0, 4.0),
            mock_vehicle("v2", "RENAULT", "MEGANE", "diesel", 5.5, 4.5, 4.5),
            mock_electric_vehicle("v3"),
            mock_vehicle("v4", "PEUGEOT", "208", "petrol", 5.8, 4.4, 4.4),
        )
    return CsvVehicleStore.from_vehicles(vehicles)


def mock_catalog(vehicle_store: Optional[VehicleStore] = None) -> VehicleCatalog:
    return VehicleCatalog(generic_vehicles=mock_generic_vehicles(), vehicle_store=vehicle_store)


class MockRoutingProvider(RoutingProvider):
    """
    a routing provider which answers every request with the same segments and places
    """

    def __init__(
        self,
        segments: Tuple[RouteSegment, ...] = (),
        places: Tuple[PlaceSearchResult, ...] = (),
    ):
        self.segments = segments
        self.places = places
        self.requests = []

    def route(self, start: Place, destination: Place) -> Tuple[RouteSegment, ...]:
        self.requests.append((start, destination))
        return self.segments

    def search_place(self, query: str) -> Tuple[PlaceSearchResult, ...]:
        return self.places


def mock_route_segments() -> Tuple[RouteSegment, ...]:
    return (
        RouteSegment(distance_km=2.0, speed_kmph=30),
        RouteSegment(distance_km=5.0, speed_kmph=50),
        RouteSegment(distance_km=10.0, speed_kmph=100),
        RouteSegment(distance_km=20.0, speed_kmph=120),
        RouteSegment(distance_km=1.0, speed_kmph=20),
    )


def mock_place(latitude: float = 48.137, longitude: float = 11.575) -> Place:
    return Place.build(latitude, longitude)


def mock_dataset_config(base_url: str = "https://dataset.test/api/datasets/vehicles") -> Dataset:
    return Dataset.build({"base_url": base_url, "timeout_seconds": 5, "export_rows": 100})


def mock_routing_config(base_url: str = "https://routing.test") -> Routing:
    return Routing.build({"base_url": base_url, "api_key": "test-key", "timeout_seconds": 5})


def mock_response(
    status_code: int = 200, payload: Any = None, content: Tuple[bytes, ...] = ()
) -> MagicMock:
    """
    a stand-in for a requests.Response; it can also be used as a context manager
    """
    response = MagicMock()
    response.status_code = status_code
    if payload is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = payload
    response.iter_content.return_value = iter(content)
    response.__enter__.return_value = response
    return response


def mock_session_factory(*responses: Any) -> MagicMock:
    """
    builds a session factory whose sessions answer GET and POST with the given responses, in order.
    an exception in the responses is raised by the request instead.

    the sessions handed out are recorded on factory.sessions
    """
    remaining = list(responses)
    factory = MagicMock()
    factory.sessions = []

    def next_response(*args, **kwargs):
        response = remaining.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def new_session():
        session = MagicMock(spec=requests.Session)
        session.__enter__.return_value = session
        session.get.side_effect = next_response
        session.post.side_effect = next_response
        factory.sessions.append(session)
        return session

    factory.side_effect = new_session
    return factory


def mock_dataset_client(*responses: Any) -> DatasetClient:
    return DatasetClient(mock_dataset_config(), mock_session_factory(*responses))


def mock_ors_provider(*responses: Any) -> OpenRouteServiceProvider:
    return OpenRouteServiceProvider(mock_routing_config(), mock_session_factory(*responses))


def mock_ors_step(distance_m: float, duration_s: float) -> Dict:
    return {"distance": distance_m, "duration": duration_s, "instruction": "drive"}


def mock_ors_directions(*steps: Dict) -> Dict:
    return {"routes": [{"segments": [{"steps": list(steps)}]}]}


def mock_dataset_fields(
    brand: str = "RENAULT",
    model: str = "CLIO",
    fuel: str = "Essence",
    urban: Any = 6.1,
    non_urban: Any = 4.3,
    co2: Any = 118,
) -> Dict:
    return {
        "marque": brand,
        "designation_commerciale": model,
        "carburant": fuel,
        "cnit": "M10RENVP0001",
        "consommation_urbaine_l_100km": urban,
        "consommation_extra_urbaine_l_100km": non_urban,
        "co2_g_km": co2,
    }


def mock_service(
    segments: Tuple[RouteSegment, ...] = mock_route_segments(),
    vehicle_store: Optional[VehicleStore] = None,
) -> FootprintService:
    store = mock_vehicle_store() if vehicle_store is None else vehicle_store
    return FootprintService(
        emission_factor_table=mock_emission_factor_table(),
        vehicle_catalog=mock_catalog(store),
        vehicle_store=store,
        routing_provider=MockRoutingProvider(segments=segments),
    )