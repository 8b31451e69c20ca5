import tempfile
from pathlib import Path
from unittest import TestCase

from nrel.footprint.resources.mock_lobster import *
from nrel.footprint.config import FootprintConfig
from nrel.footprint.service import TripEmissions
from nrel.footprint.util.exception import (
    InvalidDistanceError,
    MissingParameterError,
    RouteNotFoundError,
    UnknownMixError,
    VehicleNotFoundError,
)


class TestFootprintService(TestCase):
    def test_build_with_dataset(self):
        service = FootprintService.build(FootprintConfig.build())

        self.assertIsInstance(service.vehicle_store, DatasetClient)
        self.assertIsInstance(service.routing_provider, OpenRouteServiceProvider)
        self.assertIs(service.vehicle_catalog.vehicle_store, service.vehicle_store)

    def test_build_with_vehicle_store_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            store_file = mock_vehicle_store().write(Path(tmp).joinpath("vehicles.csv"))
            config = FootprintConfig.build(
                config={"store": {"vehicle_store_file": str(store_file)}}
            )

            service = FootprintService.build(config)

        self.assertIsInstance(service.vehicle_store, CsvVehicleStore)
        self.assertEqual(service.brands(), ("PEUGEOT", "RENAULT"))

    def test_car_emissions(self):
        service = mock_service()

        emissions = service.car_emissions("generic_petrol", 10, 0, 0)

        self.assertAlmostEqual(emissions, 6.0 / 100 * 10 * 2370, places=9)

    def test_car_emissions_store_vehicle(self):
        service = mock_service()
        emissions = service.car_emissions("v1", 0, 100, 0)
        self.assertAlmostEqual(emissions, 4.0 * 2650, places=6)

    def test_car_emissions_invalid_distance(self):
        service = mock_service()
        with self.assertRaises(InvalidDistanceError):
            service.car_emissions("generic_petrol", -1, 0, 0)

    def test_car_emissions_unknown_vehicle(self):
        service = mock_service()
        with self.assertRaises(VehicleNotFoundError):
            service.car_emissions("v99", 1, 0, 0)

    def test_car_emissions_electric_without_mix(self):
        service = mock_service()
        with self.assertRaises(MissingParameterError):
            service.car_emissions("generic_electricity", 1, 0, 0)

    def test_trip_emissions(self):
        service = mock_service()

        trip = service.trip_emissions("generic_diesel", mock_place(), mock_place(48.35, 11.78))

        calculator = mock_calculator()
        car_route = CarRoute(3.0, 15.0, 20.0)
        diesel = service.vehicle_catalog.resolve("generic_diesel")
        expected_car = calculator.car_emissions(diesel, car_route)
        self.assertIsInstance(trip, TripEmissions)
        self.assertAlmostEqual(trip.car_emissions, expected_car, places=6)
        self.assertAlmostEqual(trip.public_transport_emissions, 3.0 * 60 + 35.0 * 30, places=6)
        self.assertEqual(
            set(trip.asdict().keys()), {"car_emissions", "public_transport_emissions"}
        )

    def test_trip_emissions_no_route(self):
        service = mock_service(segments=())
        with self.assertRaises(RouteNotFoundError):
            service.trip_emissions("generic_petrol", mock_place(), mock_place(0, 0))

    def test_trip_emissions_electric_without_mix_skips_routing(self):
        service = mock_service()
        with self.assertRaises(MissingParameterError):
            service.trip_emissions("generic_electricity", mock_place(), mock_place(48.35, 11.78))
        self.assertEqual(service.routing_provider.requests, [])

    def test_trip_emissions_unknown_mix_skips_routing(self):
        service = mock_service()
        with self.assertRaises(UnknownMixError):
            service.trip_emissions(
                "generic_electricity", mock_place(), mock_place(48.35, 11.78), "mars"
            )
        self.assertEqual(service.routing_provider.requests, [])

    def test_trip_emissions_electric_with_mix(self):
        service = mock_service()
        trip = service.trip_emissions(
            "generic_electricity", mock_place(), mock_place(48.35, 11.78), "test_mix"
        )
        self.assertGreater(trip.car_emissions, 0)
        self.assertEqual(len(service.routing_provider.requests), 1)

    def test_public_transport_emissions(self):
        service = mock_service()
        self.assertAlmostEqual(service.public_transport_emissions(5, 20), 5 * 60 + 20 * 30)

    def test_lists(self):
        service = mock_service()

        self.assertEqual(len(service.electricity_mixes()), 2)
        self.assertEqual(len(service.generic_vehicles()), 3)
        self.assertEqual(service.models("PEUGEOT"), ("208",))
        self.assertEqual(service.models_by_fuel("RENAULT", "electricity"), ("ZOE",))
        self.assertEqual(service.fuels("RENAULT", "MEGANE"), ("diesel",))
        self.assertEqual(service.fuels_by_brand("PEUGEOT"), ("petrol",))
        self.assertEqual(service.vehicle_id("PEUGEOT", "208", "petrol"), "v4")

    def test_search_places(self):
        places = (PlaceSearchResult("Munich", 48.137, 11.575),)
        service = mock_service()._replace(routing_provider=MockRoutingProvider(places=places))
        self.assertEqual(service.search_places("munich"), places)
