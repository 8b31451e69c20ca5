from unittest import TestCase

from nrel.footprint.resources.mock_lobster import *
from nrel.footprint.model.roadnetwork.public_transport_route import PublicTransportRoute
from nrel.footprint.util.exception import MissingParameterError, UnknownMixError


class TestEmissionCalculator(TestCase):
    def test_petrol_urban_trip(self):
        calculator = mock_calculator(petrol=2370)
        vehicle = mock_vehicle(fuel_type="petrol", urban_consumption=6.0)

        emissions = calculator.car_emissions(vehicle, mock_car_route(urban_km=10))

        self.assertAlmostEqual(emissions, 1422.0, places=9)

    def test_sums_road_types(self):
        calculator = mock_calculator(diesel=2650)
        vehicle = mock_vehicle(
            fuel_type="diesel",
            urban_consumption=5.0,
            non_urban_consumption=4.0,
            autobahn_consumption=6.0,
        )
        route = mock_car_route(urban_km=10, non_urban_km=20, autobahn_km=50)

        emissions = calculator.car_emissions(vehicle, route)

        expected = (5.0 * 10 + 4.0 * 20 + 6.0 * 50) / 100 * 2650
        self.assertAlmostEqual(emissions, expected, places=6)

    def test_is_linear_in_distance(self):
        calculator = mock_calculator()
        vehicle = mock_vehicle()

        single = calculator.car_emissions(vehicle, mock_car_route(10, 20, 30))
        double = calculator.car_emissions(vehicle, mock_car_route(20, 40, 60))

        self.assertAlmostEqual(double, 2 * single, places=6)

    def test_each_road_type_is_linear_on_its_own(self):
        calculator = mock_calculator()
        vehicle = mock_vehicle(
            urban_consumption=6.0, non_urban_consumption=4.8, autobahn_consumption=5.9
        )
        base = calculator.car_emissions(vehicle, mock_car_route(10, 20, 30))
        cases = (
            (mock_car_route(20, 20, 30), mock_car_route(10, 0, 0)),
            (mock_car_route(10, 40, 30), mock_car_route(0, 20, 0)),
            (mock_car_route(10, 20, 60), mock_car_route(0, 0, 30)),
        )

        for doubled, alone in cases:
            added = calculator.car_emissions(vehicle, doubled) - base
            self.assertAlmostEqual(added, calculator.car_emissions(vehicle, alone), places=6)

    def test_emissions_are_never_negative(self):
        calculator = mock_calculator()
        vehicles = (
            mock_vehicle(fuel_type="petrol"),
            mock_vehicle(fuel_type="diesel"),
            mock_vehicle(fuel_type="cng"),
            mock_electric_vehicle(),
        )
        routes = (mock_car_route(0, 0, 0), mock_car_route(10, 0, 0), mock_car_route(3, 7, 11))

        for vehicle in vehicles:
            for route in routes:
                emissions = calculator.car_emissions(vehicle, route, DefaultIds.mock_mix_id())
                self.assertGreaterEqual(emissions, 0, f"{vehicle.fuel_type} on {route}")

    def test_empty_route_emits_nothing(self):
        calculator = mock_calculator()
        emissions = calculator.car_emissions(mock_vehicle(), mock_car_route(0, 0, 0))
        self.assertEqual(emissions, 0)

    def test_electric_vehicle_uses_mix(self):
        calculator = mock_calculator(mix_factor=400)
        vehicle = mock_electric_vehicle(consumption=15.0)

        emissions = calculator.car_emissions(
            vehicle, mock_car_route(urban_km=100), DefaultIds.mock_mix_id()
        )

        self.assertAlmostEqual(emissions, 15.0 * 400, places=6)

    def test_electric_vehicle_clean_mix(self):
        calculator = mock_calculator()
        emissions = calculator.car_emissions(
            mock_electric_vehicle(), mock_car_route(10, 10, 10), "clean_mix"
        )
        self.assertEqual(emissions, 0)

    def test_electric_vehicle_without_mix(self):
        calculator = mock_calculator()
        with self.assertRaises(MissingParameterError):
            calculator.car_emissions(mock_electric_vehicle(), mock_car_route())

    def test_electric_vehicle_unknown_mix(self):
        calculator = mock_calculator()
        with self.assertRaises(UnknownMixError):
            calculator.car_emissions(mock_electric_vehicle(), mock_car_route(), "mars")

    def test_emission_factor(self):
        calculator = mock_calculator(diesel=2650, mix_factor=400)

        self.assertEqual(calculator.emission_factor(mock_vehicle(fuel_type="diesel")), 2650)
        self.assertEqual(
            calculator.emission_factor(mock_electric_vehicle(), DefaultIds.mock_mix_id()), 400
        )
        with self.assertRaises(MissingParameterError):
            calculator.emission_factor(mock_electric_vehicle())

    def test_mix_ignored_for_combustion_vehicle(self):
        calculator = mock_calculator()
        vehicle = mock_vehicle(fuel_type="cng")
        route = mock_car_route(5, 5, 5)

        self.assertEqual(
            calculator.car_emissions(vehicle, route, "mars"),
            calculator.car_emissions(vehicle, route),
        )

    def test_public_transport(self):
        calculator = mock_calculator(short_distance=60, long_distance=30)
        route = PublicTransportRoute.from_distances(5, 20)

        emissions = calculator.public_transport_emissions(route)

        self.assertAlmostEqual(emissions, 5 * 60 + 20 * 30, places=9)

    def test_public_transport_is_additive(self):
        calculator = mock_calculator(short_distance=64, long_distance=32)

        combined = calculator.public_transport_emissions(PublicTransportRoute.from_distances(5, 20))
        partial = calculator.public_transport_emissions(
            PublicTransportRoute.from_distances(2, 20)
        ) + calculator.public_transport_emissions(PublicTransportRoute.from_distances(3, 0))

        self.assertAlmostEqual(combined, partial, places=9)
