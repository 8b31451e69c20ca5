import io
import json
import tempfile
from contextlib import redirect_stdout
from pathlib import Path
from unittest import TestCase, mock

from nrel.footprint.app import run
from nrel.footprint.resources.mock_lobster import *


def run_command(*argv: str):
    out = io.StringIO()
    with redirect_stdout(out):
        code = run.run(list(argv))
    return code, out.getvalue()


class TestRun(TestCase):
    def test_mixes(self):
        code, out = run_command("mixes")

        self.assertEqual(code, 0)
        mixes = json.loads(out)["mixes"]
        self.assertIn("de", [m["id"] for m in mixes])

    def test_car(self):
        code, out = run_command("car", "generic_petrol", "--urban-km", "10")

        self.assertEqual(code, 0)
        self.assertGreater(json.loads(out)["carEmissions"], 0)

    def test_public_transport(self):
        code, out = run_command(
            "publictransport", "--short-distance-km", "5", "--long-distance-km", "20"
        )

        self.assertEqual(code, 0)
        self.assertGreater(json.loads(out)["publicTransportEmissions"], 0)

    def test_error_is_reported(self):
        code, out = run_command("car", "generic_petrol", "--urban-km", "-1")

        self.assertEqual(code, 1)
        report = json.loads(out)
        self.assertEqual(report["report_type"], "error")
        self.assertEqual(report["error_type"], "InvalidDistanceError")

    def test_trip(self):
        service = mock_service()
        with mock.patch.object(run.FootprintService, "build", return_value=service):
            code, out = run_command("trip", "generic_diesel", "48.1", "11.5", "48.3", "11.7")

        self.assertEqual(code, 0)
        self.assertEqual(
            set(json.loads(out).keys()), {"car_emissions", "public_transport_emissions"}
        )

    def test_trip_with_invalid_coordinate_is_reported(self):
        service = mock_service()
        with mock.patch.object(run.FootprintService, "build", return_value=service):
            code, out = run_command("trip", "generic_petrol", "91", "0", "0", "0")

        self.assertEqual(code, 1)
        report = json.loads(out)
        self.assertEqual(report["report_type"], "error")
        self.assertEqual(report["error_type"], "InvalidCoordinateError")
        self.assertEqual(service.routing_provider.requests, [])

    def test_brands_from_vehicle_store(self):
        with tempfile.TemporaryDirectory() as tmp:
            store_file = mock_vehicle_store().write(Path(tmp).joinpath("vehicles.csv"))
            config_file = Path(tmp).joinpath("footprint.yaml")
            config_file.write_text("store:\n  vehicle_store_file: vehicles.csv\n")

            code, out = run_command("--config", str(config_file), "brands")

        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["brands"], ["PEUGEOT", "RENAULT"])

    def test_export(self):
        export = "cnit;marque;designation_commerciale;carburant;consommation_urbaine_l_100km;consommation_extra_urbaine_l_100km\nM1;RENAULT;CLIO;Diesel;5,0;4,0\n"

        def download_export(client, destination, rows=None):
            Path(destination).write_text(export, encoding="utf-8")
            return Path(destination)

        with tempfile.TemporaryDirectory() as tmp:
            destination = Path(tmp).joinpath("vehicles.csv")
            with mock.patch.object(run.DatasetClient, "download_export", download_export):
                code, out = run_command("export", str(destination))
            store = CsvVehicleStore.build(destination)

        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["vehicleStoreFile"], str(destination))
        self.assertEqual(store.get_car("M1").urban_consumption, 5.0)

    def test_no_command(self):
        with redirect_stdout(io.StringIO()):
            self.assertEqual(run.run([]), 1)

    def test_defaults(self):
        code, out = run_command("--defaults")

        self.assertEqual(code, 0)
        self.assertIn("vehicle_store_file", out)
