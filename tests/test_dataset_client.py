import tempfile
from pathlib import Path
from unittest import TestCase
from urllib.parse import unquote

import requests

from nrel.footprint.resources.mock_lobster import *
from nrel.footprint.model.energy.fueltype import FuelType
from nrel.footprint.util.exception import ExternalServiceError, VehicleNotFoundError


def requested_url(client: DatasetClient, call: int = 0) -> str:
    session = client.session_factory.sessions[call]
    args, _ = session.get.call_args
    return args[0]


def aggregation(field_name: str, *values: str) -> Dict:
    return {"aggregations": [{field_name: v} for v in values]}


class TestDatasetClient(TestCase):
    def test_list_brands(self):
        client = mock_dataset_client(
            mock_response(payload=aggregation("marque", "PEUGEOT", "RENAULT"))
        )

        brands = client.list_brands()

        self.assertEqual(brands, ("PEUGEOT", "RENAULT"))
        url = requested_url(client)
        self.assertTrue(url.startswith(f"{mock_dataset_config().base_url}/aggregates?"))
        self.assertIn("select=marque", url)
        self.assertIn("group_by=marque", url)
        self.assertNotIn("where=", url)

    def test_list_fuels_translates_labels(self):
        client = mock_dataset_client(
            mock_response(payload=aggregation("carburant", "Diesel", "Essence", "ES/EL"))
        )

        fuels = client.list_fuels("RENAULT", "CLIO")

        self.assertEqual(fuels, ("diesel", "petrol", "ES/EL"))
        url = unquote(requested_url(client))
        self.assertIn('marque like "RENAULT" and designation_commerciale like "CLIO"', url)

    def test_list_models_by_fuel_sends_dataset_label(self):
        client = mock_dataset_client(
            mock_response(payload=aggregation("designation_commerciale", "CLIO"))
        )

        models = client.list_models_by_fuel("RENAULT", "petrol")

        self.assertEqual(models, ("CLIO",))
        self.assertIn('carburant like "Essence"', unquote(requested_url(client)))

    def test_free_text_is_escaped_and_encoded(self):
        client = mock_dataset_client(mock_response(payload=aggregation("designation_commerciale")))

        client.list_models('ALFA ROMEO" or marque like "%')

        url = requested_url(client)
        self.assertNotIn(" ", url, "spaces are percent-encoded")
        self.assertIn('marque like "ALFA ROMEO\\" or marque like \\"%"', unquote(url))

    def test_resolve_id(self):
        payload = {"records": [{"record": {"id": "abc123", "fields": mock_dataset_fields()}}]}
        client = mock_dataset_client(mock_response(payload=payload))

        vehicle_id = client.resolve_id("RENAULT", "CLIO", "petrol")

        self.assertEqual(vehicle_id, "abc123")
        self.assertIn("rows=1", requested_url(client))

    def test_resolve_id_not_found(self):
        client = mock_dataset_client(mock_response(payload={"records": []}))
        with self.assertRaises(VehicleNotFoundError):
            client.resolve_id("RENAULT", "CLIO", "cng")

    def test_fetch_vehicle(self):
        payload = {"record": {"id": "abc123", "fields": mock_dataset_fields(fuel="Diesel")}}
        client = mock_dataset_client(mock_response(payload=payload))

        vehicle = client.get_car("abc123")

        self.assertEqual(vehicle.id, "abc123")
        self.assertEqual(vehicle.fuel_type, FuelType.DIESEL)
        self.assertIn("/records/abc123?", requested_url(client))

    def test_get_car_not_found(self):
        client = mock_dataset_client(mock_response(status_code=404))
        self.assertIsNone(client.get_car("nope"))

    def test_fetch_vehicle_not_found(self):
        client = mock_dataset_client(mock_response(status_code=404))
        with self.assertRaises(VehicleNotFoundError):
            client.fetch_vehicle("nope")

    def test_fetch_vehicle_unsupported_fuel(self):
        payload = {"record": {"id": "abc123", "fields": mock_dataset_fields(fuel="ES/EL")}}
        client = mock_dataset_client(mock_response(payload=payload))
        with self.assertRaises(ExternalServiceError):
            client.fetch_vehicle("abc123")

    def test_server_error(self):
        client = mock_dataset_client(mock_response(status_code=500, payload={}))
        with self.assertRaises(ExternalServiceError):
            client.list_brands()

    def test_invalid_json(self):
        client = mock_dataset_client(mock_response(status_code=200))
        with self.assertRaises(ExternalServiceError):
            client.list_brands()

    def test_transport_error_closes_session(self):
        client = mock_dataset_client(requests.ConnectionError("connection refused"))

        with self.assertRaises(ExternalServiceError):
            client.list_brands()

        session = client.session_factory.sessions[0]
        session.__exit__.assert_called_once()

    def test_requests_carry_timeout(self):
        client = mock_dataset_client(mock_response(payload=aggregation("marque", "RENAULT")))

        client.list_brands()

        _, kwargs = client.session_factory.sessions[0].get.call_args
        self.assertEqual(kwargs["timeout"], mock_dataset_config().timeout_seconds)

    def test_repeated_calls_are_not_cached(self):
        client = mock_dataset_client(
            mock_response(payload=aggregation("marque", "RENAULT")),
            mock_response(payload=aggregation("marque", "RENAULT", "TESLA")),
        )

        first = client.list_brands()
        second = client.list_brands()

        self.assertEqual(client.session_factory.call_count, 2)
        self.assertEqual(first, ("RENAULT",))
        self.assertEqual(second, ("RENAULT", "TESLA"))

    def test_download_export(self):
        client = mock_dataset_client(mock_response(content=(b"cnit;marque\n", b"M1;RENAULT\n")))

        with tempfile.TemporaryDirectory() as tmp:
            path = client.download_export(Path(tmp).joinpath("export.csv"), rows=10)
            content = path.read_text()

        self.assertEqual(content, "cnit;marque\nM1;RENAULT\n")
        url = requested_url(client)
        self.assertIn("/exports/csv?", url)
        self.assertIn("rows=10", url)
        self.assertIn("delimiter=%3B", url)

    def test_download_export_error(self):
        client = mock_dataset_client(mock_response(status_code=503))
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ExternalServiceError):
                client.download_export(Path(tmp).joinpath("export.csv"))

    def test_download_export_interrupted_leaves_no_file(self):
        def interrupted_stream(chunk_size):
            yield b"cnit;marque\n"
            raise requests.exceptions.ChunkedEncodingError("connection broken")

        response = mock_response()
        response.iter_content.side_effect = interrupted_stream
        client = mock_dataset_client(response)

        with tempfile.TemporaryDirectory() as tmp:
            destination = Path(tmp).joinpath("export.csv")
            with self.assertRaises(ExternalServiceError):
                client.download_export(destination)
            self.assertFalse(destination.exists())
            self.assertEqual(list(Path(tmp).iterdir()), [])

    def test_download_export_interrupted_keeps_previous_file(self):
        response = mock_response()
        response.iter_content.side_effect = requests.exceptions.ChunkedEncodingError("broken")
        client = mock_dataset_client(response)

        with tempfile.TemporaryDirectory() as tmp:
            destination = Path(tmp).joinpath("export.csv")
            destination.write_text("cnit;marque\nM1;RENAULT\n")
            with self.assertRaises(ExternalServiceError):
                client.download_export(destination)
            self.assertEqual(destination.read_text(), "cnit;marque\nM1;RENAULT\n")
