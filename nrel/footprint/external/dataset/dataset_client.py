from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import requests

from nrel.footprint.config.dataset import Dataset
from nrel.footprint.external.dataset import dataset_record, fuel_label_translator, query
from nrel.footprint.external.dataset.dataset_record import BRAND, FUEL, MODEL
from nrel.footprint.model.vehicle.vehicle import Vehicle
from nrel.footprint.model.vehicle.vehicle_store import VehicleStore
from nrel.footprint.util.exception import ExternalServiceError, VehicleNotFoundError
from nrel.footprint.util.typealiases import Brand, CanonicalFuelLabel, Model, VehicleId

log = logging.getLogger(__name__)

SERVICE_NAME = "vehicle dataset"

DOWNLOAD_CHUNK_BYTES = 64 * 1024


@dataclass(frozen=True)
class DatasetClient(VehicleStore):
    """
    reads vehicles from the opendatasoft catalog api of the "vehicules commercialises" open data set
    and normalizes them into canonical vehicles, brands, models and fuels.

    every call opens its own session for exactly one round trip; nothing is cached and nothing is retried.
    """

    dataset: Dataset
    session_factory: Callable[[], requests.Session] = field(default=requests.Session)

    def list_brands(self) -> Tuple[Brand, ...]:
        return self._aggregate(BRAND)

    def list_models(self, brand: Brand) -> Tuple[Model, ...]:
        return self._aggregate(MODEL, (BRAND, brand))

    def list_models_by_fuel(self, brand: Brand, fuel: CanonicalFuelLabel) -> Tuple[Model, ...]:
        native_fuel = fuel_label_translator.to_native(fuel)
        return self._aggregate(MODEL, (BRAND, brand), (FUEL, native_fuel))

    def list_fuels(self, brand: Brand, model: Model) -> Tuple[CanonicalFuelLabel, ...]:
        native_fuels = self._aggregate(FUEL, (BRAND, brand), (MODEL, model))
        return tuple(fuel_label_translator.to_canonical(f) for f in native_fuels)

    def list_fuels_by_brand(self, brand: Brand) -> Tuple[CanonicalFuelLabel, ...]:
        native_fuels = self._aggregate(FUEL, (BRAND, brand))
        return tuple(fuel_label_translator.to_canonical(f) for f in native_fuels)

    def resolve_id(self, brand: Brand, model: Model, fuel: CanonicalFuelLabel) -> VehicleId:
        """
        the record id of a brand, model and fuel. the dataset is expected to hold at most one
        such record; if it holds more, the first is used.

        :param brand: the brand
        :param model: the model name
        :param fuel: the canonical fuel label
        :return: the record id
        :raises VehicleNotFoundError: if no record matches
        :raises ExternalServiceError: if the dataset could not be queried
        """
        native_fuel = fuel_label_translator.to_native(fuel)
        params = {
            "where": query.where((BRAND, brand), (MODEL, model), (FUEL, native_fuel)),
            "rows": 1,
            "pretty": "false",
            "timezone": "UTC",
        }
        payload = self._get_json("/records", params)
        try:
            records = payload["records"]
            if len(records) == 0:
                raise VehicleNotFoundError(f"no vehicle found for {brand} {model} ({fuel})")
            return str(records[0]["record"]["id"])
        except (KeyError, TypeError, IndexError) as e:
            raise ExternalServiceError(f"unexpected records response: {e!r}", SERVICE_NAME) from e

    def fetch_vehicle(self, vehicle_id: VehicleId) -> Vehicle:
        """
        fetches a single record and normalizes it into a vehicle

        :param vehicle_id: the record id
        :return: the vehicle
        :raises VehicleNotFoundError: if the dataset has no such record
        :raises ExternalServiceError: if the dataset could not be queried or the record could not be normalized
        """
        path = f"/records/{query.encode_path_segment(vehicle_id)}"
        payload = self._get_json(path, {"pretty": "false", "timezone": "UTC"}, vehicle_id)
        try:
            record = payload["record"]
            return dataset_record.vehicle_from_fields(str(record["id"]), record["fields"])
        except (KeyError, TypeError, ValueError) as e:
            raise ExternalServiceError(
                f"record {vehicle_id} could not be read as a vehicle: {e!r}", SERVICE_NAME
            ) from e

    def get_car(self, vehicle_id: VehicleId) -> Optional[Vehicle]:
        try:
            return self.fetch_vehicle(vehicle_id)
        except VehicleNotFoundError:
            return None

    def download_export(self, destination: Union[str, Path], rows: Optional[int] = None) -> Path:
        """
        streams the bulk csv export of the dataset to a file

        :param destination: the file to write
        :param rows: the maximum number of rows, by default the configured export_rows
        :return: the path written
        :raises ExternalServiceError: if the export could not be downloaded, in which case
            the destination is left untouched
        """
        rows = self.dataset.export_rows if rows is None else rows
        params = {"rows": rows, "timezone": "UTC", "delimiter": dataset_record.EXPORT_DELIMITER}
        url = f"{self.dataset.base_url}/exports/csv?{query.encode(params)}"
        path = Path(destination)
        partial = path.with_name(f"{path.name}.part")
        log.info(f"downloading up to {rows} rows of the vehicle dataset to {path}")

        with self.session_factory() as session:
            try:
                timeout = self.dataset.timeout_seconds
                with session.get(url, stream=True, timeout=timeout) as response:
                    if response.status_code != 200:
                        raise ExternalServiceError(
                            f"export returned status {response.status_code}", SERVICE_NAME
                        )
                    with partial.open("wb") as f:
                        for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_BYTES):
                            f.write(chunk)
                partial.replace(path)
            except requests.RequestException as e:
                raise ExternalServiceError(f"export download failed: {e}", SERVICE_NAME) from e
            finally:
                partial.unlink(missing_ok=True)

        return path

    def _aggregate(self, select: str, *clauses: Tuple[str, str]) -> Tuple[str, ...]:
        """
        the distinct values of a field among the records matching the clauses
        """
        params: Dict[str, Any] = {"select": select, "group_by": select}
        if clauses:
            params["where"] = query.where(*clauses)
        payload = self._get_json("/aggregates", params)
        try:
            values: List[str] = [row[select] for row in payload["aggregations"]]
        except (KeyError, TypeError) as e:
            raise ExternalServiceError(
                f"unexpected aggregates response: {e!r}", SERVICE_NAME
            ) from e
        return tuple(v for v in values if v is not None)

    def _get_json(
        self, path: str, params: Dict[str, Any], vehicle_id: Optional[VehicleId] = None
    ) -> Any:
        """
        one GET round trip against the dataset api

        :param path: the path below the dataset base url
        :param params: query parameters, percent-encoded here
        :param vehicle_id: the record requested, when a 404 means the vehicle does not exist
        :return: the decoded json payload
        """
        url = f"{self.dataset.base_url}{path}?{query.encode(params)}"
        log.info(f"querying vehicle dataset: {path} {params}")

        with self.session_factory() as session:
            try:
                response = session.get(
                    url,
                    headers={"Accept": "application/json"},
                    timeout=self.dataset.timeout_seconds,
                )
            except requests.RequestException as e:
                raise ExternalServiceError(f"request failed: {e}", SERVICE_NAME) from e

            if response.status_code == 404 and vehicle_id is not None:
                raise VehicleNotFoundError(f"vehicle {vehicle_id} not found", vehicle_id)
            elif response.status_code != 200:
                raise ExternalServiceError(
                    f"{path} returned status {response.status_code}", SERVICE_NAME
                )

            try:
                return response.json()
            except ValueError as e:
                raise ExternalServiceError(f"{path} did not return valid json", SERVICE_NAME) from e
