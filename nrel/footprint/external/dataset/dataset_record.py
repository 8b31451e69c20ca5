"""
normalizes records of the "vehicules commercialises" dataset into canonical vehicles
"""
from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Dict, Iterator, Union

from nrel.footprint.external.dataset import fuel_label_translator
from nrel.footprint.model.energy.fueltype import FuelType
from nrel.footprint.model.vehicle.vehicle import Vehicle
from nrel.footprint.util.typealiases import VehicleId

log = logging.getLogger(__name__)

# dataset field names
BRAND = "marque"
MODEL = "designation_commerciale"
FUEL = "carburant"
TYPE_CODE = "cnit"
URBAN_CONSUMPTION = "consommation_urbaine_l_100km"
NON_URBAN_CONSUMPTION = "consommation_extra_urbaine_l_100km"
OFFICIAL_CO2 = "co2_g_km"

EXPORT_DELIMITER = ";"


def vehicle_from_fields(record_id: VehicleId, fields: Dict) -> Vehicle:
    """
    maps the fields of a dataset record onto a vehicle.

    the dataset publishes no autobahn consumption, so the extra-urban consumption stands in for
    both the non-urban and the autobahn consumption.

    :param record_id: the id the vehicle will carry
    :param fields: the record fields
    :return: the vehicle
    :raises KeyError: if a consumption or fuel field is missing
    :raises ValueError: if the fuel has no canonical fuel type or a value cannot be parsed
    """
    fuel = fuel_label_translator.to_canonical(fields[FUEL])
    if FuelType.from_string(fuel) is None:
        raise ValueError(f"record {record_id} has unsupported fuel '{fields[FUEL]}'")
    urban = _number(fields[URBAN_CONSUMPTION], URBAN_CONSUMPTION)
    non_urban = _number(fields[NON_URBAN_CONSUMPTION], NON_URBAN_CONSUMPTION)

    return Vehicle.build(
        id=record_id,
        brand=fields.get(BRAND) or "",
        model=fields.get(MODEL) or "",
        fuel_type=fuel,
        urban_consumption=urban,
        non_urban_consumption=non_urban,
        autobahn_consumption=non_urban,
        official_co2_g_km=fields.get(OFFICIAL_CO2),
    )


def read_export(file: Union[str, Path]) -> Iterator[Vehicle]:
    """
    reads the vehicles of a bulk csv export of the dataset, identified by their type code (cnit).
    rows which cannot be normalized, such as hybrid fuels or missing consumption figures, are skipped.

    :param file: the semicolon-delimited export
    :return: the vehicles, in file order
    """
    with open(file, "r", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f, delimiter=EXPORT_DELIMITER)
        for row in reader:
            record_id = row.get(TYPE_CODE)
            if not record_id:
                log.warning(f"skipping export row without a {TYPE_CODE}: {row}")
                continue
            try:
                yield vehicle_from_fields(record_id, row)
            except (KeyError, ValueError) as e:
                log.warning(f"skipping export row {record_id}: {e}")


def _number(value, field_name: str) -> float:
    if value is None or value == "":
        raise ValueError(f"field {field_name} has no value")
    if isinstance(value, str):
        value = value.replace(",", ".")
    return float(value)
