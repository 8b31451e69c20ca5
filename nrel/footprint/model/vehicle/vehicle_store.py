from __future__ import annotations

import csv
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple, Union

import immutables

from nrel.footprint.model.vehicle.vehicle import VEHICLE_FIELDS, Vehicle
from nrel.footprint.util.exception import VehicleNotFoundError
from nrel.footprint.util.typealiases import Brand, CanonicalFuelLabel, Model, VehicleId

log = logging.getLogger(__name__)


class VehicleStore(ABC):
    """
    a table of vehicles which can be browsed by brand, model and fuel and queried by id
    """

    @abstractmethod
    def get_car(self, vehicle_id: VehicleId) -> Optional[Vehicle]:
        """
        looks up a vehicle by id

        :param vehicle_id: the id to look up
        :return: the vehicle, or None if the store has no such vehicle
        """

    @abstractmethod
    def list_brands(self) -> Tuple[Brand, ...]:
        """
        the distinct brands in the store
        """

    @abstractmethod
    def list_models(self, brand: Brand) -> Tuple[Model, ...]:
        """
        the distinct models of a brand
        """

    @abstractmethod
    def list_models_by_fuel(self, brand: Brand, fuel: CanonicalFuelLabel) -> Tuple[Model, ...]:
        """
        the distinct models of a brand which are available with the given fuel
        """

    @abstractmethod
    def list_fuels(self, brand: Brand, model: Model) -> Tuple[CanonicalFuelLabel, ...]:
        """
        the fuels a model of a brand is available with
        """

    @abstractmethod
    def list_fuels_by_brand(self, brand: Brand) -> Tuple[CanonicalFuelLabel, ...]:
        """
        the fuels any model of a brand is available with
        """

    @abstractmethod
    def resolve_id(
        self, brand: Brand, model: Model, fuel: CanonicalFuelLabel
    ) -> VehicleId:
        """
        the id of the vehicle with this brand, model and fuel. if several vehicles match, the first is used.

        :raises VehicleNotFoundError: if no vehicle matches
        """


@dataclass(frozen=True)
class CsvVehicleStore(VehicleStore):
    """
    a vehicle store held in memory, loaded from a csv file of the canonical vehicle table

    :param vehicles: the vehicles, in file order
    :param index: the vehicles by id
    """

    vehicles: Tuple[Vehicle, ...]
    index: immutables.Map[VehicleId, Vehicle]

    @classmethod
    def build(cls, file: Union[str, Path]) -> CsvVehicleStore:
        """
        loads the store from a csv file with the VEHICLE_FIELDS columns

        :param file: the csv file
        :return: the store
        :raises IOError: if a row is missing a required column
        :raises ValueError: if a row cannot be parsed
        """
        with open(file, "r", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            vehicles = [Vehicle.from_row(row) for row in reader]
        store = cls.from_vehicles(vehicles)
        log.info(f"loaded {len(store.vehicles)} vehicles from {file}")
        return store

    @classmethod
    def from_vehicles(cls, vehicles: Iterable[Vehicle]) -> CsvVehicleStore:
        table = {}
        for vehicle in vehicles:
            if vehicle.id in table:
                log.warning(f"vehicle {vehicle.id} is listed more than once, keeping the first")
                continue
            table[vehicle.id] = vehicle
        return CsvVehicleStore(vehicles=tuple(table.values()), index=immutables.Map(table))

    def write(self, file: Union[str, Path]) -> Path:
        """
        writes the store as a csv file of the canonical vehicle table

        :param file: the destination
        :return: the path written
        """
        path = Path(file)
        with path.open("w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=VEHICLE_FIELDS)
            writer.writeheader()
            for vehicle in self.vehicles:
                writer.writerow(vehicle.to_row())
        return path

    def get_car(self, vehicle_id: VehicleId) -> Optional[Vehicle]:
        return self.index.get(vehicle_id)

    def list_brands(self) -> Tuple[Brand, ...]:
        return self._distinct(lambda v: v.brand, lambda v: True)

    def list_models(self, brand: Brand) -> Tuple[Model, ...]:
        return self._distinct(lambda v: v.model, lambda v: _same(v.brand, brand))

    def list_models_by_fuel(self, brand: Brand, fuel: CanonicalFuelLabel) -> Tuple[Model, ...]:
        return self._distinct(
            lambda v: v.model,
            lambda v: _same(v.brand, brand) and v.fuel_type.value == fuel,
        )

    def list_fuels(self, brand: Brand, model: Model) -> Tuple[CanonicalFuelLabel, ...]:
        return self._distinct(
            lambda v: v.fuel_type.value,
            lambda v: _same(v.brand, brand) and _same(v.model, model),
        )

    def list_fuels_by_brand(self, brand: Brand) -> Tuple[CanonicalFuelLabel, ...]:
        return self._distinct(lambda v: v.fuel_type.value, lambda v: _same(v.brand, brand))

    def resolve_id(
        self, brand: Brand, model: Model, fuel: CanonicalFuelLabel
    ) -> VehicleId:
        for vehicle in self.vehicles:
            if (
                _same(vehicle.brand, brand)
                and _same(vehicle.model, model)
                and vehicle.fuel_type.value == fuel
            ):
                return vehicle.id
        raise VehicleNotFoundError(f"no vehicle found for {brand} {model} ({fuel})")

    def _distinct(
        self, attribute: Callable[[Vehicle], str], predicate: Callable[[Vehicle], bool]
    ) -> Tuple[str, ...]:
        return tuple(sorted({attribute(v) for v in self.vehicles if predicate(v)}))


def _same(a: str, b: str) -> bool:
    return a.strip().casefold() == b.strip().casefold()
