from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import immutables
import yaml

from nrel.footprint.model.energy.fueltype import FuelType
from nrel.footprint.model.vehicle.vehicle import Vehicle
from nrel.footprint.model.vehicle.vehicle_store import VehicleStore
from nrel.footprint.util import fs
from nrel.footprint.util.exception import VehicleNotFoundError
from nrel.footprint.util.typealiases import VehicleId

log = logging.getLogger(__name__)

DEFAULT_GENERIC_VEHICLES_FILE = "generic_vehicles.yaml"


def build_generic_vehicles(
    generic_vehicles_file: Optional[Union[str, Path]] = None,
) -> immutables.Map[VehicleId, Vehicle]:
    """
    constructs the table of generic vehicles, keyed by vehicle id, from a yaml file


    :param generic_vehicles_file: the generic vehicles yaml file, by default the packaged one
    :return: the generic vehicles by id
    :raises IOError: if an entry is missing a required attribute
    :raises ValueError: if an entry has an unknown fuel type or a negative consumption
    """
    if generic_vehicles_file is None:
        generic_vehicles_file = fs.resource_path("vehicles", DEFAULT_GENERIC_VEHICLES_FILE)

    vehicles: Dict[VehicleId, Vehicle] = {}
    with open(generic_vehicles_file) as f:
        config_dict = yaml.safe_load(f)
        for vehicle_id, attributes in config_dict.items():
            try:
                vehicles[vehicle_id] = Vehicle.build(
                    id=vehicle_id,
                    brand=attributes.get("brand", "generic"),
                    model=attributes.get("model", vehicle_id),
                    fuel_type=attributes["fuel_type"],
                    urban_consumption=attributes["urban_consumption"],
                    non_urban_consumption=attributes["non_urban_consumption"],
                    autobahn_consumption=attributes["autobahn_consumption"],
                )
            except KeyError as e:
                raise IOError(f"generic vehicle {vehicle_id} is missing {e}")

    return immutables.Map(vehicles)


@dataclass(frozen=True)
class VehicleCatalog:
    """
    resolves vehicle ids, preferring the generic vehicles over the vehicle store
    """

    generic_vehicles: immutables.Map[VehicleId, Vehicle]
    vehicle_store: Optional[VehicleStore] = None

    @classmethod
    def build(
        cls,
        generic_vehicles_file: Optional[Union[str, Path]] = None,
        vehicle_store: Optional[VehicleStore] = None,
    ) -> VehicleCatalog:
        return VehicleCatalog(
            generic_vehicles=build_generic_vehicles(generic_vehicles_file),
            vehicle_store=vehicle_store,
        )

    def list_generic_vehicles(self) -> Tuple[Vehicle, ...]:
        """
        the generic vehicles, ordered by fuel type
        """
        fuel_order = list(FuelType)
        return tuple(
            sorted(
                self.generic_vehicles.values(),
                key=lambda v: (fuel_order.index(v.fuel_type), v.id),
            )
        )

    def resolve(self, vehicle_id: VehicleId) -> Vehicle:
        """
        finds the vehicle with this id. a generic vehicle is returned without consulting the
        vehicle store, even if the store has a vehicle with the same id.

        :param vehicle_id: the vehicle to find
        :return: the vehicle
        :raises VehicleNotFoundError: if neither the generic vehicles nor the store has the vehicle
        :raises ExternalServiceError: if the vehicle store could not be queried
        """
        generic = self.generic_vehicles.get(vehicle_id)
        if generic is not None:
            return generic
        elif self.vehicle_store is None:
            raise VehicleNotFoundError(
                f"vehicle {vehicle_id} is not a generic vehicle and no vehicle store is configured",
                vehicle_id,
            )

        vehicle = self.vehicle_store.get_car(vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError(f"vehicle {vehicle_id} not found", vehicle_id)
        log.debug(f"resolved vehicle {vehicle_id} from {self.vehicle_store.__class__.__name__}")
        return vehicle
