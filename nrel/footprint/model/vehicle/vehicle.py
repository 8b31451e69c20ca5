from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from nrel.footprint.model.energy.fueltype import FuelType
from nrel.footprint.model.roadnetwork.road_type import RoadType
from nrel.footprint.util.typealiases import Brand, Model, VehicleId
from nrel.footprint.util.units import Consumption

# column names of the canonical vehicle table
VEHICLE_FIELDS = (
    "vehicle_id",
    "brand",
    "model",
    "fuel_type",
    "urban_consumption",
    "non_urban_consumption",
    "autobahn_consumption",
    "official_co2_g_km",
)


@dataclass(frozen=True)
class Vehicle:
    """
    the emission profile of a car.


    :param id: A unique vehicle id, assigned by the generic catalog or the vehicle dataset.
    :param brand: The brand of the car.
    :param model: The model name of the car.
    :param fuel_type: The canonical fuel type.
    :param urban_consumption: Consumption per 100 km below 50 km/h.
    :param non_urban_consumption: Consumption per 100 km between 50 and 100 km/h.
    :param autobahn_consumption: Consumption per 100 km above 100 km/h.
    :param official_co2_g_km: The CO2 emissions reported by the dataset, informational only.
    """

    id: VehicleId
    brand: Brand
    model: Model
    fuel_type: FuelType

    # liters per 100 km for combustion vehicles, kilowatt-hours per 100 km for electric vehicles
    urban_consumption: Consumption
    non_urban_consumption: Consumption
    autobahn_consumption: Consumption

    official_co2_g_km: Optional[float] = None

    def consumption(self, road_type: RoadType) -> Consumption:
        if road_type == RoadType.URBAN:
            return self.urban_consumption
        elif road_type == RoadType.NON_URBAN:
            return self.non_urban_consumption
        else:
            return self.autobahn_consumption

    @classmethod
    def build(
        cls,
        id: VehicleId,
        brand: Brand,
        model: Model,
        fuel_type: str,
        urban_consumption: Consumption,
        non_urban_consumption: Consumption,
        autobahn_consumption: Consumption,
        official_co2_g_km: Optional[float] = None,
    ) -> Vehicle:
        """
        builds a vehicle, validating the fuel type and consumption figures

        :raises ValueError: if the fuel type is not canonical or a consumption is negative
        """
        canonical_fuel = FuelType.from_string(fuel_type)
        if canonical_fuel is None:
            valid = ", ".join(f.value for f in FuelType)
            raise ValueError(
                f"vehicle {id} has fuel type '{fuel_type}', must be one of {{{valid}}}"
            )
        consumption = (
            float(urban_consumption),
            float(non_urban_consumption),
            float(autobahn_consumption),
        )
        if any(c < 0 for c in consumption):
            raise ValueError(f"vehicle {id} has a negative consumption: {consumption}")

        return Vehicle(
            id=id,
            brand=brand,
            model=model,
            fuel_type=canonical_fuel,
            urban_consumption=consumption[0],
            non_urban_consumption=consumption[1],
            autobahn_consumption=consumption[2],
            official_co2_g_km=_optional_float(official_co2_g_km),
        )

    @classmethod
    def from_row(cls, row: Dict[str, str]) -> Vehicle:
        """
        reads a row of the canonical vehicle table

        :param row: a csv row with the VEHICLE_FIELDS columns
        :return: a vehicle
        :raises IOError: if a required column is missing
        :raises ValueError: if a value cannot be parsed
        """
        for key in VEHICLE_FIELDS[:-1]:
            if key not in row:
                raise IOError(f"cannot load a vehicle without a '{key}'")
        return cls.build(
            id=row["vehicle_id"],
            brand=row["brand"],
            model=row["model"],
            fuel_type=row["fuel_type"],
            urban_consumption=row["urban_consumption"],
            non_urban_consumption=row["non_urban_consumption"],
            autobahn_consumption=row["autobahn_consumption"],
            official_co2_g_km=row.get("official_co2_g_km"),
        )

    def to_row(self) -> Dict[str, str]:
        return {
            "vehicle_id": self.id,
            "brand": self.brand,
            "model": self.model,
            "fuel_type": self.fuel_type.value,
            "urban_consumption": str(self.urban_consumption),
            "non_urban_consumption": str(self.non_urban_consumption),
            "autobahn_consumption": str(self.autobahn_consumption),
            "official_co2_g_km": "" if self.official_co2_g_km is None else str(
                self.official_co2_g_km
            ),
        }

    def asdict(self) -> Dict:
        return {
            "id": self.id,
            "brand": self.brand,
            "model": self.model,
            "fuel_type": self.fuel_type.value,
            "urban_consumption": self.urban_consumption,
            "non_urban_consumption": self.non_urban_consumption,
            "autobahn_consumption": self.autobahn_consumption,
            "official_co2_g_km": self.official_co2_g_km,
        }


def _optional_float(value) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)
