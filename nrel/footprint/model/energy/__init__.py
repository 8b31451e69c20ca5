from nrel.footprint.model.energy.electricity_mix import ElectricityMix
from nrel.footprint.model.energy.fueltype import FuelType
