from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import immutables
import yaml

from nrel.footprint.model.energy.electricity_mix import ElectricityMix
from nrel.footprint.model.energy.fueltype import FuelType
from nrel.footprint.util import fs
from nrel.footprint.util.exception import MissingParameterError, UnknownMixError
from nrel.footprint.util.typealiases import MixId
from nrel.footprint.util.units import GramsCO2PerKm, GramsCO2PerKwH, GramsCO2PerLiter

log = logging.getLogger(__name__)

DEFAULT_EMISSION_FACTORS_FILE = "default_emission_factors.yaml"


@dataclass(frozen=True)
class EmissionFactorTable:
    """
    the read-only set of emission factors; loaded once and shared by every calculation

    :param fuel_factors: grams of CO2 per liter of each combustion fuel
    :param mixes: the configured electricity mixes by id
    :param mix_order: the mix ids in the order they were configured
    :param short_distance_factor: grams of CO2 per km of local public transport
    :param long_distance_factor: grams of CO2 per km of regional or mainline rail
    """

    fuel_factors: immutables.Map[FuelType, GramsCO2PerLiter]
    mixes: immutables.Map[MixId, ElectricityMix]
    mix_order: Tuple[MixId, ...]
    short_distance_factor: GramsCO2PerKm
    long_distance_factor: GramsCO2PerKm

    @classmethod
    def build(cls, file: Optional[Union[str, Path]] = None) -> EmissionFactorTable:
        """
        reads an emission factor yaml file, by default the one packaged in nrel.footprint.resources

        :param file: the emission factor file
        :return: the table
        :raises IOError: when required entries are missing from the file
        """
        if file is None:
            file = fs.resource_path("emission_factors", DEFAULT_EMISSION_FACTORS_FILE)
        with Path(file).open() as f:
            d = yaml.safe_load(f)
        log.debug(f"loaded emission factors from {file}")
        return cls.from_dict(d)

    @classmethod
    def from_dict(cls, d: Dict) -> EmissionFactorTable:
        for key in ("fuel", "electricity_mixes", "public_transport"):
            if key not in d:
                raise IOError(f"emission factors are missing the '{key}' section")

        fuel_factors: Dict[FuelType, GramsCO2PerLiter] = {}
        for label, factor in d["fuel"].items():
            fuel_type = FuelType.from_string(label)
            if fuel_type is None:
                raise ValueError(f"emission factor given for unknown fuel type '{label}'")
            elif not fuel_type.is_combustion:
                raise ValueError(
                    "electricity is rated by electricity_mixes, not by a fuel emission factor"
                )
            fuel_factors[fuel_type] = _non_negative(factor, f"fuel.{label}")

        missing = [f.value for f in FuelType if f.is_combustion and f not in fuel_factors]
        if missing:
            raise IOError(f"emission factors are missing fuel factors for {missing}")

        mixes: Dict[MixId, ElectricityMix] = {}
        for mix_dict in d["electricity_mixes"]:
            mix = ElectricityMix.from_dict(mix_dict)
            if mix.mix_id in mixes:
                raise ValueError(f"electricity mix '{mix.mix_id}' is listed more than once")
            mixes[mix.mix_id] = mix

        public_transport = d["public_transport"]
        return EmissionFactorTable(
            fuel_factors=immutables.Map(fuel_factors),
            mixes=immutables.Map(mixes),
            mix_order=tuple(mixes.keys()),
            short_distance_factor=_non_negative(
                public_transport.get("short_distance"), "public_transport.short_distance"
            ),
            long_distance_factor=_non_negative(
                public_transport.get("long_distance"), "public_transport.long_distance"
            ),
        )

    def list_electricity_mixes(self) -> Tuple[Dict[str, str], ...]:
        """
        the available electricity mixes, in configured order, without their factors
        """
        return tuple(self.mixes[mix_id].describe() for mix_id in self.mix_order)

    def fuel_factor(self, fuel_type: FuelType) -> GramsCO2PerLiter:
        """
        grams of CO2 per unit of fuel consumed

        :param fuel_type: a combustion fuel type
        :return: the emission factor
        :raises MissingParameterError: for electricity, which is rated by an electricity mix
        """
        factor = self.fuel_factors.get(fuel_type)
        if factor is None:
            raise MissingParameterError(
                f"no fuel emission factor for {fuel_type.value}; an electricity mix is required"
            )
        return factor

    def mix_factor(self, mix_id: MixId) -> GramsCO2PerKwH:
        """
        grams of CO2 per kilowatt-hour of the given electricity mix

        :param mix_id: the id of a configured mix
        :return: the emission factor
        :raises UnknownMixError: if the mix is not configured
        """
        mix = self.mixes.get(mix_id)
        if mix is None:
            raise UnknownMixError(mix_id, ", ".join(self.mix_order))
        return mix.emission_factor


def _non_negative(value, name: str) -> float:
    if value is None:
        raise IOError(f"emission factor '{name}' not found")
    factor = float(value)
    if factor < 0:
        raise ValueError(f"emission factor '{name}' must be non-negative, found {factor}")
    return factor
