from __future__ import annotations

from pathlib import Path
from typing import Dict, NamedTuple, Optional, Tuple

from nrel.footprint.config.config_builder import ConfigBuilder
from nrel.footprint.util import fs


class Emissions(NamedTuple):
    emission_factors_file: str
    generic_vehicles_file: str

    @classmethod
    def default_config(cls) -> Dict:
        return {}

    @classmethod
    def required_config(cls) -> Tuple[str, ...]:
        return "emission_factors_file", "generic_vehicles_file"

    @classmethod
    def build(
        cls, config: Optional[Dict] = None, config_directory: Optional[Path] = None
    ) -> Emissions:
        return ConfigBuilder.build(
            default_config=cls.default_config(),
            required_config=cls.required_config(),
            config_constructor=lambda c: Emissions.from_dict(c, config_directory),
            config=config,
            section="emissions",
        )

    @classmethod
    def from_dict(cls, d: Dict, config_directory: Optional[Path] = None) -> Emissions:
        # may be found in footprint.resources
        emission_factors_file = fs.construct_asset_path(
            d["emission_factors_file"], config_directory, "emission_factors"
        )
        generic_vehicles_file = fs.construct_asset_path(
            d["generic_vehicles_file"], config_directory, "vehicles"
        )
        return Emissions(
            emission_factors_file=emission_factors_file,
            generic_vehicles_file=generic_vehicles_file,
        )

    def asdict(self) -> Dict:
        return self._asdict()
