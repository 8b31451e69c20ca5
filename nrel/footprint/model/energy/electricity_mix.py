from __future__ import annotations

from typing import Dict, NamedTuple

from nrel.footprint.util.typealiases import MixId
from nrel.footprint.util.units import GramsCO2PerKwH


class ElectricityMix(NamedTuple):
    """
    a named electricity generation blend used to rate the emissions of an electric vehicle

    :param mix_id: the mix id, such as "de"
    :param description: a human-readable description of the mix
    :param emission_factor: grams of CO2 emitted per kilowatt-hour drawn from this mix
    """

    mix_id: MixId
    description: str
    emission_factor: GramsCO2PerKwH

    @classmethod
    def from_dict(cls, d: Dict) -> ElectricityMix:
        if "id" not in d:
            raise IOError(f"cannot load an electricity mix without an 'id': {d}")
        elif "emission_factor" not in d:
            raise IOError(f"cannot load electricity mix '{d['id']}' without an 'emission_factor'")
        emission_factor = float(d["emission_factor"])
        if emission_factor < 0:
            raise ValueError(f"electricity mix '{d['id']}' has a negative emission factor")
        return ElectricityMix(
            mix_id=str(d["id"]),
            description=str(d.get("description", "")),
            emission_factor=emission_factor,
        )

    def describe(self) -> Dict[str, str]:
        """
        the public view of a mix; the factor itself stays internal
        """
        return {"id": self.mix_id, "description": self.description}
