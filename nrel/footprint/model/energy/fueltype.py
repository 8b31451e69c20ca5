from __future__ import annotations

from enum import Enum
from typing import Optional


class FuelType(Enum):
    """
    the strict set of canonical fuel types recognized by the footprint engine
    """

    PETROL = "petrol"
    DIESEL = "diesel"
    CNG = "cng"
    ELECTRICITY = "electricity"

    @classmethod
    def from_string(cls, s: Optional[str]) -> Optional[FuelType]:
        if s is None:
            return None
        elif isinstance(s, FuelType):
            return s
        cleaned = s.strip().lower()
        for fuel_type in cls:
            if fuel_type.value == cleaned:
                return fuel_type
        return None

    @property
    def is_combustion(self) -> bool:
        return self is not FuelType.ELECTRICITY
