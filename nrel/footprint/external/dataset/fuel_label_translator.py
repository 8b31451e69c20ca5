"""
translates between the canonical fuel types and the fuel labels of the french
"vehicules commercialises" dataset. labels without a mapping pass through unchanged.
"""
from __future__ import annotations

import logging

import immutables

from nrel.footprint.model.energy.fueltype import FuelType
from nrel.footprint.util.typealiases import CanonicalFuelLabel, NativeFuelLabel

log = logging.getLogger(__name__)

NATIVE_TO_CANONICAL: immutables.Map[NativeFuelLabel, CanonicalFuelLabel] = immutables.Map(
    {
        "Essence": FuelType.PETROL.value,
        "Diesel": FuelType.DIESEL.value,
        "GN": FuelType.CNG.value,
        "EL": FuelType.ELECTRICITY.value,
    }
)

CANONICAL_TO_NATIVE: immutables.Map[CanonicalFuelLabel, NativeFuelLabel] = immutables.Map(
    {canonical: native for native, canonical in NATIVE_TO_CANONICAL.items()}
)


def to_canonical(native_label: NativeFuelLabel) -> CanonicalFuelLabel:
    """
    the canonical fuel label of a dataset fuel label

    :param native_label: a fuel label as found in the dataset, such as "Essence"
    :return: the canonical label, such as "petrol", or the input if it has no mapping
    """
    canonical = NATIVE_TO_CANONICAL.get(native_label)
    if canonical is None:
        log.debug(f"dataset fuel label '{native_label}' has no canonical fuel type")
        return native_label
    return canonical


def to_native(canonical_label: CanonicalFuelLabel) -> NativeFuelLabel:
    """
    the dataset fuel label of a canonical fuel label

    :param canonical_label: a canonical fuel label, such as "petrol"
    :return: the dataset label, such as "Essence", or the input if it has no mapping
    """
    native = CANONICAL_TO_NATIVE.get(canonical_label)
    if native is None:
        log.debug(f"fuel label '{canonical_label}' has no dataset fuel label")
        return canonical_label
    return native
