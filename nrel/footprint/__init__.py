__doc__ = r"""
**footprint** estimates the greenhouse gas emissions of a car trip and of the
equivalent trip by public transport, so that travel options can be compared.

vehicles are resolved from a small set of generic vehicles, a local vehicle store
or the french "vehicules commercialises" open data set; car routes are split into
urban, non-urban and autobahn distances by speed, and emission factor tables
(including electricity mix dependent factors) turn consumption into grams of CO2.
"""

import logging
from pathlib import Path

from nrel.footprint.config import FootprintConfig
from nrel.footprint.model.emission import EmissionCalculator, EmissionFactorTable
from nrel.footprint.model.energy import ElectricityMix, FuelType
from nrel.footprint.model.roadnetwork import CarRoute, Place, PublicTransportRoute, RoadType
from nrel.footprint.model.vehicle import Vehicle, VehicleCatalog
from nrel.footprint.service import FootprintService, TripEmissions


def package_root() -> Path:
    return Path(__file__).parent


from rich.console import Console
from rich.logging import RichHandler


FORMAT = "%(message)s"
# stdout carries the json results of the footprint command
rich_handler = RichHandler(
    console=Console(stderr=True),
    markup=True,
    rich_tracebacks=True,
    show_time=False,
    show_path=False,
)
logging.basicConfig(
    level=logging.INFO,
    format=FORMAT,
    handlers=[rich_handler],
)
