from __future__ import annotations

import argparse
import json
import logging
import sys
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Sequence

import yaml

from nrel.footprint.config import FootprintConfig
from nrel.footprint.external.dataset import dataset_record
from nrel.footprint.external.dataset.dataset_client import DatasetClient
from nrel.footprint.model.roadnetwork.place import Place
from nrel.footprint.model.vehicle.vehicle_store import CsvVehicleStore
from nrel.footprint.service.footprint_service import FootprintService
from nrel.footprint.util import fs
from nrel.footprint.util.exception import FootprintError, report_error

log = logging.getLogger("footprint")

parser = argparse.ArgumentParser(
    description="estimate the CO2 footprint of car and public transport trips"
)
parser.add_argument("--config", dest="config_file", help="a footprint config yaml file")
parser.add_argument(
    "--defaults",
    dest="defaults",
    action="store_true",
    help="prints the default footprint configuration values",
)
subparsers = parser.add_subparsers(dest="command")

subparsers.add_parser("mixes", help="list the electricity mixes")
subparsers.add_parser("generic", help="list the generic vehicles")

car_parser = subparsers.add_parser("car", help="car emissions over known road type distances")
car_parser.add_argument("vehicle_id")
car_parser.add_argument("--urban-km", type=float, default=0.0)
car_parser.add_argument("--non-urban-km", type=float, default=0.0)
car_parser.add_argument("--autobahn-km", type=float, default=0.0)
car_parser.add_argument("--mix", dest="mix_id", help="electricity mix, for electric vehicles")

trip_parser = subparsers.add_parser(
    "trip", help="car and public transport emissions between two places"
)
trip_parser.add_argument("vehicle_id")
trip_parser.add_argument("start_latitude", type=float)
trip_parser.add_argument("start_longitude", type=float)
trip_parser.add_argument("destination_latitude", type=float)
trip_parser.add_argument("destination_longitude", type=float)
trip_parser.add_argument("--mix", dest="mix_id", help="electricity mix, for electric vehicles")

pt_parser = subparsers.add_parser("publictransport", help="public transport emissions")
pt_parser.add_argument("--short-distance-km", type=float, default=0.0)
pt_parser.add_argument("--long-distance-km", type=float, default=0.0)

search_parser = subparsers.add_parser("search", help="search places by address or venue")
search_parser.add_argument("query")

subparsers.add_parser("brands", help="list vehicle brands")
models_parser = subparsers.add_parser("models", help="list the models of a brand")
models_parser.add_argument("brand")
models_parser.add_argument("--fuel", help="only models available with this fuel")
fuels_parser = subparsers.add_parser("fuels", help="list the fuels of a brand or model")
fuels_parser.add_argument("brand")
fuels_parser.add_argument("model", nargs="?")
id_parser = subparsers.add_parser("vehicle-id", help="find the id of a brand, model and fuel")
id_parser.add_argument("brand")
id_parser.add_argument("model")
id_parser.add_argument("fuel")

export_parser = subparsers.add_parser(
    "export", help="download the vehicle dataset into a local vehicle store file"
)
export_parser.add_argument("destination")
export_parser.add_argument("--rows", type=int, help="maximum number of dataset rows")


def _models(service: FootprintService, args: argparse.Namespace) -> Any:
    if args.fuel:
        return {"models": service.models_by_fuel(args.brand, args.fuel)}
    return {"models": service.models(args.brand)}


def _fuels(service: FootprintService, args: argparse.Namespace) -> Any:
    if args.model:
        return {"fuel": service.fuels(args.brand, args.model)}
    return {"fuel": service.fuels_by_brand(args.brand)}


def _trip(service: FootprintService, args: argparse.Namespace) -> Any:
    start = Place.build(args.start_latitude, args.start_longitude)
    destination = Place.build(args.destination_latitude, args.destination_longitude)
    return service.trip_emissions(args.vehicle_id, start, destination, args.mix_id).asdict()


COMMANDS: Dict[str, Callable[[FootprintService, argparse.Namespace], Any]] = {
    "mixes": lambda s, a: {"mixes": s.electricity_mixes()},
    "generic": lambda s, a: {"vehicles": [v.asdict() for v in s.generic_vehicles()]},
    "car": lambda s, a: {
        "carEmissions": s.car_emissions(
            a.vehicle_id, a.urban_km, a.non_urban_km, a.autobahn_km, a.mix_id
        )
    },
    "trip": _trip,
    "publictransport": lambda s, a: {
        "publicTransportEmissions": s.public_transport_emissions(
            a.short_distance_km, a.long_distance_km
        )
    },
    "search": lambda s, a: {"places": [p._asdict() for p in s.search_places(a.query)]},
    "brands": lambda s, a: {"brands": s.brands()},
    "models": _models,
    "fuels": _fuels,
    "vehicle-id": lambda s, a: {"id": s.vehicle_id(a.brand, a.model, a.fuel)},
}


def export_vehicle_store(config: FootprintConfig, destination: str, rows: Optional[int]) -> Path:
    """
    downloads the bulk export of the vehicle dataset and writes it as a canonical vehicle store file

    :param config: the footprint config
    :param destination: the vehicle store file to write
    :param rows: maximum number of dataset rows, by default the configured export_rows
    :return: the path of the vehicle store file
    """
    client = DatasetClient(config.dataset)
    with tempfile.TemporaryDirectory() as tmp:
        export_file = client.download_export(Path(tmp).joinpath("export.csv"), rows)
        store = CsvVehicleStore.from_vehicles(dataset_record.read_export(export_file))
    path = store.write(destination)
    log.info(f"wrote {len(store.vehicles)} vehicles to {path}")
    return path


def run(argv: Optional[Sequence[str]] = None) -> int:
    """
    entry point for the footprint command line
    :return: 0 if success, 1 if error
    """
    args = parser.parse_args(argv)

    if args.defaults:
        print_defaults()
        if args.command is None:
            return 0
    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = FootprintConfig.build(args.config_file)
        if args.command == "export":
            path = export_vehicle_store(config, args.destination, args.rows)
            print(json.dumps({"vehicleStoreFile": str(path)}))
            return 0

        service = FootprintService.build(config)
        result = COMMANDS[args.command](service, args)
    except FootprintError as e:
        log.error(f"{args.command} failed: {e.message}")
        print(json.dumps(report_error(e)))
        return 1

    print(json.dumps(result, indent=2))
    return 0


def print_defaults():
    defaults_file = fs.resource_path("defaults", "footprint_config.yaml")
    log.info(f"printing the default footprint configuration stored at {defaults_file}:\n")

    with defaults_file.open("r") as f:
        conf = yaml.safe_load(f)
        print(yaml.dump(conf))
    log.info("finished printing default footprint configuration")


if __name__ == "__main__":
    sys.exit(run())
