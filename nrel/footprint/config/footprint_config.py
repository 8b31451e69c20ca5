from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, NamedTuple, Optional, Union

import yaml

from nrel.footprint.config.dataset import Dataset
from nrel.footprint.config.emissions import Emissions
from nrel.footprint.config.routing import Routing
from nrel.footprint.config.store import Store
from nrel.footprint.util import fs

log = logging.getLogger(__name__)

SECTIONS = ("dataset", "routing", "emissions", "store")


class FootprintConfig(NamedTuple):
    dataset: Dataset
    routing: Routing
    emissions: Emissions
    store: Store
    log_level: str = "INFO"

    @classmethod
    def build(
        cls,
        config_file: Optional[Union[str, Path]] = None,
        config: Optional[Dict] = None,
    ) -> FootprintConfig:
        """
        builds a footprint config from the packaged defaults, a config file and finally any overrides.
        relative file paths in the config file are resolved against the directory of that file.

        :param config_file: optional yaml file to load
        :param config: optional overrides to the default config values (Default: None)
        :return: a footprint config
        :raises AttributeError: when a required config key is missing
        :raises FileNotFoundError: when a referenced file cannot be found
        """
        defaults_file = fs.resource_path("defaults", "footprint_config.yaml")
        with defaults_file.open("r") as f:
            conf = yaml.safe_load(f)

        config_directory = None
        if config_file is not None:
            config_path = Path(config_file)
            with config_path.open("r") as f:
                file_conf = yaml.safe_load(f) or {}
            _merge(conf, file_conf)
            config_directory = config_path.parent
            log.info(f"footprint config loaded from {config_path}")

        if config is not None:
            _merge(conf, config)

        return cls.from_dict(conf, config_directory)

    @classmethod
    def from_dict(cls, d: Dict, config_directory: Optional[Path] = None) -> FootprintConfig:
        log_level = str(d.get("log_level", "INFO")).upper()
        root_logger = logging.getLogger("")
        root_logger.setLevel(log_level)

        footprint_config = FootprintConfig(
            dataset=Dataset.build(d.get("dataset")),
            routing=Routing.build(d.get("routing")),
            emissions=Emissions.build(d.get("emissions"), config_directory),
            store=Store.build(d.get("store"), config_directory),
            log_level=log_level,
        )
        log.debug(f"\n{yaml.dump(footprint_config.asdict())}")
        return footprint_config

    def asdict(self) -> Dict:
        out_dict: Dict = {}
        for name, config in self._asdict().items():
            if issubclass(config.__class__, tuple):
                out_dict[name] = config.asdict()
            else:
                out_dict[name] = config
        return out_dict


def _merge(conf: Dict, overrides: Dict):
    """
    updates the sections of conf with the matching sections of overrides; top-level keys are replaced
    """
    for key, value in overrides.items():
        if key in SECTIONS:
            if value is None:
                continue
            elif not isinstance(value, dict):
                raise ValueError(f"config section '{key}' must be a mapping, found {value!r}")
            section = conf.get(key) or {}
            section.update(value)
            conf[key] = section
        else:
            conf[key] = value
