from __future__ import annotations

from pathlib import Path
from typing import Dict, NamedTuple, Optional, Tuple

from nrel.footprint.config.config_builder import ConfigBuilder


class Store(NamedTuple):
    vehicle_store_file: Optional[str] = None

    @classmethod
    def default_config(cls) -> Dict:
        return {"vehicle_store_file": None}

    @classmethod
    def required_config(cls) -> Tuple[str, ...]:
        return ()

    @classmethod
    def build(
        cls, config: Optional[Dict] = None, config_directory: Optional[Path] = None
    ) -> Store:
        return ConfigBuilder.build(
            default_config=cls.default_config(),
            required_config=cls.required_config(),
            config_constructor=lambda c: Store.from_dict(c, config_directory),
            config=config,
            section="store",
        )

    @classmethod
    def from_dict(cls, d: Dict, config_directory: Optional[Path] = None) -> Store:
        file = d.get("vehicle_store_file")
        if file is None:
            return Store()
        path = Path(file)
        if not path.is_absolute() and config_directory is not None:
            path = Path(config_directory).joinpath(path)
        if not path.is_file():
            raise FileNotFoundError(f"vehicle store file {path} does not exist")
        return Store(vehicle_store_file=str(path))

    def asdict(self) -> Dict:
        return self._asdict()
