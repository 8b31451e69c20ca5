from __future__ import annotations

from typing import Dict, NamedTuple, Optional, Tuple

from nrel.footprint.config.config_builder import ConfigBuilder


class Dataset(NamedTuple):
    base_url: str
    timeout_seconds: float
    export_rows: int

    @classmethod
    def default_config(cls) -> Dict:
        return {"timeout_seconds": 10, "export_rows": 10000}

    @classmethod
    def required_config(cls) -> Tuple[str, ...]:
        return ("base_url",)

    @classmethod
    def build(cls, config: Optional[Dict] = None) -> Dataset:
        return ConfigBuilder.build(
            default_config=cls.default_config(),
            required_config=cls.required_config(),
            config_constructor=lambda c: Dataset.from_dict(c),
            config=config,
            section="dataset",
        )

    @classmethod
    def from_dict(cls, d: Dict) -> Dataset:
        timeout_seconds = float(d["timeout_seconds"])
        export_rows = int(d["export_rows"])
        if timeout_seconds <= 0:
            raise ValueError("dataset.timeout_seconds must be positive")
        elif export_rows <= 0:
            raise ValueError("dataset.export_rows must be positive")
        return Dataset(
            base_url=str(d["base_url"]).rstrip("/"),
            timeout_seconds=timeout_seconds,
            export_rows=export_rows,
        )

    def asdict(self) -> Dict:
        return self._asdict()
