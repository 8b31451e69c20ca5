from __future__ import annotations

import os
from typing import Dict, NamedTuple, Optional, Tuple

from nrel.footprint.config.config_builder import ConfigBuilder

API_KEY_ENVIRONMENT_VARIABLE = "ORS_API_KEY"


class Routing(NamedTuple):
    base_url: str
    profile: str
    timeout_seconds: float
    api_key: Optional[str] = None

    @classmethod
    def default_config(cls) -> Dict:
        return {"profile": "driving-car", "timeout_seconds": 10, "api_key": None}

    @classmethod
    def required_config(cls) -> Tuple[str, ...]:
        return ("base_url",)

    @classmethod
    def build(cls, config: Optional[Dict] = None) -> Routing:
        return ConfigBuilder.build(
            default_config=cls.default_config(),
            required_config=cls.required_config(),
            config_constructor=lambda c: Routing.from_dict(c),
            config=config,
            section="routing",
        )

    @classmethod
    def from_dict(cls, d: Dict) -> Routing:
        api_key = d.get("api_key") or os.environ.get(API_KEY_ENVIRONMENT_VARIABLE)
        timeout_seconds = float(d["timeout_seconds"])
        if timeout_seconds <= 0:
            raise ValueError("routing.timeout_seconds must be positive")
        return Routing(
            base_url=str(d["base_url"]).rstrip("/"),
            profile=d["profile"],
            timeout_seconds=timeout_seconds,
            api_key=api_key,
        )

    def asdict(self) -> Dict:
        # never echo the key back out
        out = self._asdict()
        out["api_key"] = None
        return out
