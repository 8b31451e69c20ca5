from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple, TypeVar

T = TypeVar("T")


class ConfigBuilder:
    @classmethod
    def build(
        cls,
        default_config: Dict,
        required_config: Tuple[str, ...],
        config_constructor: Callable[[Dict], T],
        config: Optional[Dict] = None,
        section: Optional[str] = None,
    ) -> T:
        """
        constructs a config section from a configuration Dict layered over its defaults

        :param default_config: a dictionary containing default config values
        :param required_config: the keys which must have a (non-null) value
        :param config_constructor: a function that takes a dict and builds a Config object
        :param config: the Dict containing attributes to load for this Config
        :param section: the name of the section, for error reporting
        :return: a Config
        :raises AttributeError: naming every required key without a value
        """
        c = {**default_config, **(config or {})}

        missing = [key for key in required_config if c.get(key) is None]
        if missing:
            where = f" in config section '{section}'" if section else ""
            raise AttributeError(f"expected required config keys {missing} not found{where}")

        return config_constructor(c)
