"""YAML config loader and dotted-key lookup."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from weatherlookup.config.schema import LookupConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None) -> LookupConfig:
    """Load and validate config from a YAML file.

    A missing path or an empty file yields the defaults.
    """
    if path is None:
        return LookupConfig()
    path = Path(path)
    if not path.exists():
        logger.info("Config %s not found, using defaults", path)
        return LookupConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return LookupConfig(**raw)


def get_config_value(config: LookupConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'forecast.forecast_days'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, BaseModel) and part in type(obj).model_fields:
            obj = getattr(obj, part)
        elif isinstance(obj, dict) and part in obj:
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
