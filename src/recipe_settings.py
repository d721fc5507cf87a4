#!/usr/bin/env python3
"""
Recipe Book Settings
Display and logging configuration, resolved from defaults, an optional
YAML file and RECIPE_* environment variables (in that order).
"""

import os
from dataclasses import dataclass, fields, replace
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from recipe_errors import ConfigurationError


ROUNDING_MODES = {
    'half_up': ROUND_HALF_UP,
    'half_even': ROUND_HALF_EVEN,
}

LOG_FORMATS = ('text', 'json')

# Keeps Decimal.quantize within the default 28-digit context for any float.
MAX_AMOUNT_DECIMALS = 10

ENV_PREFIX = 'RECIPE_'


@dataclass(frozen=True)
class Settings:
    """Resolved recipe book settings."""
    amount_decimals: int = 2
    amount_epsilon: float = 1e-9
    rounding: str = 'half_up'  # 'half_up' or 'half_even'
    log_level: str = 'INFO'
    log_format: str = 'text'  # 'text' or 'json'

    def __post_init__(self):
        if isinstance(self.amount_decimals, bool) or not isinstance(self.amount_decimals, int) \
                or not 0 <= self.amount_decimals <= MAX_AMOUNT_DECIMALS:
            raise ConfigurationError(f"amount_decimals must be between 0 and {MAX_AMOUNT_DECIMALS}, got {self.amount_decimals!r}")
        if isinstance(self.amount_epsilon, bool) or not isinstance(self.amount_epsilon, (int, float)) \
                or not 0 <= self.amount_epsilon < 0.5:
            raise ConfigurationError(f"amount_epsilon must be in [0, 0.5), got {self.amount_epsilon!r}")
        if self.rounding not in ROUNDING_MODES:
            raise ConfigurationError(
                f"rounding must be one of {sorted(ROUNDING_MODES)}, got {self.rounding!r}"
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"log_format must be one of {list(LOG_FORMATS)}, got {self.log_format!r}")


def _coerce(name: str, raw: Any, target: type, source: str) -> Any:
    if target is int:
        try:
            return int(raw)
        except (TypeError, ValueError):
            raise ConfigurationError(f"{name} must be an integer, got {raw!r}", source=source)
    if target is float:
        try:
            return float(raw)
        except (TypeError, ValueError):
            raise ConfigurationError(f"{name} must be a number, got {raw!r}", source=source)
    return str(raw).strip().lower() if name in ('rounding', 'log_format') else str(raw).strip().upper()


def _load_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load settings overrides from a YAML file."""
    path = Path(config_path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load config from {path}: {e}", source=str(path))

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping", source=str(path))
    return data


def load_settings(config_path: Optional[Union[str, Path]] = None,
                  environ: Optional[Dict[str, str]] = None) -> Settings:
    """
    Resolve settings.

    Args:
        config_path: Optional YAML file with any of the Settings field names
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Validated Settings instance
    """
    environ = os.environ if environ is None else environ
    types = {f.name: f.type for f in fields(Settings)}
    overrides: Dict[str, Any] = {}

    if config_path is not None:
        source = str(config_path)
        for key, value in _load_file(config_path).items():
            if key not in types:
                raise ConfigurationError(f"Unknown setting {key!r} in {source}", source=source)
            overrides[key] = _coerce(key, value, types[key], source)

    for name, target in types.items():
        env_key = ENV_PREFIX + name.upper()
        if env_key in environ:
            overrides[name] = _coerce(name, environ[env_key], target, env_key)

    return replace(Settings(), **overrides)
