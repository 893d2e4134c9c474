"""Runtime configuration for metadata generation.

Values are resolved with the following precedence (lowest first):
built-in defaults, a YAML/JSON config file, environment variables. CLI flags
are applied on top by ``cli_config.apply_cli_overrides``.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class MetadataConfig:
    """Settings threaded through the generators.

    Attributes:
        debug: Emit diagnostic traces (URL, written path, content size).
            Never changes control flow or output.
        timeout: HTTP timeout in seconds; None keeps the client default.
        temp_prefix: Name prefix for per-call temporary directories.
    """
    debug: bool = False
    timeout: Optional[float] = Constants.REQUEST_TIMEOUT
    temp_prefix: str = Constants.TEMP_DIR_PREFIX


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def _parse_timeout(value: Any) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    timeout = float(value)
    if timeout <= 0:
        raise ValueError(f"timeout must be positive, got {value!r}")
    return timeout


def _read_config_file(path: str) -> Dict[str, Any]:
    """Return the ``metadata`` section (or top-level mapping) of a config file."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            if path.lower().endswith(".json"):
                data = json.load(fh)
            else:
                data = yaml.safe_load(fh)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.warning("Unable to read config file %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        return {}
    section = data.get("metadata", data)
    return section if isinstance(section, dict) else {}


def _apply(config: MetadataConfig, values: Mapping[str, Any], source: str) -> MetadataConfig:
    """Return ``config`` updated with recognized keys from ``values``."""
    updates: Dict[str, Any] = {}
    if values.get("debug") is not None:
        updates["debug"] = _parse_bool(values["debug"])
    if "timeout" in values:
        try:
            updates["timeout"] = _parse_timeout(values["timeout"])
        except (TypeError, ValueError) as exc:
            logger.warning("Ignoring invalid timeout from %s: %s", source, exc)
    if values.get("temp_prefix"):
        updates["temp_prefix"] = str(values["temp_prefix"])
    return replace(config, **updates) if updates else config


def load_config(path: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> MetadataConfig:
    """Build a MetadataConfig from an optional file and the environment.

    Args:
        path: Config file (YAML, YML or JSON). Defaults to ``$PURLBOM_CONFIG``.
        env: Environment mapping; defaults to ``os.environ``.
    """
    env = os.environ if env is None else env
    config = MetadataConfig()

    path = path or env.get(Constants.ENV_CONFIG)
    if path:
        config = _apply(config, _read_config_file(path), path)

    env_values: Dict[str, Any] = {}
    if env.get(Constants.ENV_DEBUG) is not None:
        env_values["debug"] = env[Constants.ENV_DEBUG]
    if env.get(Constants.ENV_TIMEOUT) is not None:
        env_values["timeout"] = env[Constants.ENV_TIMEOUT]
    return _apply(config, env_values, "environment")
