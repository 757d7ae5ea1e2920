"""Validator configuration and its YAML loader.

A configuration file is a YAML mapping using any subset of these keys::

    say_max_length: 4096
    body_max_length: 1600
    url_attributes: [action, url, statusCallback]
    url_prefixes: ["http://", "https://", "/"]
    phone_prefixes: ["+", "client:", "sip:"]

Keys that are absent keep their defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_URL_ATTRIBUTES: tuple[str, ...] = (
    "action",
    "url",
    "statusCallback",
    "recordingStatusCallback",
    "transcribeCallback",
    "statusCallbackUrl",
    "fallbackUrl",
    "waitUrl",
    "referUrl",
    "partialResultCallback",
    "amdStatusCallback",
    "eventCallbackUrl",
    "clientNotificationUrl",
)


@dataclass(frozen=True)
class ValidatorConfig:
    """Limits and accepted prefixes used by the content rules."""

    say_max_length: int = 4096
    body_max_length: int = 1600
    url_attributes: tuple[str, ...] = DEFAULT_URL_ATTRIBUTES
    url_prefixes: tuple[str, ...] = ("http://", "https://", "/")
    phone_prefixes: tuple[str, ...] = ("+", "client:", "sip:")


_INT_KEYS = frozenset({"say_max_length", "body_max_length"})
_LIST_KEYS = frozenset({"url_attributes", "url_prefixes", "phone_prefixes"})


def config_from_mapping(data: Mapping[str, Any]) -> ValidatorConfig:
    """Build a :class:`ValidatorConfig` from an already-parsed mapping.

    Raises
    ------
    ConfigError
        If ``data`` has unknown keys or a value of the wrong type.
    """
    known = {f.name for f in fields(ValidatorConfig)}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

    values: dict[str, Any] = {}
    for key, value in data.items():
        if key in _INT_KEYS:
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"{key} must be a non-negative integer, got {value!r}")
            values[key] = value
        elif key in _LIST_KEYS:
            if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
                raise ConfigError(f"{key} must be a list of strings, got {value!r}")
            values[key] = tuple(value)

    return ValidatorConfig(**values)


def load_config(path: str | Path) -> ValidatorConfig:
    """Load a validator configuration from a YAML file.

    Parameters
    ----------
    path:
        Path to the YAML configuration file.

    Returns
    -------
    ValidatorConfig
        Parsed configuration; an empty file yields the defaults.

    Raises
    ------
    FileNotFoundError
        If the config file does not exist.
    ConfigError
        If the file is not valid YAML, is not a mapping, or holds
        unknown or ill-typed values.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config must be a YAML mapping, got {type(raw).__name__}")

    config = config_from_mapping(raw)
    logger.debug("Loaded validator config from %s", path)
    return config
