"""Configuration of the payment service."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "PAYMENT"
GRPC_PORT_CONFIG = "GRPC_PORT"
APPLICATION_MODE_CONFIG = "APPLICATION_MODE"

DEFAULT_GRPC_PORT = 9000
DEFAULT_APPLICATION_MODE = "development"

CONFIG_NAME = "paymentservice-config"

_DEFAULTS: dict[str, Any] = {
    GRPC_PORT_CONFIG: DEFAULT_GRPC_PORT,
    APPLICATION_MODE_CONFIG: DEFAULT_APPLICATION_MODE,
}

_PORT_PATTERN = re.compile(r"[+-]?[0-9]+")


class ConfigError(ValueError):
    """Raised when a configuration value is invalid."""


@dataclass(frozen=True)
class Config:
    """Settings of the payment service."""

    grpc_port: int = DEFAULT_GRPC_PORT
    application_mode: str = DEFAULT_APPLICATION_MODE

    def is_development_mode(self) -> bool:
        return self.application_mode == "development"


def _read_config_file(config_dir: Path) -> dict[str, Any]:
    for suffix in (".yaml", ".yml"):
        path = config_dir / f"{CONFIG_NAME}{suffix}"
        if not path.is_file():
            continue
        try:
            with path.open(encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as err:
            logger.warning("failed to load configs from config file: %s", err)
            return {}
        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(
                "failed to load configs from config file: %s is not a mapping", path
            )
            return {}
        return {str(key).upper(): value for key, value in data.items()}
    logger.warning(
        "failed to load configs from config file: %s not found in %s",
        CONFIG_NAME,
        config_dir,
    )
    return {}


def _as_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if value is None:
        return ""
    return str(value)


def _convert_port(text: str) -> int:
    if not _PORT_PATTERN.fullmatch(text):
        raise ConfigError(f"port {text} is invalid")
    return int(text)


def load_config(
    config_dir: str | os.PathLike[str] = ".",
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Build the configuration from defaults, a YAML file and the environment.

    Environment variables prefixed with ``PAYMENT_`` take precedence over the
    file, which takes precedence over the defaults. Empty variables are ignored.
    """
    logger.info("loading configurations ...")
    env = os.environ if environ is None else environ
    from_file = _read_config_file(Path(config_dir))

    values: dict[str, Any] = {}
    for key, default in _DEFAULTS.items():
        env_value = env.get(f"{ENV_PREFIX}_{key}")
        if env_value:
            value: Any = env_value
        elif key in from_file:
            value = from_file[key]
        else:
            value = default
        if value == default:
            logger.info("using default value for config %s", key)
        else:
            logger.info("overwriting default value for config %s", key)
        values[key] = value

    return Config(
        grpc_port=_convert_port(_as_string(values[GRPC_PORT_CONFIG])),
        application_mode=_as_string(values[APPLICATION_MODE_CONFIG]),
    )