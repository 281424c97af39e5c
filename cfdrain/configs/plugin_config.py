from __future__ import annotations

import os
from dataclasses import dataclass
from dataclasses import fields

import yaml

from cfdrain.constants import CONFIG_ENV_VAR
from cfdrain.constants import DEFAULT_CF_BINARY
from cfdrain.constants import DEFAULT_CONFIG_PATH
from cfdrain.exceptions import ConfigParseError
from cfdrain.exceptions import ConfigValidationError


@dataclass
class PluginConfig:
    cf_binary: str = DEFAULT_CF_BINARY
    cf_home: str | None = None

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if not isinstance(self.cf_binary, str) or not self.cf_binary:
            raise ConfigValidationError("cf_binary must be a non-empty string")

        if self.cf_home is not None and not isinstance(self.cf_home, str):
            raise ConfigValidationError("cf_home must be a string")


def get_config_path() -> str:
    return os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)


def load_plugin_config(config_path: str | None = None) -> PluginConfig:
    """Load the plugin config, falling back to defaults when no file exists."""
    if config_path is None:
        config_path = get_config_path()
    if not os.path.exists(config_path):
        return PluginConfig()
    with open(config_path, "r", encoding="utf-8") as stream:
        try:
            config = yaml.safe_load(stream)
        except yaml.YAMLError as yml_error:
            raise ConfigParseError(
                f"Error parsing config file: {yml_error}"
            ) from yml_error

    if config is None:
        return PluginConfig()
    if not isinstance(config, dict):
        raise ConfigParseError(f"Config file {config_path} must contain a mapping")

    valid_keys = {field.name for field in fields(PluginConfig)}
    unexpected_keys = set(config.keys()) - valid_keys
    if unexpected_keys:
        raise ConfigParseError(
            f"Unexpected key(s) in config file {config_path}: {sorted(unexpected_keys)}"
        )

    cf_home = config.get("cf_home")
    if isinstance(cf_home, str):
        cf_home = os.path.expanduser(cf_home)

    return PluginConfig(
        cf_binary=config.get("cf_binary", DEFAULT_CF_BINARY),
        cf_home=cf_home,
    )
