from __future__ import annotations

import os
from pathlib import Path

import pytest

from cfdrain.configs.plugin_config import load_plugin_config
from cfdrain.configs.plugin_config import PluginConfig
from cfdrain.exceptions import ConfigParseError
from cfdrain.exceptions import ConfigValidationError
from testing.utils import create_config_file


def test_load_plugin_config_missing_file(tmp_path: Path) -> None:
    config = load_plugin_config(str(tmp_path / "config.yml"))
    assert config == PluginConfig(cf_binary="cf", cf_home=None)


def test_load_plugin_config(tmp_path: Path) -> None:
    config_file = create_config_file(
        tmp_path, {"cf_binary": "/usr/local/bin/cf8", "cf_home": "/srv/cf"}
    )
    config = load_plugin_config(str(config_file))
    assert config.cf_binary == "/usr/local/bin/cf8"
    assert config.cf_home == "/srv/cf"


def test_load_plugin_config_expands_cf_home(tmp_path: Path) -> None:
    config_file = create_config_file(tmp_path, {"cf_home": "~/cf"})
    config = load_plugin_config(str(config_file))
    assert config.cf_binary == "cf"
    assert config.cf_home == os.path.expanduser("~/cf")


def test_load_plugin_config_from_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    config_file = create_config_file(tmp_path, {"cf_binary": "cf7"})
    monkeypatch.setenv("CF_DRAIN_CONFIG", str(config_file))
    assert load_plugin_config().cf_binary == "cf7"


def test_load_plugin_config_empty_file(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yml"
    config_file.write_text("")
    assert load_plugin_config(str(config_file)) == PluginConfig()


def test_load_plugin_config_invalid_yaml(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yml"
    config_file.write_text("cf_binary: [unclosed\n")
    with pytest.raises(ConfigParseError, match="Error parsing config file"):
        load_plugin_config(str(config_file))


def test_load_plugin_config_not_a_mapping(tmp_path: Path) -> None:
    config_file = create_config_file(tmp_path, ["cf"])
    with pytest.raises(ConfigParseError, match="must contain a mapping"):
        load_plugin_config(str(config_file))


def test_load_plugin_config_unexpected_keys(tmp_path: Path) -> None:
    config_file = create_config_file(tmp_path, {"cf_binary": "cf", "retries": 3})
    with pytest.raises(ConfigParseError, match="Unexpected key"):
        load_plugin_config(str(config_file))


@pytest.mark.parametrize("config", [{"cf_binary": ""}, {"cf_binary": 8}, {"cf_home": 1}])
def test_load_plugin_config_invalid_values(
    tmp_path: Path, config: dict[str, object]
) -> None:
    config_file = create_config_file(tmp_path, config)
    with pytest.raises(ConfigValidationError):
        load_plugin_config(str(config_file))
