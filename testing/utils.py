from __future__ import annotations

import json
from pathlib import Path
from unittest import mock

import yaml

from cfdrain.utils.cf import CfServiceDirectory
from cfdrain.utils.drains import BoundApp
from cfdrain.utils.drains import ServiceInstance


def create_config_file(tmp_path: Path, config: object) -> Path:
    config_file = Path(tmp_path, "config.yml")
    with config_file.open("w") as f:
        yaml.dump(config, f, sort_keys=False, default_flow_style=False)
    return config_file


def create_cf_config_file(cf_home: Path, config: dict[str, object]) -> None:
    cf_dir = Path(cf_home, ".cf")
    cf_dir.mkdir(parents=True, exist_ok=True)
    with Path(cf_dir, "config.json").open("w") as f:
        json.dump(config, f)


def create_drain_service(
    name: str = "my-drain",
    apps: list[str] | None = None,
    drain_url: str = "syslog://drain.url.com",
) -> ServiceInstance:
    if apps is None:
        apps = ["app-1", "app-2"]
    return ServiceInstance(
        name=name,
        guid=f"{name}-guid",
        bound_apps=[BoundApp(name=app, guid=f"{app}-guid") for app in apps],
        syslog_drain_url=drain_url,
    )


def create_service_directory(
    services: list[ServiceInstance] | None = None,
) -> mock.Mock:
    service_directory = mock.Mock(spec=CfServiceDirectory)
    service_directory.list_drain_services.return_value = (
        [create_drain_service()] if services is None else services
    )
    return service_directory
