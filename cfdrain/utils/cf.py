from __future__ import annotations

import json
import logging
import os
import subprocess
from typing import Any

from cfdrain.constants import CF_CONFIG_DIR_NAME
from cfdrain.constants import CF_CONFIG_FILE_NAME
from cfdrain.constants import CF_HOME_ENV_VAR
from cfdrain.constants import DEFAULT_CF_BINARY
from cfdrain.constants import LOGGER_NAME
from cfdrain.exceptions import CfBinaryError
from cfdrain.exceptions import CfCommandError
from cfdrain.exceptions import CfResponseError
from cfdrain.exceptions import NotTargetedError
from cfdrain.utils.drains import BoundApp
from cfdrain.utils.drains import ServiceInstance


def get_cf_config_path(cf_home: str | None = None) -> str:
    if cf_home is None:
        cf_home = os.environ.get(CF_HOME_ENV_VAR) or os.path.expanduser("~")
    return os.path.join(cf_home, CF_CONFIG_DIR_NAME, CF_CONFIG_FILE_NAME)


def get_targeted_space_guid(cf_home: str | None = None) -> str:
    """Get the guid of the space the cf CLI is targeting."""
    config_path = get_cf_config_path(cf_home)
    try:
        with open(config_path, "r", encoding="utf-8") as stream:
            cf_config = json.load(stream)
    except (OSError, json.JSONDecodeError) as e:
        raise NotTargetedError() from e
    if not isinstance(cf_config, dict):
        raise NotTargetedError()
    space_fields = cf_config.get("SpaceFields")
    if not isinstance(space_fields, dict):
        raise NotTargetedError()
    space_guid = space_fields.get("GUID")
    if not space_guid:
        raise NotTargetedError()
    return str(space_guid)


def run_cf_command(args: list[str], cf_binary: str = DEFAULT_CF_BINARY) -> str:
    """Run a cf command and return its output."""
    cmd = [cf_binary, *args]
    logger = logging.getLogger(LOGGER_NAME)
    logger.debug("Running command: %s", " ".join(cmd))
    try:
        return subprocess.check_output(cmd, text=True, stderr=subprocess.PIPE)
    except subprocess.CalledProcessError as e:
        raise CfCommandError(
            command=" ".join(cmd),
            returncode=e.returncode,
            stdout=e.stdout,
            stderr=e.stderr,
        ) from e
    except (FileNotFoundError, PermissionError) as e:
        raise CfBinaryError(cf_binary=cf_binary, reason=e.strerror or str(e)) from e


def cf_curl(path: str, cf_binary: str = DEFAULT_CF_BINARY) -> dict[str, Any]:
    """Issue a GET against the Cloud Controller API through `cf curl`."""
    output = run_cf_command(["curl", path], cf_binary)
    try:
        response = json.loads(output)
    except json.JSONDecodeError as e:
        raise CfCommandError(
            command=f"{cf_binary} curl {path}",
            returncode=0,
            stdout=output,
            stderr=f"Unable to parse response from {path}: {e}",
        ) from e
    if not isinstance(response, dict):
        raise CfCommandError(
            command=f"{cf_binary} curl {path}",
            returncode=0,
            stdout=output,
            stderr=f"Unexpected response from {path}",
        )
    # cf curl exits 0 even when the API returns an error body
    if "error_code" in response:
        raise CfCommandError(
            command=f"{cf_binary} curl {path}",
            returncode=0,
            stdout=output,
            stderr=response.get("description") or response["error_code"],
        )
    return response


def get_all_resources(
    path: str, cf_binary: str = DEFAULT_CF_BINARY
) -> list[dict[str, Any]]:
    """Follow next_url through every page of a v2 API listing."""
    resources: list[dict[str, Any]] = []
    next_url: str | None = path
    while next_url:
        page = cf_curl(next_url, cf_binary)
        resources.extend(page.get("resources", []))
        next_url = page.get("next_url")
    return resources


class CfServiceDirectory:
    """Service directory backed by the cf CLI."""

    def __init__(
        self, cf_binary: str = DEFAULT_CF_BINARY, cf_home: str | None = None
    ) -> None:
        self.cf_binary = cf_binary
        self.cf_home = cf_home

    def list_drain_services(self) -> list[ServiceInstance]:
        """List the user provided services in the targeted space and the apps bound to them."""
        space_guid = get_targeted_space_guid(self.cf_home)
        resources = get_all_resources(
            f"/v2/user_provided_service_instances?q=space_guid:{space_guid}",
            self.cf_binary,
        )
        services = []
        for resource in resources:
            try:
                entity = resource["entity"]
                name = entity["name"]
                guid = resource["metadata"]["guid"]
                service_bindings_url = entity["service_bindings_url"]
                syslog_drain_url = entity.get("syslog_drain_url") or ""
            except (KeyError, TypeError, AttributeError) as e:
                raise CfResponseError(
                    f"Unexpected service instance in space {space_guid}"
                ) from e
            services.append(
                ServiceInstance(
                    name=name,
                    guid=guid,
                    bound_apps=self._get_bound_apps(service_bindings_url),
                    syslog_drain_url=syslog_drain_url,
                )
            )
        return services

    def _get_bound_apps(self, service_bindings_url: str) -> list[BoundApp]:
        bound_apps = []
        for binding in get_all_resources(service_bindings_url, self.cf_binary):
            try:
                app_guid = binding["entity"]["app_guid"]
            except (KeyError, TypeError) as e:
                raise CfResponseError(
                    f"Unexpected service binding in response from {service_bindings_url}"
                ) from e
            app = cf_curl(f"/v2/apps/{app_guid}", self.cf_binary)
            try:
                app_name = app["entity"]["name"]
            except (KeyError, TypeError) as e:
                raise CfResponseError(
                    f"Unexpected app in response from /v2/apps/{app_guid}"
                ) from e
            bound_apps.append(BoundApp(name=app_name, guid=app_guid))
        return bound_apps

    def unbind_service(self, app_name: str, service_name: str) -> None:
        run_cf_command(["unbind-service", app_name, service_name], self.cf_binary)

    def delete_service(self, service_name: str, flags: list[str]) -> None:
        run_cf_command(["delete-service", service_name, *flags], self.cf_binary)
