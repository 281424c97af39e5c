from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from urllib.parse import parse_qs
from urllib.parse import urlparse

from cfdrain.constants import DEFAULT_DRAIN_TYPE
from cfdrain.constants import DRAIN_TYPE_QUERY_PARAM
from cfdrain.exceptions import ServiceNotFoundError
from cfdrain.utils.types import ServiceDirectory


@dataclass(frozen=True)
class BoundApp:
    name: str
    guid: str


@dataclass(frozen=True)
class ServiceInstance:
    name: str
    guid: str
    bound_apps: list[BoundApp] = field(default_factory=list)
    syslog_drain_url: str = ""


@dataclass(frozen=True)
class Drain:
    name: str
    guid: str
    apps: list[str]
    app_guids: list[str]
    type: str
    drain_url: str

    def __post_init__(self) -> None:
        if len(self.apps) != len(self.app_guids):
            raise ValueError(
                f"Drain {self.name} has {len(self.apps)} apps but {len(self.app_guids)} app guids"
            )


def get_drain_type(drain_url: str) -> str:
    """Read the drain type from the drain-type query parameter of a drain URL."""
    query = parse_qs(urlparse(drain_url).query)
    drain_types = query.get(DRAIN_TYPE_QUERY_PARAM)
    if not drain_types:
        return DEFAULT_DRAIN_TYPE
    return drain_types[0]


def drain_from_service(service: ServiceInstance) -> Drain:
    return Drain(
        name=service.name,
        guid=service.guid,
        apps=[app.name for app in service.bound_apps],
        app_guids=[app.guid for app in service.bound_apps],
        type=get_drain_type(service.syslog_drain_url),
        drain_url=service.syslog_drain_url,
    )


class ServiceDrainDirectory:
    """Drain lookups backed by the service instances of a service directory."""

    def __init__(self, service_directory: ServiceDirectory) -> None:
        self.service_directory = service_directory

    def list_drains(self) -> list[Drain]:
        return [
            drain_from_service(service)
            for service in self.service_directory.list_drain_services()
            if service.syslog_drain_url
        ]

    def find_drain(self, name: str) -> Drain:
        for drain in self.list_drains():
            if drain.name == name:
                return drain
        raise ServiceNotFoundError(name)
