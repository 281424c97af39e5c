from __future__ import annotations

from typing import Protocol
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cfdrain.utils.drains import Drain
    from cfdrain.utils.drains import ServiceInstance


class ServiceDirectory(Protocol):
    """Lists, unbinds and deletes the service instances of the targeted space."""

    def list_drain_services(self) -> list[ServiceInstance]: ...

    def unbind_service(self, app_name: str, service_name: str) -> None: ...

    def delete_service(self, service_name: str, flags: list[str]) -> None: ...


class DrainDirectory(Protocol):
    """Resolves drains by name."""

    def list_drains(self) -> list[Drain]: ...

    def find_drain(self, name: str) -> Drain: ...
