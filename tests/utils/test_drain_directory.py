from __future__ import annotations

import pytest

from cfdrain.exceptions import CfCommandError
from cfdrain.exceptions import ServiceNotFoundError
from cfdrain.utils.drains import Drain
from cfdrain.utils.drains import drain_from_service
from cfdrain.utils.drains import get_drain_type
from cfdrain.utils.drains import ServiceDrainDirectory
from testing.utils import create_drain_service
from testing.utils import create_service_directory


@pytest.mark.parametrize(
    "drain_url, drain_type",
    [
        ("syslog://drain.url.com", "logs"),
        ("syslog-tls://drain.url.com:6514?drain-type=metrics", "metrics"),
        ("https://drain.url.com/path?foo=bar&drain-type=all", "all"),
        ("syslog://drain.url.com?drain-type=", "logs"),
    ],
)
def test_get_drain_type(drain_url: str, drain_type: str) -> None:
    assert get_drain_type(drain_url) == drain_type


def test_drain_apps_must_match_app_guids() -> None:
    with pytest.raises(ValueError):
        Drain(
            name="my-drain",
            guid="my-drain-guid",
            apps=["app-1", "app-2"],
            app_guids=["app-1-guid"],
            type="all",
            drain_url="syslog://drain.url.com",
        )


def test_drain_from_service() -> None:
    service = create_drain_service(
        apps=["app-1", "app-2"], drain_url="syslog://drain.url.com?drain-type=all"
    )
    assert drain_from_service(service) == Drain(
        name="my-drain",
        guid="my-drain-guid",
        apps=["app-1", "app-2"],
        app_guids=["app-1-guid", "app-2-guid"],
        type="all",
        drain_url="syslog://drain.url.com?drain-type=all",
    )


def test_list_drains_skips_services_without_drain_url() -> None:
    service_directory = create_service_directory(
        [
            create_drain_service(name="drain-b", apps=["app-2"]),
            create_drain_service(name="credentials", drain_url=""),
            create_drain_service(name="drain-a", apps=[]),
        ]
    )

    drains = ServiceDrainDirectory(service_directory).list_drains()

    assert [drain.name for drain in drains] == ["drain-b", "drain-a"]
    assert drains[1].apps == []


def test_find_drain() -> None:
    service_directory = create_service_directory()
    drain = ServiceDrainDirectory(service_directory).find_drain("my-drain")
    assert drain.apps == ["app-1", "app-2"]
    assert drain.app_guids == ["app-1-guid", "app-2-guid"]


def test_find_drain_is_case_sensitive() -> None:
    service_directory = create_service_directory()
    with pytest.raises(ServiceNotFoundError):
        ServiceDrainDirectory(service_directory).find_drain("My-Drain")


def test_find_drain_propagates_lookup_errors() -> None:
    service_directory = create_service_directory()
    service_directory.list_drain_services.side_effect = CfCommandError(
        "cf curl", 1, "", "no get services"
    )
    with pytest.raises(CfCommandError):
        ServiceDrainDirectory(service_directory).find_drain("my-drain")
