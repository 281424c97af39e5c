from __future__ import annotations

from argparse import _SubParsersAction
from argparse import ArgumentParser
from argparse import Namespace

from sentry_sdk import capture_exception

from cfdrain.configs.plugin_config import load_plugin_config
from cfdrain.exceptions import CfError
from cfdrain.exceptions import ConfigError
from cfdrain.utils.cf import CfServiceDirectory
from cfdrain.utils.console import Console
from cfdrain.utils.drains import Drain
from cfdrain.utils.drains import ServiceDrainDirectory
from cfdrain.utils.types import DrainDirectory


def add_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser(
        "drains", help="List the drains in the targeted space"
    )
    parser.add_argument(
        "--debug",
        help="Enable debug mode",
        action="store_true",
        default=False,
    )
    parser.set_defaults(func=drains)


def format_drain(drain: Drain) -> list[str]:
    apps = ", ".join(drain.apps) if drain.apps else "none"
    return [
        f"- {drain.name}",
        f"  apps: {apps}",
        f"  type: {drain.type}",
        f"  url: {drain.drain_url}",
    ]


def list_drains(drain_directory: DrainDirectory, console: Console) -> None:
    found_drains = drain_directory.list_drains()
    if not found_drains:
        console.warning("No drains found")
        return
    console.info("Drains in the targeted space:")
    for drain in found_drains:
        for line in format_drain(drain):
            console.info(line)


def drains(args: Namespace) -> None:
    """List the drains in the targeted space."""
    console = Console()
    try:
        config = load_plugin_config()
    except ConfigError as e:
        capture_exception(e)
        console.failure(str(e))
        exit(1)

    drain_directory = ServiceDrainDirectory(
        CfServiceDirectory(cf_binary=config.cf_binary, cf_home=config.cf_home)
    )
    try:
        list_drains(drain_directory, console)
    except CfError as e:
        capture_exception(e, level="info")
        console.failure(str(e))
        exit(1)
