from __future__ import annotations

import logging
import sys
from argparse import _SubParsersAction
from argparse import ArgumentParser
from argparse import Namespace
from dataclasses import dataclass
from typing import TextIO

from sentry_sdk import capture_exception

from cfdrain.configs.plugin_config import load_plugin_config
from cfdrain.constants import DELETE_SERVICE_FLAGS
from cfdrain.constants import FORCE_FLAGS
from cfdrain.constants import LOGGER_NAME
from cfdrain.exceptions import ArgumentCountError
from cfdrain.exceptions import CfError
from cfdrain.exceptions import ConfigError
from cfdrain.exceptions import DeleteError
from cfdrain.exceptions import DrainError
from cfdrain.exceptions import ServiceLookupError
from cfdrain.exceptions import UnbindError
from cfdrain.exceptions import UnknownFlagError
from cfdrain.utils.cf import CfServiceDirectory
from cfdrain.utils.console import Console
from cfdrain.utils.drains import ServiceDrainDirectory
from cfdrain.utils.types import DrainDirectory
from cfdrain.utils.types import ServiceDirectory


def add_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser(
        "delete-drain",
        help="Unbind a drain from its apps and delete it",
        usage="cf-drain delete-drain DRAIN_NAME [-f|--force] [--debug]",
    )
    # Anything other than --debug is checked by parse_delete_drain_args
    parser.add_argument("drain_args", nargs="*", metavar="DRAIN_NAME")
    parser.add_argument(
        "--debug",
        help="Enable debug mode",
        action="store_true",
        default=False,
    )
    parser.set_defaults(func=delete_drain, passthrough_args=True)


@dataclass
class DeleteDrainArgs:
    drain_name: str
    force: bool


def get_flag_name(token: str) -> str:
    """Name of the flag a token sets, e.g. `invalid` for `--invalid=1`."""
    if token.startswith("--"):
        return token[2:].split("=", 1)[0]
    short_flags = token[1:]
    for short_flag in short_flags:
        if f"-{short_flag}" not in FORCE_FLAGS:
            return short_flag
    return short_flags


def parse_delete_drain_args(tokens: list[str]) -> DeleteDrainArgs:
    force = False
    names: list[str] = []
    for token in tokens:
        if token in FORCE_FLAGS:
            force = True
        elif token.startswith("-") and token != "-":
            # Only the exact force flags are accepted, so -fx and
            # --force=yes are rejected along with unknown names
            raise UnknownFlagError(get_flag_name(token))
        else:
            names.append(token)

    if len(names) != 1:
        raise ArgumentCountError(expected=1, actual=len(names))
    return DeleteDrainArgs(drain_name=names[0], force=force)


def run_delete_drain(
    tokens: list[str],
    stdin: TextIO,
    drain_directory: DrainDirectory,
    service_directory: ServiceDirectory,
    console: Console,
) -> None:
    """
    Confirm with the user, unbind the drain from every app bound to it and
    delete it. Stops at the first failure; completed unbinds are not undone.
    """
    logger = logging.getLogger(LOGGER_NAME)
    args = parse_delete_drain_args(tokens)
    drain_name = args.drain_name

    try:
        drain = drain_directory.find_drain(drain_name)
    except CfError as e:
        raise ServiceLookupError(str(e)) from e

    if not args.force and not console.confirm(
        f"Are you sure you want to unbind {drain_name} from {', '.join(drain.apps)} and delete {drain_name}?",
        stdin,
    ):
        console.info("Delete cancelled")
        return

    for app_name in drain.apps:
        logger.debug("Unbinding %s from %s", drain_name, app_name)
        try:
            service_directory.unbind_service(app_name, drain_name)
        except CfError as e:
            raise UnbindError(str(e)) from e

    logger.debug("Deleting %s", drain_name)
    try:
        service_directory.delete_service(drain_name, list(DELETE_SERVICE_FLAGS))
    except CfError as e:
        raise DeleteError(str(e)) from e


def delete_drain(args: Namespace) -> None:
    """Unbind a drain from its apps and delete it."""
    console = Console()
    try:
        config = load_plugin_config()
    except ConfigError as e:
        capture_exception(e)
        console.failure(str(e))
        exit(1)

    service_directory = CfServiceDirectory(
        cf_binary=config.cf_binary, cf_home=config.cf_home
    )
    drain_directory = ServiceDrainDirectory(service_directory)
    try:
        run_delete_drain(
            args.drain_args,
            sys.stdin,
            drain_directory,
            service_directory,
            console,
        )
    except DrainError as e:
        capture_exception(e, level="info")
        console.failure(str(e))
        exit(1)
