from __future__ import annotations

import argparse
import atexit
import logging
import os
import platform
from importlib import metadata

from sentry_sdk import flush
from sentry_sdk import init
from sentry_sdk import set_tag
from sentry_sdk import start_transaction
from sentry_sdk.integrations.argv import ArgvIntegration

from cfdrain.commands import delete_drain
from cfdrain.commands import drains
from cfdrain.constants import LOGGER_NAME
from cfdrain.constants import PACKAGE_NAME

sentry_environment = (
    "development" if os.environ.get("IS_DEV", default="0") == "1" else "production"
)
if os.environ.get("CI", default="false") == "true":
    sentry_environment = "CI"

sentry_dsn = os.environ.get("CF_DRAIN_SENTRY_DSN", default="")
disable_sentry = (
    not sentry_dsn or os.environ.get("CF_DRAIN_DISABLE_SENTRY", default="0") == "1"
)
logging.basicConfig(level=logging.INFO)
current_version = metadata.version(PACKAGE_NAME)

if not disable_sentry:
    init(
        dsn=sentry_dsn,
        traces_sample_rate=1.0,
        integrations=[ArgvIntegration()],
        environment=sentry_environment,
        release=current_version,
    )
    set_tag("user_platform", platform.platform())


@atexit.register
def cleanup() -> None:
    flush()


def main(argv: list[str] | None = None) -> None:
    set_tag("cf_drain_version", current_version)
    parser = argparse.ArgumentParser(
        prog="cf-drain",
        description="cf CLI plugin for managing syslog drains.",
        usage="cf-drain [-h] [--version] COMMAND ...",
    )
    parser.add_argument("--version", action="version", version=current_version)

    subparsers = parser.add_subparsers(dest="command", title="commands", metavar="")

    # Add subparsers for each command
    delete_drain.add_parser(subparsers)
    drains.add_parser(subparsers)

    args, unknown_args = parser.parse_known_args(argv)

    if unknown_args:
        # Only commands that validate their own tokens accept leftovers
        if not getattr(args, "passthrough_args", False):
            parser.error(f"unrecognized arguments: {' '.join(unknown_args)}")
        args.drain_args = [*args.drain_args, *unknown_args]

    # If the command has a debug flag, set the logger to debug
    if "debug" in args and args.debug:
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)

    if args.command:
        # Call the appropriate function based on the command
        with start_transaction(op="command", name=args.command):
            args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
