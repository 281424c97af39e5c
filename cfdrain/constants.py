from __future__ import annotations

import os


class Color:
    RED = "\033[0;31m"
    YELLOW = "\033[0;33m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


LOGGER_NAME = "cf-drain"
PACKAGE_NAME = "cf-drain-cli"

CONFIG_ENV_VAR = "CF_DRAIN_CONFIG"
DEFAULT_CONFIG_PATH = os.path.expanduser("~/.config/cf-drain/config.yml")
DEFAULT_CF_BINARY = "cf"

CF_HOME_ENV_VAR = "CF_HOME"
CF_CONFIG_DIR_NAME = ".cf"
CF_CONFIG_FILE_NAME = "config.json"

# Drain type is carried on the drain URL, e.g. syslog://host?drain-type=metrics
DRAIN_TYPE_QUERY_PARAM = "drain-type"
DEFAULT_DRAIN_TYPE = "logs"

# The user has already confirmed, so cf must not prompt a second time
DELETE_SERVICE_FLAGS = ["-f"]
FORCE_FLAGS = ("-f", "--force")
