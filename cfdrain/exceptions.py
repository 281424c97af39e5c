from __future__ import annotations


class DrainError(Exception):
    """Base class for errors that abort a drain command."""

    pass


class ArgumentCountError(DrainError):
    """Raised when a command receives the wrong number of positional arguments."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return f"Invalid arguments, expected {self.expected}, got {self.actual}."


class UnknownFlagError(DrainError):
    """Raised when a command receives a flag it does not recognize."""

    def __init__(self, flag: str):
        self.flag = flag

    def __str__(self) -> str:
        return f"unknown flag `{self.flag}'"


class ServiceLookupError(DrainError):
    """Raised when the services in the targeted space cannot be listed."""

    pass


class ServiceNotFoundError(DrainError):
    """Raised when a service is not found."""

    def __init__(self, service_name: str):
        self.service_name = service_name

    def __str__(self) -> str:
        return f"Unable to find service {self.service_name}."


class UnbindError(DrainError):
    """Raised when a service cannot be unbound from an app."""

    pass


class DeleteError(DrainError):
    """Raised when a service cannot be deleted."""

    pass


class CfError(Exception):
    """Base class for cf CLI related errors."""

    pass


class NotTargetedError(CfError):
    """Raised when the cf CLI has no space targeted."""

    def __str__(self) -> str:
        return "No space targeted, use 'cf target -s SPACE' to target a space."


class CfBinaryError(CfError):
    """Raised when the cf binary cannot be run."""

    def __init__(self, cf_binary: str, reason: str):
        self.cf_binary = cf_binary
        self.reason = reason

    def __str__(self) -> str:
        return f"Unable to run {self.cf_binary}: {self.reason}. Is the cf CLI installed?"


class CfResponseError(CfError):
    """Raised when the Cloud Controller API returns an unexpected response."""

    pass


class CfCommandError(CfError):
    """Raised when a cf command exits with an error."""

    def __init__(self, command: str, returncode: int, stdout: str, stderr: str):
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    def __str__(self) -> str:
        message = (self.stderr or "").strip() or (self.stdout or "").strip()
        if message:
            return message
        return f"{self.command} returned {self.returncode}"


class ConfigError(Exception):
    """Base class for configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Raised when a configuration file cannot be parsed."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when a configuration file is invalid."""

    pass
