"""Operator-facing startup errors.

Every stage of the startup pipeline raises one of these; the entry point
turns them into a single diagnostic line and a non-zero exit.
"""
from __future__ import annotations


class DaemonConfigError(Exception):
    """Base class for errors that abort daemon startup."""


class InvalidModuleError(DaemonConfigError):
    """Unknown or duplicate code in the module spec."""

    def __init__(self, modules: str, code: str, reason: str) -> None:
        self.modules = modules
        self.code = code
        self.reason = reason
        super().__init__(f"{reason} '{code}' in module spec '{modules}'")


class SecretStoreError(DaemonConfigError):
    """The API password file could not be read or written."""

    def __init__(self, path: object, action: str, cause: Exception) -> None:
        self.path = path
        self.action = action
        self.cause = cause
        super().__init__(f"could not {action} API password at {path}: {cause}")


class InsecureConfigurationError(DaemonConfigError):
    """API address and authentication settings violate the security policy."""

    def __init__(self, rule: str, api_addr: str, message: str) -> None:
        self.rule = rule
        self.api_addr = api_addr
        super().__init__(f"{message} (api address '{api_addr}', rule: {rule})")


def format_error(e: BaseException) -> str:
    """Return a short one-line message like 'InvalidModuleError: detail'."""
    name = e.__class__.__name__
    msg = str(e).strip()
    return f"{name}: {msg}" if msg else name
