"""API bind policy.

Decides whether the API address may be used given the bind and
authentication settings. The rules are evaluated in order and the first one
that matches decides.
"""
from __future__ import annotations

import ipaddress
import logging
from dataclasses import dataclass
from enum import Enum

from turtledexd.config import Config
from turtledexd.core.errors import InsecureConfigurationError
from turtledexd.core.netaddr import split_host

logger = logging.getLogger(__name__)


class AddressClass(Enum):
    LOOPBACK = "loopback"  # reachable from this machine only
    BLANK = "blank"        # empty host, binds every interface
    PUBLIC = "public"      # any other IP or hostname


def classify_address(addr: str) -> AddressClass:
    host = split_host(addr)
    if not host:
        return AddressClass.BLANK
    if host.lower() == "localhost":
        return AddressClass.LOOPBACK
    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        return AddressClass.PUBLIC
    return AddressClass.LOOPBACK if ip.is_loopback else AddressClass.PUBLIC


@dataclass(frozen=True)
class SecurityRule:
    name: str
    address_class: AddressClass
    allow_api_bind: bool | None  # None matches either value
    authenticate_api: bool | None
    allowed: bool
    message: str = ""

    def matches(
        self, address_class: AddressClass, allow_api_bind: bool, authenticate_api: bool,
    ) -> bool:
        return (
            self.address_class is address_class
            and self.allow_api_bind in (None, allow_api_bind)
            and self.authenticate_api in (None, authenticate_api)
        )


SECURITY_RULES: tuple[SecurityRule, ...] = (
    SecurityRule("loopback", AddressClass.LOOPBACK, None, None, allowed=True),
    SecurityRule(
        "blank-host", AddressClass.BLANK, None, None, allowed=False,
        message="refusing to bind the API to all interfaces; "
                "give an explicit host such as localhost:9980",
    ),
    SecurityRule(
        "bind-not-allowed", AddressClass.PUBLIC, False, None, allowed=False,
        message="binding the API to a non-loopback address requires "
                "TURTLEDEX_DISABLE_API_SECURITY",
    ),
    SecurityRule(
        "unauthenticated-bind", AddressClass.PUBLIC, True, False, allowed=False,
        message="cannot bind the API to a non-loopback address "
                "without API authentication",
    ),
    SecurityRule("authenticated-bind", AddressClass.PUBLIC, True, True, allowed=True),
)


def match_rule(config: Config) -> SecurityRule:
    """Return the first rule in SECURITY_RULES that applies to *config*."""
    address_class = classify_address(config.api_addr)
    for rule in SECURITY_RULES:
        if rule.matches(address_class, config.allow_api_bind, config.authenticate_api):
            return rule
    raise RuntimeError(f"no security rule matches {address_class}")


def verify_api_security(config: Config) -> None:
    """Raise InsecureConfigurationError unless the API address is safe to use."""
    rule = match_rule(config)
    if not rule.allowed:
        raise InsecureConfigurationError(rule.name, config.api_addr, rule.message)
    logger.debug("API address %s accepted by rule %s", config.api_addr, rule.name)
