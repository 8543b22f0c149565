"""Module spec parsing.

A module spec is a string of single-letter codes, one per subsystem the
daemon should start, e.g. ``"gctwrh"``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from turtledexd.core.errors import InvalidModuleError

logger = logging.getLogger(__name__)

DEFAULT_MODULES = "gctwrh"


@dataclass(frozen=True)
class ModuleInfo:
    code: str
    name: str
    description: str
    requires: str = ""  # codes that must also be enabled for this module to run


MODULES: dict[str, ModuleInfo] = {
    info.code: info
    for info in (
        ModuleInfo(
            "c", "consensus",
            "Keeps the blockchain in sync with the rest of the network.",
            requires="g",
        ),
        ModuleInfo(
            "e", "explorer",
            "Indexes the blockchain and serves statistics about it.",
            requires="gc",
        ),
        ModuleInfo(
            "g", "gateway",
            "Maintains peer connections and lets other modules talk to peers.",
        ),
        ModuleInfo(
            "h", "host",
            "Rents out storage to renters on the network.",
            requires="gctw",
        ),
        ModuleInfo(
            "m", "miner",
            "Provides block templates and accepts solved blocks.",
            requires="gctw",
        ),
        ModuleInfo(
            "r", "renter",
            "Uploads files to hosts and manages storage contracts.",
            requires="gctw",
        ),
        ModuleInfo(
            "t", "transactionpool",
            "Tracks and relays unconfirmed transactions.",
            requires="gc",
        ),
        ModuleInfo(
            "w", "wallet",
            "Holds keys and funds, and signs transactions.",
            requires="gct",
        ),
    )
}


def process_modules(modules: str) -> str:
    """Validate and lowercase a module spec, keeping its order.

    Raises InvalidModuleError on an unknown code or a code that appears
    twice (case-insensitively). An empty spec is valid and means no modules.
    """
    seen: set[str] = set()
    result = []
    for ch in modules:
        code = ch.lower()
        if code not in MODULES:
            raise InvalidModuleError(modules, ch, "unrecognized module")
        if code in seen:
            raise InvalidModuleError(modules, ch, "duplicate module")
        seen.add(code)
        result.append(code)
    processed = "".join(result)
    if processed != modules:
        logger.debug("Normalized module spec %r -> %r", modules, processed)
    return processed


def module_names(modules: str) -> list[str]:
    """Map a processed module spec to subsystem names, in spec order."""
    return [MODULES[code].name for code in modules]


def modules_help() -> str:
    """Render the module table for usage text."""
    lines = []
    for code in sorted(MODULES):
        info = MODULES[code]
        line = f"  {info.code}  {info.name:<16} {info.description}"
        if info.requires:
            line += f" (requires: {info.requires})"
        lines.append(line)
    return "\n".join(lines)
