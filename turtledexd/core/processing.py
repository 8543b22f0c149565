from __future__ import annotations

import dataclasses

from turtledexd.config import Config
from turtledexd.core.modules import process_modules
from turtledexd.core.netaddr import process_net_addr


def process_config(config: Config) -> Config:
    """Return a copy of *config* with normalized addresses and modules.

    Raises InvalidModuleError if the module spec is bad; nothing else is
    checked here.
    """
    modules = process_modules(config.modules)
    return dataclasses.replace(
        config,
        api_addr=process_net_addr(config.api_addr),
        rpc_addr=process_net_addr(config.rpc_addr),
        host_addr=process_net_addr(config.host_addr),
        modules=modules,
    )
