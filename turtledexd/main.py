from __future__ import annotations

import logging
import sys

from turtledexd.config import Config
from turtledexd.core.errors import DaemonConfigError, InvalidModuleError, format_error
from turtledexd.core.modules import module_names, modules_help
from turtledexd.startup import prepare_config

LOG_FILE = "/tmp/turtledexd.log"

logger = logging.getLogger("turtledexd")


def _setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(LOG_FILE),
        ],
    )


def main() -> int:
    logger.info("turtledexd starting...")

    try:
        config = Config.from_env()
    except ValueError as e:
        logger.error("Invalid environment: %s", e)
        return 1

    try:
        config = prepare_config(config)
    except DaemonConfigError as e:
        logger.error("Startup aborted: %s", format_error(e))
        if isinstance(e, InvalidModuleError):
            logger.error("Available modules:\n%s", modules_help())
        return 1

    names = module_names(config.modules)
    logger.info("Modules: %s", ", ".join(names) if names else "(none)")
    logger.info(
        "API %s, RPC %s, host %s (authentication %s)",
        config.api_addr, config.rpc_addr, config.host_addr,
        "on" if config.authenticate_api else "off",
    )
    logger.info("Startup configuration ready.")
    return 0


def run() -> None:
    _setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
