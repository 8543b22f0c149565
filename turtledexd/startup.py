"""Startup pipeline: normalize, load the API password, check the policy."""
from __future__ import annotations

import logging

from turtledexd.config import Config
from turtledexd.core.api_password import load_api_password
from turtledexd.core.processing import process_config
from turtledexd.core.security import verify_api_security
from turtledexd.storage.password_store import APIPasswordStore

logger = logging.getLogger(__name__)


def prepare_config(config: Config, store: APIPasswordStore | None = None) -> Config:
    """Run every startup check on *config* and return the final settings.

    Stops at the first DaemonConfigError; callers should treat any error as
    fatal and not open listeners.
    """
    if store is None:
        store = APIPasswordStore(config.data_dir)

    config = process_config(config)
    logger.debug("Processed config: %s", config)

    config = load_api_password(config, store)
    verify_api_security(config)
    return config
