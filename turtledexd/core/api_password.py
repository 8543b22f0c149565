"""API password bootstrap."""
from __future__ import annotations

import dataclasses
import logging
import os
import secrets

from turtledexd.config import Config
from turtledexd.storage.password_store import APIPasswordStore

logger = logging.getLogger(__name__)

PASSWORD_ENV_VAR = "TURTLEDEX_API_PASSWORD"


def new_api_password() -> str:
    """Generate a random 32-character hex password."""
    return secrets.token_hex(16)


def load_api_password(config: Config, store: APIPasswordStore) -> Config:
    """Return *config* with ``api_password`` set when the API requires one.

    Order of precedence: the TURTLEDEX_API_PASSWORD environment variable,
    then the password file, then a freshly generated password which is
    written back to the file. With authentication off the config is returned
    as is. Raises SecretStoreError if the file cannot be read or written.
    """
    if not config.authenticate_api:
        return config

    password = os.environ.get(PASSWORD_ENV_VAR, "")
    if password:
        logger.info("Using API password from %s", PASSWORD_ENV_VAR)
        return dataclasses.replace(config, api_password=password)

    password = store.get()
    if password is None:
        password = new_api_password()
        store.set(password)
        logger.info("Generated new API password")
    else:
        logger.debug("Loaded API password from %s", store.path)
    return dataclasses.replace(config, api_password=password)
