from __future__ import annotations

import logging
import os
from pathlib import Path

from turtledexd.core.errors import SecretStoreError

logger = logging.getLogger(__name__)

PASSWORD_FILENAME = "apipassword"


class APIPasswordStore:
    """Keeps the API password in a single file inside the data directory."""

    def __init__(self, data_dir: Path) -> None:
        self._path = data_dir / PASSWORD_FILENAME

    @property
    def path(self) -> Path:
        return self._path

    def get(self) -> str | None:
        """Return the stored password, or None if there is none yet."""
        try:
            password = self._path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise SecretStoreError(self._path, "read", e) from e
        return password or None

    def set(self, password: str) -> None:
        """Create or overwrite the password file (owner read/write only)."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                # O_CREAT only applies the mode to new files.
                os.fchmod(f.fileno(), 0o600)
                f.write(password + "\n")
        except OSError as e:
            raise SecretStoreError(self._path, "write", e) from e
        logger.info("Saved API password to %s", self._path)
