from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from turtledexd.core.modules import DEFAULT_MODULES

_TRUE = ("1", "true", "yes", "y", "on")
_FALSE = ("0", "false", "no", "n", "off")


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name, "").strip().lower()
    if not value:
        return default
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {os.environ[name]!r}")


@dataclass
class Config:
    """Daemon startup settings.

    Built once per process, passed through the startup pipeline and left
    untouched afterwards.
    """

    api_addr: str = "localhost:9980"
    rpc_addr: str = ":9981"
    host_addr: str = ":9982"
    modules: str = DEFAULT_MODULES
    authenticate_api: bool = True
    allow_api_bind: bool = False
    api_password: str = field(default="", repr=False)
    data_dir: Path = field(default_factory=lambda: Path.home() / ".turtledex")

    @classmethod
    def from_env(cls) -> Config:
        load_dotenv()
        defaults = cls()
        data_dir = os.environ.get("TURTLEDEX_DATA_DIR", "")
        return cls(
            api_addr=os.environ.get("TURTLEDEX_API_ADDR", defaults.api_addr),
            rpc_addr=os.environ.get("TURTLEDEX_RPC_ADDR", defaults.rpc_addr),
            host_addr=os.environ.get("TURTLEDEX_HOST_ADDR", defaults.host_addr),
            modules=os.environ.get("TURTLEDEX_MODULES", defaults.modules),
            authenticate_api=_env_bool(
                "TURTLEDEX_AUTHENTICATE_API", defaults.authenticate_api,
            ),
            allow_api_bind=_env_bool(
                "TURTLEDEX_DISABLE_API_SECURITY", defaults.allow_api_bind,
            ),
            data_dir=(
                Path(data_dir).expanduser().resolve()
                if data_dir else defaults.data_dir
            ),
        )
