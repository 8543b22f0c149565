from __future__ import annotations

from pathlib import Path

import pytest

from turtledexd import main as main_module
from turtledexd.config import Config
from turtledexd.core.errors import (
    InsecureConfigurationError,
    InvalidModuleError,
    SecretStoreError,
)
from turtledexd.startup import prepare_config
from turtledexd.storage.password_store import APIPasswordStore


class TestPrepareConfig:
    def test_default_config(self, data_dir: Path):
        config = prepare_config(Config(data_dir=data_dir))
        assert config.modules == "gctwrh"
        assert config.api_password
        assert APIPasswordStore(data_dir).get() == config.api_password

    def test_normalizes_before_checking(self, data_dir: Path):
        config = prepare_config(
            Config(
                api_addr="127.0.0.1:9980", rpc_addr="9981", host_addr="9982",
                modules="CG", authenticate_api=False, data_dir=data_dir,
            )
        )
        assert config.rpc_addr == ":9981"
        assert config.host_addr == ":9982"
        assert config.modules == "cg"
        assert config.api_password == ""

    def test_explicit_store(self, data_dir: Path, tmp_path: Path):
        store = APIPasswordStore(tmp_path / "elsewhere")
        config = prepare_config(Config(data_dir=data_dir), store)
        assert store.get() == config.api_password
        assert APIPasswordStore(data_dir).get() is None

    def test_invalid_module_stops_before_password(self, data_dir: Path):
        with pytest.raises(InvalidModuleError):
            prepare_config(Config(modules="cz", data_dir=data_dir))
        assert APIPasswordStore(data_dir).get() is None

    def test_bare_port_api_rejected(self, data_dir: Path):
        with pytest.raises(InsecureConfigurationError):
            prepare_config(Config(api_addr="9980", data_dir=data_dir))

    def test_public_unauthenticated_rejected(self, data_dir: Path):
        with pytest.raises(InsecureConfigurationError):
            prepare_config(
                Config(
                    api_addr="example.com:9980", allow_api_bind=True,
                    authenticate_api=False, data_dir=data_dir,
                )
            )

    def test_public_authenticated_accepted(self, data_dir: Path):
        config = prepare_config(
            Config(api_addr="example.com:9980", allow_api_bind=True, data_dir=data_dir)
        )
        assert config.api_password

    def test_store_failure(self, tmp_path: Path):
        not_a_dir = tmp_path / "file"
        not_a_dir.write_text("")
        with pytest.raises(SecretStoreError):
            prepare_config(Config(data_dir=not_a_dir))


class TestMain:
    def test_success(self, monkeypatch: pytest.MonkeyPatch, data_dir: Path):
        monkeypatch.setenv("TURTLEDEX_DATA_DIR", str(data_dir))
        assert main_module.main() == 0
        assert (data_dir / "apipassword").exists()

    def test_invalid_module_exits_nonzero(
        self, monkeypatch: pytest.MonkeyPatch, data_dir: Path, caplog,
    ):
        monkeypatch.setenv("TURTLEDEX_DATA_DIR", str(data_dir))
        monkeypatch.setenv("TURTLEDEX_MODULES", "gcz")
        assert main_module.main() == 1
        assert "InvalidModuleError" in caplog.text
        assert "gateway" in caplog.text

    def test_insecure_exits_nonzero(self, monkeypatch: pytest.MonkeyPatch, data_dir: Path):
        monkeypatch.setenv("TURTLEDEX_DATA_DIR", str(data_dir))
        monkeypatch.setenv("TURTLEDEX_API_ADDR", "example.com:9980")
        assert main_module.main() == 1

    def test_bad_env_exits_nonzero(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TURTLEDEX_DISABLE_API_SECURITY", "sure")
        assert main_module.main() == 1

    def test_run_exits_with_status(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(main_module, "_setup_logging", lambda: None)
        monkeypatch.setattr(main_module, "main", lambda: 1)
        with pytest.raises(SystemExit) as exc_info:
            main_module.run()
        assert exc_info.value.code == 1

    def test_unreadable_password_exits_nonzero(
        self, monkeypatch: pytest.MonkeyPatch, data_dir: Path, caplog,
    ):
        (data_dir / "apipassword").write_bytes(b"\xff\xfe")
        monkeypatch.setenv("TURTLEDEX_DATA_DIR", str(data_dir))
        assert main_module.main() == 1
        assert "SecretStoreError" in caplog.text
