from __future__ import annotations

import os

import pytest
from pathlib import Path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Provide an isolated data directory for stores."""
    d = tmp_path / "data"
    d.mkdir()
    return d


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep TURTLEDEX_* variables and .env files out of tests."""
    for name in list(os.environ):
        if name.startswith("TURTLEDEX_"):
            monkeypatch.delenv(name)
    monkeypatch.setattr("turtledexd.config.load_dotenv", lambda: False)
