from __future__ import annotations

from pathlib import Path

import pytest

import core.config
from core.config import AppSettings
from tests.helpers import TEST_JWT


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in (
        "VITE_PINATA_JWT",
        "PINATA_JWT",
        "PINATA_PIN_GATEWAY_BASE_URL",
        "PINATA_PIN_CID_VERSION",
        "PINATA_PIN_HTTP_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(key, raising=False)
    user_config_dir = tmp_path / "user-config"
    monkeypatch.setattr(core.config, "get_user_config_dir", lambda: user_config_dir)
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(pinata_jwt=TEST_JWT, _env_file=None)


@pytest.fixture
def no_token_settings() -> AppSettings:
    return AppSettings(pinata_jwt=None, _env_file=None)
