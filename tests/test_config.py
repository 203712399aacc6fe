from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

import core.config
from core.config import AppSettings, write_user_env_vars


def test_defaults() -> None:
    settings = AppSettings(_env_file=None)

    assert settings.pinata_jwt is None
    assert settings.has_token is False
    assert settings.pin_file_url == "https://api.pinata.cloud/pinning/pinFileToIPFS"
    assert settings.gateway_base_url == "https://gateway.pinata.cloud/ipfs/"
    assert settings.http_timeout_seconds is None
    assert settings.cid_version is None


@pytest.mark.parametrize("env_name", ["VITE_PINATA_JWT", "PINATA_JWT"])
def test_token_env_names(monkeypatch: pytest.MonkeyPatch, env_name: str) -> None:
    monkeypatch.setenv(env_name, "jwt-value")

    settings = AppSettings(_env_file=None)

    assert settings.pinata_jwt == "jwt-value"
    assert settings.has_token is True


def test_prefixed_fields(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PINATA_PIN_GATEWAY_BASE_URL", "https://gw.example/ipfs/")
    monkeypatch.setenv("PINATA_PIN_HTTP_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("PINATA_PIN_CID_VERSION", "1")

    settings = AppSettings(_env_file=None)

    assert settings.gateway_base_url == "https://gw.example/ipfs/"
    assert settings.http_timeout_seconds == 12.5
    assert settings.cid_version == 1


def test_dotenv_file_is_read(tmp_path: Path) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text("VITE_PINATA_JWT=from-file\n", encoding="utf-8")

    assert AppSettings(_env_file=env_file).pinata_jwt == "from-file"


def test_invalid_cid_version() -> None:
    with pytest.raises(ValidationError):
        AppSettings(cid_version=2, _env_file=None)


def test_write_user_env_vars_merges(tmp_path: Path) -> None:
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# comment\nEXISTING='kept'\nPINATA_JWT=old\n", encoding="utf-8")

    written = write_user_env_vars({"PINATA_JWT": "new", "SKIPPED": None}, env_path=env_path)

    assert written == env_path
    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert lines[1:] == ["EXISTING=kept", "PINATA_JWT=new"]


def test_user_env_file_is_read() -> None:
    env_path = write_user_env_vars({"PINATA_JWT": "from-user-config"})

    assert env_path == core.config.get_user_env_file()
    assert AppSettings().pinata_jwt == "from-user-config"


def test_project_env_file_is_read() -> None:
    Path(".env").write_text("VITE_PINATA_JWT=from-project\n", encoding="utf-8")

    assert AppSettings().pinata_jwt == "from-project"


def test_environment_wins_over_env_files(monkeypatch: pytest.MonkeyPatch) -> None:
    write_user_env_vars({"PINATA_JWT": "from-user-config"})
    monkeypatch.setenv("PINATA_JWT", "from-env")

    assert AppSettings().pinata_jwt == "from-env"
