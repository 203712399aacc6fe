from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

import cli.doctor as doctor_module
import cli.main as cli_main
from core.domain.errors import ConfigurationMissingError
from core.domain.models import FileSource, PinResult

runner = CliRunner()


def _fake_pin(calls: list):
    async def fake_pin_to_ipfs(value, settings=None, *, name=None, transport=None):
        calls.append((value, name))
        return PinResult(
            cid="QmCli",
            gateway_url="https://gateway.pinata.cloud/ipfs/QmCli",
            filename="hello.txt",
            pin_size=5,
        )

    return fake_pin_to_ipfs


def test_url_command() -> None:
    result = runner.invoke(cli_main.app, ["url", "QmTestHash"])

    assert result.exit_code == 0
    assert result.output.strip() == "https://gateway.pinata.cloud/ipfs/QmTestHash"


def test_upload_local_file_as_json(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    calls: list = []
    monkeypatch.setattr(cli_main, "pin_to_ipfs", _fake_pin(calls))
    path = tmp_path / "hello.txt"
    path.write_bytes(b"hello")
    output = tmp_path / "out.json"

    result = runner.invoke(
        cli_main.app, ["upload", str(path), "--json", "--name", "greeting", "--output", str(output)]
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["cid"] == "QmCli"
    assert json.loads(output.read_text(encoding="utf-8"))["pin_size"] == 5
    (value, name), = calls
    assert isinstance(value, FileSource)
    assert value.content == b"hello"
    assert name == "greeting"


def test_upload_passes_urls_through(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list = []
    monkeypatch.setattr(cli_main, "pin_to_ipfs", _fake_pin(calls))

    result = runner.invoke(cli_main.app, ["upload", "https://example.com/image.jpg"])

    assert result.exit_code == 0, result.output
    assert "QmCli" in result.output
    assert calls == [("https://example.com/image.jpg", None)]


def test_upload_error_exits_with_code_1(monkeypatch: pytest.MonkeyPatch) -> None:
    async def failing_pin(value, settings=None, *, name=None, transport=None):
        raise ConfigurationMissingError()

    monkeypatch.setattr(cli_main, "pin_to_ipfs", failing_pin)

    result = runner.invoke(cli_main.app, ["upload", "data:,x"])

    assert result.exit_code == 1
    assert "IPFS upload configuration missing." in result.output


def test_upload_rejects_unknown_source(tmp_path: Path) -> None:
    result = runner.invoke(cli_main.app, ["upload", str(tmp_path / "missing.bin")])

    assert result.exit_code == 2


def test_doctor_offline_without_token_fails() -> None:
    result = runner.invoke(cli_main.app, ["doctor", "run", "--offline"])

    assert result.exit_code == 1
    assert "MISSING" in result.output


def test_doctor_offline_with_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VITE_PINATA_JWT", "TEST_JWT")

    result = runner.invoke(cli_main.app, ["doctor", "run", "--offline"])

    assert result.exit_code == 0, result.output
    assert "MISSING" not in result.output


def test_doctor_setup_writes_user_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    saved: dict = {}

    def fake_write(values):
        saved.update(values)
        return tmp_path / ".env"

    monkeypatch.setattr(doctor_module, "write_user_env_vars", fake_write)

    result = runner.invoke(cli_main.app, ["doctor", "setup"], input="my-jwt\n")

    assert result.exit_code == 0, result.output
    assert saved == {"PINATA_JWT": "my-jwt"}


def test_upload_reports_unreadable_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "locked.bin"
    path.write_bytes(b"secret")

    def deny(_path):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(cli_main, "file_source_from_path", deny)

    result = runner.invoke(cli_main.app, ["upload", str(path)])

    assert result.exit_code == 2
    assert "Permission denied" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
