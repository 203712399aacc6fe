"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Lets adapters (HTTP/Pinata) read config the same way, and lets tests inject
  an explicit `AppSettings` instead of touching process-wide state.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user config directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pinata-pin"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pinata-pin"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pinata-pin"
    return Path.home() / ".config" / "pinata-pin"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# pinata-pin user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Application settings.

    The Pinata token keeps the name the web frontend uses (`VITE_PINATA_JWT`)
    and also accepts the plain `PINATA_JWT`. Everything else is prefixed.
    """

    model_config = SettingsConfigDict(
        env_prefix="PINATA_PIN_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        env_file_encoding="utf-8",
    )

    pinata_jwt: str | None = Field(
        default=None,
        validation_alias=AliasChoices("VITE_PINATA_JWT", "PINATA_JWT"),
        description="Pinata API JWT, sent as a bearer token.",
    )
    pin_file_url: str = Field(
        default="https://api.pinata.cloud/pinning/pinFileToIPFS",
        min_length=8,
        description="Pinata endpoint for multipart file pinning.",
    )
    gateway_base_url: str = Field(
        default="https://gateway.pinata.cloud/ipfs/",
        min_length=8,
        description="Prefix that a CID is appended to when building gateway URLs.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds. Unset keeps the httpx default.",
    )
    user_agent: str = Field(
        default="pinata-pin/0.1",
        min_length=1,
        description="User-Agent for outbound requests.",
    )
    cid_version: int | None = Field(
        default=None,
        ge=0,
        le=1,
        description="CID version requested from Pinata (pinataOptions.cidVersion).",
    )

    def __init__(self, **values: Any) -> None:
        # Project first (dev), then the user's global config, resolved per instance.
        values.setdefault("_env_file", (".env", str(get_user_env_file())))
        super().__init__(**values)

    @property
    def has_token(self) -> bool:
        return bool(self.pinata_jwt and self.pinata_jwt.strip())
