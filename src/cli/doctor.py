"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

PINATA_AUTH_TEST_URL = "https://api.pinata.cloud/data/testAuthentication"


async def _check_auth(settings: AppSettings) -> tuple[bool, str]:
    headers: dict[str, str] = {}
    if settings.has_token:
        headers["Authorization"] = f"Bearer {(settings.pinata_jwt or '').strip()}"
    try:
        async with build_async_client(settings) as client:
            response = await client.get(PINATA_AUTH_TEST_URL, headers=headers)
    except httpx.HTTPError as exc:
        return False, str(exc) or type(exc).__name__
    return response.is_success, f"HTTP {response.status_code}"


@app.command()
def run(
    offline: bool = typer.Option(False, "--offline", help="Skip the Pinata connectivity probe."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="pinata-pin doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white", no_wrap=True)
    table.add_column("Details", style="dim")

    if settings.has_token:
        table.add_row("Pinata JWT", "OK", "Token configured")
    else:
        table.add_row("Pinata JWT", "MISSING", "Set VITE_PINATA_JWT or run `doctor setup`")
    table.add_row("Pin endpoint", "OK", settings.pin_file_url)
    table.add_row("Gateway", "OK", settings.gateway_base_url)
    table.add_row("User config", "OK" if get_user_env_file().exists() else "NONE", str(get_user_env_file()))

    ok_auth = True
    if not offline:
        ok_auth, detail = asyncio.run(_check_auth(settings))
        table.add_row("Pinata auth", "OK" if ok_auth else "FAIL", detail)

    _console.print(table)

    if not settings.has_token or not ok_auth:
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Store the Pinata JWT in the user config .env."""

    token = typer.prompt("Pinata JWT", hide_input=True, confirmation_prompt=False).strip()
    if not token:
        raise typer.BadParameter("the JWT cannot be empty")

    env_path = write_user_env_vars({"PINATA_JWT": token})
    _console.print(f"[green]Saved Pinata config to:[/green] {env_path}")
