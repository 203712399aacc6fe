"""pinata-pin CLI.

Commands:
- `upload`: pin a local file, a data URL or a remote URL.
- `url`: print the gateway URL of a CID.
- `doctor`: configuration checks and setup.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_exporter import export_pin_result_json, render_pin_result_json
from cli import doctor
from cli.ui_components import build_error_panel, build_pin_table
from core.config import AppSettings
from core.domain.errors import IpfsUploadError
from core.domain.models import FileSource, is_data_url, is_remote_url
from core.domain.sources import file_source_from_path
from core.services.ipfs import get_ipfs_url, pin_to_ipfs

app = typer.Typer(no_args_is_help=True, help="Upload content to IPFS through Pinata.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _parse_source(raw: str) -> object:
    if is_data_url(raw) or is_remote_url(raw):
        return raw
    if raw == "-":
        return FileSource(content=sys.stdin.buffer.read(), filename="stdin")

    path = Path(raw).expanduser()
    if not path.is_file():
        raise typer.BadParameter(f"not a file, data URL or http(s) URL: {raw}", param_hint="SOURCE")
    try:
        return file_source_from_path(path)
    except OSError as exc:
        raise typer.BadParameter(f"{exc.strerror or exc}: {raw}", param_hint="SOURCE") from exc


@app.command()
def upload(
    source: str = typer.Argument(..., help="Local file path, '-' for stdin, a data: URL or an http(s) URL."),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Name stored in Pinata metadata."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the result JSON here."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Upload SOURCE and print its CID."""

    _configure_logging(verbose)
    value = _parse_source(source)

    try:
        result = asyncio.run(pin_to_ipfs(value, AppSettings(), name=name))
    except IpfsUploadError as exc:
        _err_console.print(build_error_panel(str(exc)))
        raise typer.Exit(code=1) from exc

    if output is not None:
        export_pin_result_json(result=result, output_path=output)

    if as_json:
        typer.echo(render_pin_result_json(result), nl=False)
    else:
        _console.print(build_pin_table(result))


@app.command()
def url(cid: str = typer.Argument(..., help="Content identifier.")) -> None:
    """Print the gateway URL for CID."""

    typer.echo(get_ipfs_url(cid, AppSettings()))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
