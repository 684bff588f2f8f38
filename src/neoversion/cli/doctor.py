"""Doctor commands: environment diagnostics and configuration."""

from __future__ import annotations

import asyncio
import sys

import typer
from rich.console import Console
from rich.table import Table

from neoversion.adapters.http_client import build_async_client
from neoversion.core.config import NeoVersionSettings, get_user_env_file, write_user_env_vars
from neoversion.core.domain.platform import Platform
from neoversion.core.errors import UnsupportedPlatformError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: NeoVersionSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


def _check_platform() -> tuple[bool, str]:
    try:
        platform = Platform.from_runtime()
    except UnsupportedPlatformError as exc:
        return False, f"{exc} (pass --platform explicitly)"
    return True, platform.store_name


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = NeoVersionSettings()

    table = Table(title="neoversion doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Lookup API", "OK", settings.api_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    for label, value in (
        ("Android app id", settings.android_app_id),
        ("iOS app id", settings.ios_app_id),
    ):
        if value:
            table.add_row(label, "OK", value)
        else:
            table.add_row(label, "OPTIONAL", "Not set -> local package id is used")

    ok_platform, detail_platform = _check_platform()
    table.add_row("Runtime platform", "OK" if ok_platform else "UNSUPPORTED", detail_platform)

    ok_http, detail_http = asyncio.run(_check_http(settings.api_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)
    _console.print(f"[dim]Python {sys.version.split()[0]}, user config: {get_user_env_file()}[/dim]")


@app.command()
def configure() -> None:
    """Interactive setup (stores defaults in the user config .env)."""

    settings = NeoVersionSettings()

    api_url = typer.prompt("Lookup API URL", default=settings.api_url, show_default=True).strip()
    android_app_id = typer.prompt(
        "Android app id (empty to skip)",
        default=settings.android_app_id or "",
        show_default=False,
    ).strip()
    ios_app_id = typer.prompt(
        "iOS app id (empty to skip)",
        default=settings.ios_app_id or "",
        show_default=False,
    ).strip()

    if not api_url.startswith(("http://", "https://")):
        raise typer.BadParameter("API URL must start with http:// or https://")

    env_path = write_user_env_vars(
        {
            "NEOVERSION_API_URL": api_url,
            "NEOVERSION_ANDROID_APP_ID": android_app_id or None,
            "NEOVERSION_IOS_APP_ID": ios_app_id or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
