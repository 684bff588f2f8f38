"""neoversion command line.

Commands:
- `check`: resolve and print the version status (table or JSON).
- `alert`: resolve and prompt to update when the store is ahead.
- `doctor`: diagnostics and configuration.
"""

from __future__ import annotations

import asyncio
import json
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from neoversion.cli import doctor
from neoversion.cli.prompt import show_alert_if_necessary
from neoversion.cli.ui_components import build_status_table
from neoversion.core.errors import NeoVersionError
from neoversion.core.services.resolver import VersionStatusResolver

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Check installed apps against their store versions.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

_PLATFORM_HELP = "android or ios (defaults to the runtime platform)."


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_resolver(
    android_app_id: str | None,
    ios_app_id: str | None,
    api_url: str | None,
) -> VersionStatusResolver:
    return VersionStatusResolver(
        android_app_id=android_app_id,
        ios_app_id=ios_app_id,
        api_url=api_url,
    )


def _fail(exc: Exception) -> typer.Exit:
    _console.print(f"[red]Error:[/red] {exc}")
    return typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    configure_logging(verbose)


@app.command()
def check(
    local_version: str = typer.Option(..., "--local-version", "-l", help="Installed version (raw)."),
    package_id: str | None = typer.Option(None, "--package-id", "-p", help="Local package identifier."),
    platform: str | None = typer.Option(None, "--platform", help=_PLATFORM_HELP),
    android_app_id: str | None = typer.Option(None, "--android-app-id"),
    ios_app_id: str | None = typer.Option(None, "--ios-app-id"),
    api_url: str | None = typer.Option(None, "--api-url", help="Alternate lookup service URL."),
    as_json: bool = typer.Option(False, "--json", help="Print the status as JSON."),
) -> None:
    """Print the version status of an app."""

    resolver = _build_resolver(android_app_id, ios_app_id, api_url)
    try:
        status = asyncio.run(resolver.resolve(platform, local_version, package_id))
        if status.needs_update:
            logger.info("Update available: %s -> %s", status.local_version, status.app_store_version)
    except (NeoVersionError, ValueError) as exc:
        raise _fail(exc) from exc

    if as_json:
        typer.echo(json.dumps(status.model_dump(mode="json"), indent=2, sort_keys=True))
        return
    _console.print(build_status_table(status))


@app.command()
def alert(
    local_version: str = typer.Option(..., "--local-version", "-l", help="Installed version (raw)."),
    package_id: str | None = typer.Option(None, "--package-id", "-p", help="Local package identifier."),
    platform: str | None = typer.Option(None, "--platform", help=_PLATFORM_HELP),
    android_app_id: str | None = typer.Option(None, "--android-app-id"),
    ios_app_id: str | None = typer.Option(None, "--ios-app-id"),
    api_url: str | None = typer.Option(None, "--api-url", help="Alternate lookup service URL."),
    title: str = typer.Option("Update available", "--title"),
    dismissable: bool = typer.Option(True, "--dismissable/--mandatory", help="Allow dismissing the prompt."),
) -> None:
    """Prompt to update when the store has a newer version."""

    resolver = _build_resolver(android_app_id, ios_app_id, api_url)
    try:
        status = asyncio.run(
            show_alert_if_necessary(
                _console,
                resolver,
                platform=platform,
                local_version=local_version,
                package_id=package_id,
                title=title,
                dismissable=dismissable,
            )
        )
    except (NeoVersionError, ValueError) as exc:
        raise _fail(exc) from exc

    if not status.needs_update:
        _console.print(f"[green]Up to date[/green] ({status.local_version})")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
