"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets several commands reuse the same tables/panels.
"""

from __future__ import annotations

from typing import Callable

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from neoversion.core.domain.models import VersionStatus

# (local_version, app_store_version, dismissable) -> text. Handy for i18n.
UpdateDialogText = Callable[[str, str, bool], str]


def default_update_text(local_version: str, app_store_version: str, dismissable: bool) -> str:
    base = (
        f"A new version of the app is available for download ({app_store_version}). "
        f"Your version is {local_version}."
    )
    if dismissable:
        return base + " Would you like to update?"
    return base + " Please update to the latest version."


def build_update_panel(
    status: VersionStatus,
    *,
    title: str = "Update available",
    dialog_text: UpdateDialogText | None = None,
    dismissable: bool = True,
) -> Panel:
    """Panel asking the user to update."""

    render = dialog_text or default_update_text
    body = Text(render(status.local_version, status.app_store_version, dismissable))
    if status.app_store_url:
        body.append(f"\n\n{status.app_store_url}", style="dim")
    return Panel(body, title=Text(title, style="bold yellow"), border_style="yellow")


def build_status_table(status: VersionStatus) -> Table:
    table = Table(title="Version status")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Local version", status.local_version)
    table.add_row("Store version", status.app_store_version)
    table.add_row("Store URL", status.app_store_url)
    table.add_row(
        "Needs update",
        Text("yes", style="bold red") if status.needs_update else Text("no", style="green"),
    )
    return table
