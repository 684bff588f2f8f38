"""Terminal update prompt.

The presentation side of neoversion: it consumes a `VersionStatus` and only
calls back into the library to open the store page.
"""

from __future__ import annotations

from typing import Callable

from rich.console import Console
from rich.prompt import Prompt

from neoversion.adapters.store_launcher import UrlOpener, launch_store_url
from neoversion.cli.ui_components import UpdateDialogText, build_update_panel
from neoversion.core.domain.models import VersionStatus
from neoversion.core.domain.platform import Platform
from neoversion.core.services.resolver import VersionStatusResolver


def show_update_prompt(
    console: Console,
    status: VersionStatus,
    *,
    title: str = "Update available",
    dialog_text: UpdateDialogText | None = None,
    update_button_text: str = "Update",
    dismissable: bool = True,
    dismiss_button_text: str = "Dismiss",
    on_dismissed: Callable[[], None] | None = None,
    opener: UrlOpener | None = None,
) -> bool:
    """Render the prompt and act on the user's choice.

    * `dismissable` adds the dismiss choice; without it the only answer is
      `update_button_text`.
    * `on_dismissed` runs when the user dismisses.

    Returns True when the store page was opened. `StoreLaunchError`
    propagates to the caller.
    """

    console.print(
        build_update_panel(status, title=title, dialog_text=dialog_text, dismissable=dismissable)
    )

    choices = [update_button_text]
    if dismissable:
        choices.append(dismiss_button_text)

    answer = Prompt.ask(
        "Choose",
        choices=choices,
        default=update_button_text,
        console=console,
    )
    if answer == update_button_text:
        launch_store_url(status.app_store_url, opener=opener)
        return True

    if on_dismissed is not None:
        on_dismissed()
    return False


async def show_alert_if_necessary(
    console: Console,
    resolver: VersionStatusResolver,
    *,
    platform: Platform | str | None,
    local_version: str | None,
    package_id: str | None = None,
    **prompt_options,
) -> VersionStatus:
    """Resolve the status and prompt only when an update is needed."""

    status = await resolver.resolve(platform, local_version, package_id)
    if status.needs_update:
        show_update_prompt(console, status, **prompt_options)
    return status
