import io

import pytest
from rich.console import Console

from neoversion.cli import prompt
from neoversion.cli.prompt import show_update_prompt
from neoversion.core.domain.models import VersionStatus

STORE_URL = "https://play.google.com/store/apps/details?id=pkg"


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def status():
    return VersionStatus(local_version="1.0.0", app_store_version="1.1.0", app_store_url=STORE_URL)


@pytest.fixture
def answer(monkeypatch):
    """Replace the interactive prompt; records every call's choices."""

    calls = []

    def install(reply):
        def fake_ask(*args, **kwargs):
            calls.append(kwargs)
            return reply

        monkeypatch.setattr(prompt.Prompt, "ask", fake_ask)
        return calls

    return install


def _output(console):
    return console.file.getvalue()


def test_custom_dialog_text_is_rendered(console, status, answer):
    answer("Dismiss")

    def custom(local, store, dismissable):
        return f"Custom Text - local: {local}, appstore: {store}, dismissable: {dismissable}"

    show_update_prompt(console, status, title="Custom Title", dialog_text=custom)

    output = _output(console)
    assert "Custom Title" in output
    assert "Custom Text - local: 1.0.0, appstore: 1.1.0, dismissable: True" in output


def test_on_dismissed_called_on_dismiss(console, status, answer):
    answer("Dismiss")
    dismissed = []
    opened = []

    launched = show_update_prompt(
        console,
        status,
        on_dismissed=lambda: dismissed.append(True),
        opener=lambda url: opened.append(url) or True,
    )

    assert launched is False
    assert dismissed == [True]
    assert opened == []


def test_custom_button_labels_become_choices(console, status, answer):
    calls = answer("Actualizar")
    opened = []

    launched = show_update_prompt(
        console,
        status,
        update_button_text="Actualizar",
        dismiss_button_text="Ahora no",
        opener=lambda url: opened.append(url) or True,
    )

    assert launched is True
    assert calls[0]["choices"] == ["Actualizar", "Ahora no"]
    assert calls[0]["default"] == "Actualizar"
    assert opened == [STORE_URL]


def test_mandatory_prompt_offers_only_update(console, status, answer):
    calls = answer("Update")
    opened = []

    show_update_prompt(
        console,
        status,
        dismissable=False,
        opener=lambda url: opened.append(url) or True,
    )

    assert calls[0]["choices"] == ["Update"]
    assert "Please update to the latest version." in _output(console)
    assert "Would you like to update?" not in _output(console)
    assert opened == [STORE_URL]


def test_dismissable_prompt_asks_to_update(console, status, answer):
    answer("Dismiss")

    show_update_prompt(console, status)

    assert "Would you like to update?" in _output(console)
