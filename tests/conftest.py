from __future__ import annotations

import pytest

from neoversion.core.config import NeoVersionSettings
from neoversion.core.domain.models import LookupResponse
from neoversion.core.errors import NormalizationWarning


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for name in (
        "NEOVERSION_API_URL",
        "NEOVERSION_HTTP_TIMEOUT_SECONDS",
        "NEOVERSION_USER_AGENT",
        "NEOVERSION_ANDROID_APP_ID",
        "NEOVERSION_IOS_APP_ID",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    return NeoVersionSettings(_env_file=None, api_url="https://lookup.test/api")


class FakeLookup:
    """In-memory lookup client recording every call."""

    def __init__(self, response: LookupResponse | None = None, error: Exception | None = None):
        self.response = response or LookupResponse()
        self.error = error
        self.calls = []

    async def get_app_version(self, platform, app_id):
        self.calls.append((platform, app_id))
        if self.error is not None:
            raise self.error
        return self.response


class CollectingReporter:
    def __init__(self):
        self.warnings: list[NormalizationWarning] = []

    def report(self, warning):
        self.warnings.append(warning)


@pytest.fixture
def reporter():
    return CollectingReporter()


def lookup_payload(appstore="1.5.0", playstore="1.5.0", appstore_url=None, playstore_url=None):
    meta = {}
    if appstore_url is not None:
        meta["appstoreUrl"] = appstore_url
    if playstore_url is not None:
        meta["playstoreUrl"] = playstore_url
    return {"appstore": appstore, "playstore": playstore, "meta": meta}


@pytest.fixture
def fake_lookup():
    return FakeLookup


@pytest.fixture
def make_payload():
    return lookup_payload
