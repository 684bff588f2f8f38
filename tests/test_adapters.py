import logging

import pytest

from neoversion.adapters import package_info
from neoversion.adapters.diagnostics import LoggingReporter
from neoversion.adapters.package_info import PackageInfo, read_package_info
from neoversion.adapters.store_launcher import can_launch_url, launch_store_url
from neoversion.core.errors import NormalizationWarning, StoreLaunchError
from neoversion.core.services.versioning import normalize_version


def test_logging_reporter_emits_warning(caplog):
    reporter = LoggingReporter()
    with caplog.at_level(logging.WARNING, logger="neoversion.normalization"):
        assert normalize_version(None, reporter) == "0.0.0"
    assert "raw version is null" in caplog.text


def test_logging_reporter_uses_given_logger(caplog):
    reporter = LoggingReporter(logging.getLogger("custom.sink"))
    with caplog.at_level(logging.WARNING, logger="custom.sink"):
        reporter.report(NormalizationWarning("x", "raw version x is invalid"))
    assert [r.name for r in caplog.records] == ["custom.sink"]


def test_read_package_info_installed(monkeypatch):
    monkeypatch.setattr(package_info.metadata, "version", lambda name: "3.2.1")
    assert read_package_info("some-app") == PackageInfo("some-app", "3.2.1")


def test_read_package_info_missing(monkeypatch):
    def missing(name):
        raise package_info.metadata.PackageNotFoundError(name)

    monkeypatch.setattr(package_info.metadata, "version", missing)
    info = read_package_info("not-installed")
    assert info.package_name == "not-installed"
    assert info.version is None


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://play.google.com/store/apps/details?id=x", True),
        ("itms-apps://apps.apple.com/app/id1", True),
        ("market://details?id=x", True),
        ("unknown", False),
        ("", False),
        ("file:///etc/passwd", False),
    ],
)
def test_can_launch_url(url, expected):
    assert can_launch_url(url) is expected


def test_launch_store_url_calls_opener():
    opened = []
    launch_store_url("https://play.google.com/x", opener=lambda url: opened.append(url) or True)
    assert opened == ["https://play.google.com/x"]


def test_launch_store_url_unknown_sentinel():
    with pytest.raises(StoreLaunchError) as info:
        launch_store_url("unknown", opener=lambda url: True)
    assert info.value.url == "unknown"


def test_launch_store_url_opener_failure():
    with pytest.raises(StoreLaunchError, match="Could not launch"):
        launch_store_url("https://apps.apple.com/x", opener=lambda url: False)
