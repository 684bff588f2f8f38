import pytest
from pydantic import ValidationError

from neoversion.core.config import (
    DEFAULT_API_URL,
    NeoVersionSettings,
    get_user_config_dir,
    write_user_env_vars,
)


def test_defaults():
    settings = NeoVersionSettings(_env_file=None)
    assert settings.api_url == DEFAULT_API_URL
    assert settings.http_timeout_seconds > 0
    assert settings.android_app_id is None
    assert settings.ios_app_id is None


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("NEOVERSION_API_URL", "https://alt.test")
    monkeypatch.setenv("NEOVERSION_ANDROID_APP_ID", "com.example")
    monkeypatch.setenv("NEOVERSION_HTTP_TIMEOUT_SECONDS", "2.5")
    settings = NeoVersionSettings(_env_file=None)
    assert settings.api_url == "https://alt.test"
    assert settings.android_app_id == "com.example"
    assert settings.http_timeout_seconds == 2.5


def test_project_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("NEOVERSION_IOS_APP_ID=com.example.ios\n", encoding="utf-8")
    settings = NeoVersionSettings(_env_file=env_file)
    assert settings.ios_app_id == "com.example.ios"


def test_invalid_timeout_rejected():
    with pytest.raises(ValidationError):
        NeoVersionSettings(_env_file=None, http_timeout_seconds=0)


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "neoversion"


def test_write_user_env_vars_merges(tmp_path):
    env_path = tmp_path / "cfg" / ".env"
    write_user_env_vars({"NEOVERSION_API_URL": "https://a.test", "NEOVERSION_IOS_APP_ID": "ios"}, env_path)
    write_user_env_vars({"NEOVERSION_API_URL": "https://b.test", "NEOVERSION_IOS_APP_ID": None}, env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert "NEOVERSION_API_URL=https://b.test" in lines
    assert "NEOVERSION_IOS_APP_ID=ios" in lines


def test_write_user_env_vars_reads_quoted_entries(tmp_path):
    env_path = tmp_path / ".env"
    env_path.write_text('# edited by hand\nNEOVERSION_IOS_APP_ID="com.example.ios"\n', encoding="utf-8")

    write_user_env_vars({"NEOVERSION_ANDROID_APP_ID": "com.example.android"}, env_path)

    settings = NeoVersionSettings(_env_file=env_path)
    assert settings.ios_app_id == "com.example.ios"
    assert settings.android_app_id == "com.example.android"
