"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking
  them into the CLI.
- Lets adapters (HTTP) and the resolver read defaults consistently.

Every value can still be overridden per resolver through constructor
arguments; settings only provide the defaults.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "neoversion"
DEFAULT_API_URL = "https://peekanapp.com/api"


def get_user_config_dir() -> Path:
    """Per-user configuration directory, as Click/Typer resolve it per OS."""

    return Path(typer.get_app_dir(APP_NAME))


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Merge `values` into the user's .env (``None`` keeps the stored entry)."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    merged: dict[str, str] = {}
    if env_path.exists():
        merged = {k: v for k, v in dotenv_values(env_path).items() if v is not None}
    merged.update({k: v for k, v in values.items() if v is not None})

    lines = ["# neoversion user config (.env)"]
    lines.extend(f"{key}={merged[key]}" for key in sorted(merged))
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class NeoVersionSettings(BaseSettings):
    """Library-wide defaults.

    Why pydantic-settings:
    - Typed + validated at the edge (env vars, .env files).
    - One configuration contract for the resolver, the HTTP adapter and the CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="NEOVERSION_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user-level one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
        frozen=True,
    )

    api_url: str = Field(
        default=DEFAULT_API_URL,
        min_length=8,
        description="Base URL of the Peek-An-App lookup service.",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout per lookup request (seconds).",
    )
    user_agent: str = Field(
        default="neoversion/0.1",
        min_length=1,
        description="User-Agent sent to the lookup service.",
    )
    android_app_id: str | None = Field(
        default=None,
        description="Default Google Play application id.",
    )
    ios_app_id: str | None = Field(
        default=None,
        description="Default App Store bundle id.",
    )
