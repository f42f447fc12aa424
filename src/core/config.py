"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI.
- Lets adapters (subprocess probes, HTTP) read their timeouts consistently.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_GATEWAY_PORT = 18789
PAIRING_SCHEME = "openclaw"
CONFIG_FILENAME = "openclaw.json"


def default_state_dir() -> Path:
    return Path.home() / ".openclaw"


class AppSettings(BaseSettings):
    """Central settings for the pairing tool.

    Both path overrides are optional; the probe timeouts are capped so that a
    misbehaving tool can never hang the run longer than the documented bounds.
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENCLAW_",
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    state_dir: Path | None = Field(
        default=None,
        description="OpenClaw state directory (defaults to ~/.openclaw).",
    )
    config_path: Path | None = Field(
        default=None,
        description="Explicit path to openclaw.json (overrides state_dir).",
    )

    socket_table_timeout_seconds: float = Field(
        default=2.0,
        gt=0,
        le=2.0,
        description="Timeout for the socket table query (seconds).",
    )
    http_probe_timeout_seconds: float = Field(
        default=2.0,
        gt=0,
        le=2.0,
        description="Timeout for the gateway HTTP liveness probe (seconds).",
    )
    mesh_status_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        le=5.0,
        description="Timeout for `tailscale status --json` (seconds).",
    )
    mesh_serve_timeout_seconds: float = Field(
        default=3.0,
        gt=0,
        le=3.0,
        description="Timeout for `tailscale serve status` (seconds).",
    )


def resolve_state_dir(settings: AppSettings) -> Path:
    return settings.state_dir or default_state_dir()


def resolve_config_path(settings: AppSettings) -> Path:
    """Path of the gateway config file.

    Order:
    1) OPENCLAW_CONFIG_PATH
    2) <OPENCLAW_STATE_DIR or ~/.openclaw>/openclaw.json
    """

    if settings.config_path is not None:
        return settings.config_path
    return resolve_state_dir(settings) / CONFIG_FILENAME
