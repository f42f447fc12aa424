"""Gateway config loading (openclaw.json).

Expected shape: `{ "gateway": { "auth": { "token": str }, "port"?: int } }`.
Unknown keys are ignored; the file belongs to the gateway product.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.config import DEFAULT_GATEWAY_PORT, AppSettings, resolve_config_path
from core.domain.errors import ConfigNotFound, ConfigParseError, TokenMissing
from core.domain.models import GatewayConfig


def _section(data: Any, key: str) -> dict[str, Any]:
    value = data.get(key) if isinstance(data, dict) else None
    return value if isinstance(value, dict) else {}


def _read_port(raw: Any, path: Path) -> int:
    # Falsy values (missing, null, 0) fall back to the well-known port.
    if not raw:
        return DEFAULT_GATEWAY_PORT
    if isinstance(raw, bool) or not isinstance(raw, int) or not 0 < raw <= 65535:
        raise ConfigParseError(path, f"gateway.port must be a positive integer, got {raw!r}")
    return raw


def parse_config(text: str, path: Path) -> GatewayConfig:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(path, str(exc)) from exc
    if not isinstance(data, dict):
        raise ConfigParseError(path, "top-level value must be a JSON object")

    gateway = _section(data, "gateway")
    token = _section(gateway, "auth").get("token")
    if not isinstance(token, str) or not token:
        raise TokenMissing(path)

    return GatewayConfig(token=token, port=_read_port(gateway.get("port"), path))


def load_config(settings: AppSettings | None = None) -> GatewayConfig:
    """Locate and parse the gateway config.

    Raises:
    - ConfigNotFound: nothing at the resolved path.
    - ConfigParseError: unreadable file, invalid JSON or invalid port.
    - TokenMissing: valid JSON without gateway.auth.token.
    """

    settings = settings or AppSettings()
    path = resolve_config_path(settings)
    if not path.exists():
        raise ConfigNotFound(path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigParseError(path, str(exc)) from exc
    return parse_config(text, path)
