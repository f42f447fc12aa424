"""Tailscale CLI adapters (mesh overlay status and Serve status).

Detection only needs two read-only commands:
- `tailscale status --json` -> `Self.DNSName`
- `tailscale serve status`  -> free-form text, parsed by the core
"""

from __future__ import annotations

import json
from typing import Any

from adapters.process import run_tool

TAILSCALE_BINARY = "tailscale"


def extract_dns_name(payload: Any) -> str | None:
    """Pull `Self.DNSName` out of a decoded `tailscale status --json` payload.

    A node whose backend is not running (stopped, logged out) has no usable
    hostname even if the JSON still lists one.
    """

    if not isinstance(payload, dict):
        return None
    state = payload.get("BackendState")
    if state is not None and state != "Running":
        return None
    me = payload.get("Self")
    if not isinstance(me, dict):
        return None
    name = me.get("DNSName")
    return name if isinstance(name, str) and name else None


class TailscaleStatus:
    def __init__(self, timeout: float = 5.0, binary: str = TAILSCALE_BINARY) -> None:
        self._timeout = timeout
        self._binary = binary

    def dns_name(self) -> str | None:
        output = run_tool([self._binary, "status", "--json"], timeout=self._timeout)
        if not output:
            return None
        try:
            payload = json.loads(output)
        except json.JSONDecodeError:
            return None
        return extract_dns_name(payload)


class TailscaleServeStatus:
    def __init__(self, timeout: float = 3.0, binary: str = TAILSCALE_BINARY) -> None:
        self._timeout = timeout
        self._binary = binary

    def serve_status(self) -> str | None:
        return run_tool([self._binary, "serve", "status"], timeout=self._timeout)
