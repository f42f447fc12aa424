"""Connection method resolution.

Picks exactly one way for the phone to reach the gateway. Strategies run in
strict preference order and the first one that produces a result wins:

1. Mesh overlay (Tailscale). A mesh hostname always dominates local
   addresses. If the overlay's reverse proxy does not serve the gateway port
   on 443, the result is `ServeSetupRequired`, never a silent fallback.
2. First non-internal IPv4 interface address, in OS enumeration order.

When no strategy produces anything, `NoReachableAddress` is raised.
"""

from __future__ import annotations

import re
from typing import Callable

from core.domain.errors import NoReachableAddress
from core.domain.models import (
    ConnectionCandidate,
    ConnectionMode,
    Resolution,
    ServeSetupRequired,
)
from core.interfaces.probes import (
    InterfaceAddressQuery,
    MeshServeStatusQuery,
    MeshStatusQuery,
)

HTTPS_PORT = 443


def normalize_dns_name(name: str | None) -> str | None:
    """Strip whitespace and trailing root dots (`host.ts.net.` -> `host.ts.net`)."""

    if not name:
        return None
    return name.strip().rstrip(".") or None


def serve_exposes_port(status: str | None, port: int) -> bool:
    """Whether a serve status report proxies `port` over HTTPS.

    Serve on 443 shows up as `https://<host>` (no explicit port) or `:443`.
    The gateway port must appear as a whole token: 80 does not match 8080.
    """

    if not status:
        return False
    serves_https = "https://" in status or ":443" in status
    return serves_https and re.search(rf"\b{port}\b", status) is not None


class NetworkResolver:
    def __init__(
        self,
        mesh_status: MeshStatusQuery,
        mesh_serve: MeshServeStatusQuery,
        interfaces: InterfaceAddressQuery,
        *,
        debug: Callable[[str], None] | None = None,
    ) -> None:
        self._mesh_status = mesh_status
        self._mesh_serve = mesh_serve
        self._interfaces = interfaces
        self._debug = debug or (lambda _msg: None)

    def mesh_hostname(self) -> str | None:
        try:
            raw = self._mesh_status.dns_name()
        except Exception as exc:
            self._debug(f"mesh status query failed: {exc}")
            return None
        return normalize_dns_name(raw)

    def serve_status(self) -> str | None:
        try:
            return self._mesh_serve.serve_status()
        except Exception as exc:
            self._debug(f"mesh serve status query failed: {exc}")
            return None

    def local_ipv4(self) -> str | None:
        try:
            addresses = list(self._interfaces.addresses())
        except Exception as exc:
            self._debug(f"interface enumeration failed: {exc}")
            return None
        for entry in addresses:
            if entry.family == "IPv4" and not entry.internal:
                return entry.address
        return None

    def _via_mesh(self, port: int) -> Resolution | None:
        hostname = self.mesh_hostname()
        self._debug(f"mesh hostname: {hostname}")
        if hostname is None:
            return None

        proxied = serve_exposes_port(self.serve_status(), port)
        self._debug(f"serve proxies port {port} on {HTTPS_PORT}: {proxied}")
        if not proxied:
            return ServeSetupRequired(hostname=hostname, port=port)
        return ConnectionCandidate(host=hostname, port=HTTPS_PORT, mode=ConnectionMode.MESH)

    def _via_local(self, port: int) -> Resolution | None:
        address = self.local_ipv4()
        self._debug(f"local IPv4: {address}")
        if address is None:
            return None
        return ConnectionCandidate(host=address, port=port, mode=ConnectionMode.LOCAL)

    def resolve(self, port: int) -> Resolution:
        strategies: tuple[Callable[[int], Resolution | None], ...] = (
            self._via_mesh,
            self._via_local,
        )
        for strategy in strategies:
            result = strategy(port)
            if result is not None:
                return result
        raise NoReachableAddress()
