"""Capability contracts for the environment probes.

Why Protocol:
- Structural contract (duck typing) with no rigid inheritance.
- Adapters that shell out (lsof, tailscale) and in-memory fakes are
  interchangeable.

Design rules:
- Every probe is synchronous and time-boxed by its adapter.
- A probe that cannot answer returns None ("signal absent") instead of raising.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import InterfaceAddress


@runtime_checkable
class SocketTableQuery(Protocol):
    def is_listening(self, port: int) -> bool | None:
        """True if a process holds `port` in TCP LISTEN, None when inconclusive."""

        ...


@runtime_checkable
class HttpProbe(Protocol):
    def responds(self, url: str) -> bool:
        """True when any HTTP response (even an error status) comes back."""

        ...


@runtime_checkable
class MeshStatusQuery(Protocol):
    def dns_name(self) -> str | None:
        """Raw DNS name of this machine on the mesh overlay, if any."""

        ...


@runtime_checkable
class MeshServeStatusQuery(Protocol):
    def serve_status(self) -> str | None:
        """Text report of the overlay reverse proxy, if available."""

        ...


@runtime_checkable
class InterfaceAddressQuery(Protocol):
    def addresses(self) -> Sequence[InterfaceAddress]:
        """Addresses of every local interface, in the order the OS reports them."""

        ...


@runtime_checkable
class CodeRenderer(Protocol):
    def render(self, text: str) -> str:
        """Render `text` as a terminal-displayable scannable code."""

        ...
