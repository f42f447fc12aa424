"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation of the invariants (port range, IPv4 literal for local
  mode) right where the values are created.
- The resolver result is a tagged union, so callers match on `kind` instead
  of juggling None/bool sentinels.

Note:
- Every value here lives for a single run; nothing is persisted.
"""

from __future__ import annotations

import ipaddress
from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class ConnectionMode(str, Enum):
    """How the mobile client reaches the gateway."""

    MESH = "mesh"
    LOCAL = "local"

    def label(self) -> str:
        return "Tailscale" if self is ConnectionMode.MESH else "Local network"


class GatewayConfig(BaseModel):
    """What the pairing flow needs from openclaw.json."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(
        ...,
        min_length=1,
        description="Gateway auth token (gateway.auth.token).",
    )
    port: int = Field(
        ...,
        gt=0,
        le=65535,
        description="Gateway listening port (gateway.port).",
    )


class InterfaceAddress(BaseModel):
    """One address bound to a local network interface."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Interface name as reported by the OS.")
    address: str = Field(..., min_length=1)
    family: Literal["IPv4", "IPv6"]
    internal: bool = Field(
        default=False,
        description="True for loopback addresses.",
    )


class ConnectionCandidate(BaseModel):
    """The single (host, port, mode) triple chosen for this run."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["candidate"] = "candidate"
    host: str = Field(..., min_length=1)
    port: int = Field(..., gt=0, le=65535)
    mode: ConnectionMode

    @model_validator(mode="after")
    def _host_matches_mode(self) -> "ConnectionCandidate":
        if self.mode is ConnectionMode.LOCAL:
            try:
                ipaddress.IPv4Address(self.host)
            except ValueError as exc:
                raise ValueError(f"local host must be an IPv4 literal, got {self.host!r}") from exc
        elif self.host.endswith("."):
            raise ValueError("mesh host must not carry a trailing dot")
        return self


class ServeSetupRequired(BaseModel):
    """Mesh hostname found, but the gateway port is not served on 443.

    Not an error: the user has to run `setup_command` once and try again.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["serve_setup_required"] = "serve_setup_required"
    hostname: str
    port: int

    @property
    def setup_command(self) -> str:
        return f"tailscale serve --bg {self.port}"


Resolution = Union[ConnectionCandidate, ServeSetupRequired]


class PairingDescriptor(BaseModel):
    """Candidate plus token: exactly what gets encoded into the code."""

    model_config = ConfigDict(frozen=True)

    host: str
    port: int
    token: str
    mode: ConnectionMode

    @classmethod
    def from_candidate(cls, candidate: ConnectionCandidate, token: str) -> "PairingDescriptor":
        return cls(host=candidate.host, port=candidate.port, token=token, mode=candidate.mode)


class PairingReady(BaseModel):
    """Successful outcome of a pairing run."""

    kind: Literal["ready"] = "ready"
    descriptor: PairingDescriptor
    uri: str
    code: str = Field(..., description="Rendered terminal graphic for `uri`.")
