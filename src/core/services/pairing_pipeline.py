"""Pairing orchestration.

Keeps the strictly linear flow out of the CLI:
config -> gateway probe -> network resolution -> URI encoding -> rendering.
Each step runs only if the previous one succeeded; terminal conditions are
raised as `PairingError` subclasses. Printing stays in the UI layer, which
subscribes through `PipelineHooks`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from adapters.http_client import HttpxProbe
from adapters.interfaces import PsutilInterfaces
from adapters.qr_renderer import TerminalQrRenderer
from adapters.socket_table import LsofSocketTable
from adapters.tailscale import TailscaleServeStatus, TailscaleStatus
from core.config import AppSettings
from core.domain.errors import GatewayNotRunning
from core.domain.models import (
    ConnectionCandidate,
    ConnectionMode,
    PairingDescriptor,
    PairingReady,
    ServeSetupRequired,
)
from core.interfaces.probes import (
    CodeRenderer,
    HttpProbe,
    InterfaceAddressQuery,
    MeshServeStatusQuery,
    MeshStatusQuery,
    SocketTableQuery,
)
from core.services.config_loader import load_config
from core.services.gateway_probe import GatewayProbe
from core.services.network_resolver import NetworkResolver
from core.services.pairing_encoder import encode_descriptor


@dataclass
class PairingDependencies:
    """Concrete capabilities used by a run (real adapters or test fakes)."""

    socket_table: SocketTableQuery
    http: HttpProbe
    mesh_status: MeshStatusQuery
    mesh_serve: MeshServeStatusQuery
    interfaces: InterfaceAddressQuery
    renderer: CodeRenderer


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress, diagnostics)."""

    step: Callable[[str], None] | None = None
    done: Callable[[str], None] | None = None
    debug: Callable[[str], None] | None = None


def default_dependencies(settings: AppSettings | None = None) -> PairingDependencies:
    settings = settings or AppSettings()
    return PairingDependencies(
        socket_table=LsofSocketTable(timeout=settings.socket_table_timeout_seconds),
        http=HttpxProbe(timeout=settings.http_probe_timeout_seconds),
        mesh_status=TailscaleStatus(timeout=settings.mesh_status_timeout_seconds),
        mesh_serve=TailscaleServeStatus(timeout=settings.mesh_serve_timeout_seconds),
        interfaces=PsutilInterfaces(),
        renderer=TerminalQrRenderer(),
    )


def _emit(callback: Callable[[str], None] | None, message: str) -> None:
    if callback is not None:
        callback(message)


def build_gateway_probe(deps: PairingDependencies, hooks: PipelineHooks | None = None) -> GatewayProbe:
    hooks = hooks or PipelineHooks()
    return GatewayProbe(deps.socket_table, deps.http, debug=hooks.debug)


def build_resolver(deps: PairingDependencies, hooks: PipelineHooks | None = None) -> NetworkResolver:
    hooks = hooks or PipelineHooks()
    return NetworkResolver(deps.mesh_status, deps.mesh_serve, deps.interfaces, debug=hooks.debug)


def run_pairing(
    *,
    settings: AppSettings,
    deps: PairingDependencies,
    hooks: PipelineHooks | None = None,
) -> PairingReady | ServeSetupRequired:
    hooks = hooks or PipelineHooks()

    config = load_config(settings)

    _emit(hooks.step, "Checking gateway...")
    if not build_gateway_probe(deps, hooks).is_running(config.port):
        raise GatewayNotRunning(config.port)
    _emit(hooks.done, "Gateway is running")

    _emit(hooks.step, "Detecting connection method...")
    resolution = build_resolver(deps, hooks).resolve(config.port)
    if isinstance(resolution, ServeSetupRequired):
        return resolution

    assert isinstance(resolution, ConnectionCandidate)
    if resolution.mode is ConnectionMode.MESH:
        _emit(hooks.done, f"Tailscale detected: {resolution.host} (via Tailscale Serve)")
    else:
        _emit(hooks.done, f"Local network: {resolution.host}:{resolution.port}")

    descriptor = PairingDescriptor.from_candidate(resolution, config.token)
    uri = encode_descriptor(descriptor)
    return PairingReady(descriptor=descriptor, uri=uri, code=deps.renderer.render(uri))
