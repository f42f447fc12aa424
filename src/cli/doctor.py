"""Doctor command for environment diagnostics.

Reports every signal the pairing run relies on, side by side, without
stopping at the first failure.
"""

from __future__ import annotations

from dataclasses import dataclass

import typer
from pydantic import ValidationError
from rich.console import Console

from cli.ui_components import build_doctor_table, print_settings_error
from core.config import AppSettings, resolve_config_path
from core.domain.errors import NoReachableAddress, PairingError
from core.domain.models import GatewayConfig
from core.services.config_loader import load_config
from core.services.gateway_probe import gateway_url
from core.services.network_resolver import HTTPS_PORT, serve_exposes_port
from core.services.pairing_pipeline import (
    PairingDependencies,
    build_gateway_probe,
    build_resolver,
    default_dependencies,
)

_console = Console()
_err_console = Console(stderr=True)


@dataclass
class DoctorCheck:
    name: str
    status: str
    detail: str


def collect_checks(settings: AppSettings, deps: PairingDependencies) -> list[DoctorCheck]:
    checks: list[DoctorCheck] = []

    path = resolve_config_path(settings)
    config: GatewayConfig | None = None
    try:
        config = load_config(settings)
        checks.append(DoctorCheck("Config", "OK", str(path)))
        checks.append(DoctorCheck("Gateway token", "OK", "present"))
        checks.append(DoctorCheck("Gateway port", "OK", str(config.port)))
    except PairingError as exc:
        checks.append(DoctorCheck("Config", "FAIL", exc.message))

    if config is None:
        return checks

    probe = build_gateway_probe(deps)
    listening = probe.check_socket_table(config.port)
    checks.append(
        DoctorCheck(
            "Socket table",
            "OK" if listening else "INCONCLUSIVE",
            "LISTEN" if listening else "no listener visible (may need privileges)",
        )
    )
    responded = probe.check_http(config.port)
    checks.append(
        DoctorCheck("HTTP probe", "OK" if responded else "FAIL", gateway_url(config.port))
    )

    # Each signal is queried once; the verdict mirrors NetworkResolver.resolve.
    resolver = build_resolver(deps)
    hostname = resolver.mesh_hostname()
    checks.append(
        DoctorCheck("Tailscale", "OK" if hostname else "OPTIONAL", hostname or "not detected")
    )
    served = False
    if hostname:
        served = serve_exposes_port(resolver.serve_status(), config.port)
        checks.append(
            DoctorCheck(
                "Tailscale Serve",
                "OK" if served else "ACTION",
                f"443 -> {config.port}" if served else f"run: tailscale serve --bg {config.port}",
            )
        )
    local_ip = resolver.local_ipv4()
    checks.append(DoctorCheck("Local IPv4", "OK" if local_ip else "FAIL", local_ip or "none"))

    if hostname and served:
        checks.append(DoctorCheck("Connection", "OK", f"mesh {hostname}:{HTTPS_PORT}"))
    elif hostname:
        checks.append(DoctorCheck("Connection", "ACTION", f"Tailscale Serve needed for {hostname}"))
    elif local_ip:
        checks.append(DoctorCheck("Connection", "OK", f"local {local_ip}:{config.port}"))
    else:
        checks.append(DoctorCheck("Connection", "FAIL", NoReachableAddress().message))
    return checks


def run() -> None:
    """Run the pairing checks and show what is missing."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_settings_error(_err_console, exc)
        raise typer.Exit(code=1)

    table = build_doctor_table()
    for check in collect_checks(settings, default_dependencies(settings)):
        table.add_row(check.name, check.status, check.detail)

    _console.print(table)
