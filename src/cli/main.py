"""openclaw-pair CLI.

The default command runs the pairing flow; `doctor` reports every signal it
depends on. All terminal conditions exit with status 1 after printing the
exact remediation step.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console

from cli import doctor, ui_components
from core.config import AppSettings
from core.domain.errors import PairingError
from core.domain.models import ConnectionMode, ServeSetupRequired
from core.services.pairing_pipeline import PipelineHooks, default_dependencies, run_pairing

HELP_EPILOG = (
    "[bold]What it does:[/bold]\n\n"
    "1. Reads your OpenClaw config\n\n"
    "2. Detects Tailscale (preferred) or falls back to local network\n\n"
    "3. Shows a QR code, scan it with the OpenClaw iOS app\n\n"
    "4. You're connected!\n\n\n"
    "[bold]Requirements:[/bold]\n\n"
    "• OpenClaw installed and gateway running (openclaw gateway start)\n\n"
    "• For anywhere-access: Tailscale on both devices (tailscale.com)\n\n"
    "• For local-only: Mac and iPhone on same WiFi network"
)

app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

_console = Console()
_err_console = Console(stderr=True)


def _hooks(verbose: bool) -> PipelineHooks:
    return PipelineHooks(
        step=lambda msg: ui_components.print_step(_console, msg),
        done=lambda msg: ui_components.print_done(_console, msg),
        debug=(lambda msg: ui_components.print_debug(_console, msg)) if verbose else None,
    )


@app.callback(invoke_without_command=True, epilog=HELP_EPILOG)
def pair(
    ctx: typer.Context,
    show_url: bool = typer.Option(False, "--show-url", help="Also print the pairing URL (contains your token)."),
    relay: bool = typer.Option(False, "--relay", help="Force relay mode (coming soon)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show what each probe found."),
) -> None:
    """Pair your iPhone with OpenClaw in one scan."""

    if ctx.invoked_subcommand is not None:
        return

    if relay:
        _err_console.print("[yellow]Relay mode is not available yet.[/yellow] Run without --relay.")
        raise typer.Exit(code=1)

    ui_components.print_banner(_console)

    try:
        settings = AppSettings()
    except ValidationError as exc:
        ui_components.print_settings_error(_err_console, exc)
        raise typer.Exit(code=1)

    try:
        outcome = run_pairing(
            settings=settings,
            deps=default_dependencies(settings),
            hooks=_hooks(verbose),
        )
    except PairingError as exc:
        ui_components.print_error(_err_console, exc)
        raise typer.Exit(code=1)

    if isinstance(outcome, ServeSetupRequired):
        ui_components.print_serve_setup(_console, outcome)
        raise typer.Exit(code=1)

    local = outcome.descriptor.mode is ConnectionMode.LOCAL
    if local:
        ui_components.print_local_network_warning(_console)

    _console.print()
    _console.print(outcome.code, markup=False, highlight=False, emoji=False, no_wrap=True, crop=False)
    if show_url:
        _console.print(outcome.uri, markup=False, highlight=False, emoji=False, soft_wrap=True)
    _console.print(ui_components.build_next_steps_panel())
    if local:
        _console.print(ui_components.build_tailscale_tip_panel())


@app.command(name="doctor")
def doctor_command() -> None:
    """Check config, gateway, Tailscale and network without pairing."""

    doctor.run()


def run() -> None:
    app()


if __name__ == "__main__":
    run()
