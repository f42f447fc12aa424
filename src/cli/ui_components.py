"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets `pair` and `doctor` reuse the same panels and messages.
"""

from __future__ import annotations

from pydantic import ValidationError
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cli import theme
from core.domain.errors import PairingError
from core.domain.models import ServeSetupRequired


def print_banner(console: Console) -> None:
    """Print the welcome banner."""

    title = Text("📱 OpenClaw Pairing", style="bold cyan")
    subtitle = Text("Scan once • Tailscale or local network", style=theme.DIM)
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(0, 4)))


def print_step(console: Console, message: str) -> None:
    console.print(Text(f"  {message}", style=theme.DIM))


def print_done(console: Console, message: str) -> None:
    console.print(Text(f"  {theme.CHECK} {message}", style=theme.INFO))


def print_debug(console: Console, message: str) -> None:
    console.print(Text(f"    · {message}", style=theme.DIM))


def print_error(console: Console, error: PairingError) -> None:
    """Terminal error: what went wrong, then the exact remediation."""

    body = Text(f"{theme.CROSS} {error.message}", style=f"bold {theme.ERROR}")
    if error.remediation:
        body.append("\n\n")
        for line in error.remediation.splitlines():
            body.append(f"  {line}\n", style=theme.ERROR)
    console.print()
    console.print(body)


def print_serve_setup(console: Console, outcome: ServeSetupRequired) -> None:
    console.print()
    console.print(
        Text(f"  {theme.WARN} Tailscale is running but Tailscale Serve is not set up.", style=theme.WARNING)
    )
    console.print(Text("    Your gateway isn't reachable from your phone yet.", style=theme.WARNING))
    console.print()
    console.print("  Run this once to expose it:")
    console.print()
    console.print(Text(f"    {outcome.setup_command}", style=theme.EMPHASIS))
    console.print()
    console.print(Text.assemble("  Then run ", ("openclaw-pair", theme.EMPHASIS), " again."))
    console.print()


def print_local_network_warning(console: Console) -> None:
    console.print(Text(f"    {theme.WARN} Make sure your iPhone is on the same WiFi network", style=theme.WARNING))


def build_next_steps_panel() -> Panel:
    body = Text()
    body.append("1. Open the ")
    body.append("OpenClaw", style=theme.EMPHASIS)
    body.append(" app on your iPhone\n")
    body.append("2. Scan this QR code\n")
    body.append("3. That's it!")
    return Panel(body, title=Text("Next steps", style=theme.EMPHASIS), border_style="green", expand=False)


def build_tailscale_tip_panel() -> Panel:
    body = Text(
        "💡 For access outside your home network,\n"
        "   install Tailscale on both devices.\n"
        "   https://tailscale.com",
        style=theme.DIM,
    )
    return Panel(body, border_style=theme.DIM, expand=False)


def build_doctor_table() -> Table:
    table = Table(title="OpenClaw Pairing Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style=theme.DIM)
    return table


def print_settings_error(console: Console, error: ValidationError) -> None:
    body = Text(f"{theme.CROSS} Invalid OPENCLAW_* environment settings", style=f"bold {theme.ERROR}")
    for item in error.errors():
        field = ".".join(str(part) for part in item.get("loc", ()))
        body.append(f"\n  {field}: {item.get('msg', '')}", style=theme.ERROR)
    console.print()
    console.print(body)
