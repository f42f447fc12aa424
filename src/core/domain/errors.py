"""Terminal errors of the pairing flow.

Every error carries a `remediation`: the exact step the user has to take
before running the tool again. None of them are retried.
"""

from __future__ import annotations

from pathlib import Path


class PairingError(RuntimeError):
    """Base class for every terminal condition that aborts a pairing run."""

    def __init__(self, message: str, remediation: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.remediation = remediation


class ConfigError(PairingError):
    """Raised when the gateway config file is missing or unusable."""


class ConfigNotFound(ConfigError):
    def __init__(self, path: Path) -> None:
        super().__init__(
            f"OpenClaw config not found at {path}",
            "Make sure OpenClaw is installed and configured.\n"
            "Run: npm i -g openclaw and then: openclaw configure",
        )
        self.path = path


class ConfigParseError(ConfigError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            f"Failed to read config at {path}: {reason}",
            "Fix the file or regenerate it with: openclaw configure",
        )
        self.path = path
        self.reason = reason


class TokenMissing(ConfigError):
    def __init__(self, path: Path) -> None:
        super().__init__(
            f"No gateway token found in config at {path}",
            "Run: openclaw configure to set up your gateway.",
        )
        self.path = path


class GatewayNotRunning(PairingError):
    def __init__(self, port: int) -> None:
        super().__init__(
            f"Gateway is not running on port {port}.",
            "Start it with: openclaw gateway start\nThen run this command again.",
        )
        self.port = port


class NoReachableAddress(PairingError):
    def __init__(self) -> None:
        super().__init__(
            "Could not detect a way to reach this machine.",
            "Option 1: Install Tailscale (https://tailscale.com) on both devices\n"
            "Option 2: Make sure this machine is connected to WiFi",
        )
