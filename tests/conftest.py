"""Shared fakes for the capability protocols.

No test touches a real subprocess, socket or network.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from core.domain.models import InterfaceAddress
from core.services.pairing_pipeline import PairingDependencies


class FakeSocketTable:
    def __init__(self, answer: bool | None = None, error: Exception | None = None) -> None:
        self.answer = answer
        self.error = error
        self.calls: list[int] = []

    def is_listening(self, port: int) -> bool | None:
        self.calls.append(port)
        if self.error is not None:
            raise self.error
        return self.answer


class FakeHttp:
    def __init__(self, answer: bool = False, error: Exception | None = None) -> None:
        self.answer = answer
        self.error = error
        self.calls: list[str] = []

    def responds(self, url: str) -> bool:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.answer


class FakeMeshStatus:
    def __init__(self, name: str | None = None, error: Exception | None = None) -> None:
        self.name = name
        self.error = error
        self.calls = 0

    def dns_name(self) -> str | None:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.name


class FakeServeStatus:
    def __init__(self, text: str | None = None) -> None:
        self.text = text
        self.calls = 0

    def serve_status(self) -> str | None:
        self.calls += 1
        return self.text


class FakeInterfaces:
    def __init__(self, entries: list[InterfaceAddress] | None = None) -> None:
        self.entries = entries or []
        self.calls = 0

    def addresses(self) -> list[InterfaceAddress]:
        self.calls += 1
        return list(self.entries)


class FakeRenderer:
    def __init__(self) -> None:
        self.rendered: list[str] = []

    def render(self, text: str) -> str:
        self.rendered.append(text)
        return f"[QR]{text}[/QR]"


def ipv4(address: str, name: str = "en0", internal: bool = False) -> InterfaceAddress:
    return InterfaceAddress(name=name, address=address, family="IPv4", internal=internal)


def ipv6(address: str, name: str = "en0", internal: bool = False) -> InterfaceAddress:
    return InterfaceAddress(name=name, address=address, family="IPv6", internal=internal)


LOOPBACK = ipv4("127.0.0.1", name="lo0", internal=True)


SERVE_STATUS_18789 = """\
https://mymac.tailnet.ts.net (tailnet only)
|-- / proxy http://127.0.0.1:18789
"""


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point HOME at a temp dir and drop any OPENCLAW_* overrides."""

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for key in (
        "OPENCLAW_STATE_DIR",
        "OPENCLAW_CONFIG_PATH",
        "OPENCLAW_HTTP_PROBE_TIMEOUT_SECONDS",
        "OPENCLAW_SOCKET_TABLE_TIMEOUT_SECONDS",
        "OPENCLAW_MESH_STATUS_TIMEOUT_SECONDS",
        "OPENCLAW_MESH_SERVE_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture
def write_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Callable[[Any], Path]:
    """Write openclaw.json (dict -> JSON, str -> raw text) and point the env at it."""

    def _write(content: Any) -> Path:
        path = tmp_path / "openclaw.json"
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        monkeypatch.setenv("OPENCLAW_CONFIG_PATH", str(path))
        return path

    return _write


@pytest.fixture
def valid_config(write_config: Callable[[Any], Path]) -> Path:
    return write_config({"gateway": {"auth": {"token": "s3cret"}, "port": 18789}})


@pytest.fixture
def make_deps() -> Callable[..., PairingDependencies]:
    def _make(**overrides: Any) -> PairingDependencies:
        values: dict[str, Any] = {
            "socket_table": FakeSocketTable(answer=True),
            "http": FakeHttp(answer=False),
            "mesh_status": FakeMeshStatus(name=None),
            "mesh_serve": FakeServeStatus(text=None),
            "interfaces": FakeInterfaces([LOOPBACK, ipv4("192.168.1.42")]),
            "renderer": FakeRenderer(),
        }
        values.update(overrides)
        return PairingDependencies(**values)

    return _make
