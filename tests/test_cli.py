from __future__ import annotations

from pathlib import Path

import pytest
from conftest import (
    SERVE_STATUS_18789,
    FakeHttp,
    FakeInterfaces,
    FakeMeshStatus,
    FakeServeStatus,
    FakeSocketTable,
)
from typer.testing import CliRunner

from cli import doctor as doctor_module
from cli import main as main_module
from cli.main import app

runner = CliRunner()


@pytest.fixture
def use_deps(monkeypatch: pytest.MonkeyPatch):
    def _use(deps) -> None:
        monkeypatch.setattr(main_module, "default_dependencies", lambda settings=None: deps)
        monkeypatch.setattr(doctor_module, "default_dependencies", lambda settings=None: deps)

    return _use


@pytest.mark.parametrize("flag", ["--help", "-h"])
def test_help(flag: str) -> None:
    result = runner.invoke(app, [flag])
    assert result.exit_code == 0
    assert "What it does" in result.output
    assert "Requirements" in result.output


def test_unknown_flag_is_rejected() -> None:
    result = runner.invoke(app, ["--bogus"])
    assert result.exit_code == 2


def test_relay_not_available(use_deps, make_deps, valid_config) -> None:
    deps = make_deps()
    use_deps(deps)
    result = runner.invoke(app, ["--relay"])
    assert result.exit_code == 1
    assert "Relay mode is not available yet" in result.output
    assert deps.socket_table.calls == []


def test_missing_config_exits_1(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, use_deps, make_deps) -> None:
    monkeypatch.setenv("OPENCLAW_CONFIG_PATH", str(tmp_path / "missing.json"))
    deps = make_deps()
    use_deps(deps)

    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "OpenClaw config not found" in result.output
    assert "openclaw configure" in result.output
    assert deps.socket_table.calls == []


def test_gateway_not_running_exits_1(valid_config, use_deps, make_deps) -> None:
    use_deps(make_deps(socket_table=FakeSocketTable(answer=None), http=FakeHttp(answer=False)))
    result = runner.invoke(app, [])
    assert result.exit_code == 1
    assert "Gateway is not running on port 18789" in result.output
    assert "openclaw gateway start" in result.output


def test_no_reachable_address_exits_1(valid_config, use_deps, make_deps) -> None:
    use_deps(make_deps(interfaces=FakeInterfaces([])))
    result = runner.invoke(app, [])
    assert result.exit_code == 1
    assert "Could not detect a way to reach this machine" in result.output


def test_serve_setup_exits_1_without_code(valid_config, use_deps, make_deps) -> None:
    deps = make_deps(mesh_status=FakeMeshStatus(name="mymac.tailnet.ts.net."), mesh_serve=FakeServeStatus(None))
    use_deps(deps)

    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Tailscale Serve is not set up" in result.output
    assert "tailscale serve --bg 18789" in result.output
    assert deps.renderer.rendered == []
    assert "[QR]" not in result.output


def test_local_pairing_success(valid_config, use_deps, make_deps) -> None:
    use_deps(make_deps())

    result = runner.invoke(app, [])

    assert result.exit_code == 0, result.output
    assert "Gateway is running" in result.output
    assert "Local network: 192.168.1.42:18789" in result.output
    assert "same WiFi network" in result.output
    assert "[QR]openclaw://connect?" in result.output
    assert "Next steps" in result.output
    assert "install Tailscale" in result.output


def test_mesh_pairing_success(valid_config, use_deps, make_deps) -> None:
    use_deps(
        make_deps(
            mesh_status=FakeMeshStatus(name="mymac.tailnet.ts.net."),
            mesh_serve=FakeServeStatus(SERVE_STATUS_18789),
        )
    )

    result = runner.invoke(app, [])

    assert result.exit_code == 0, result.output
    assert "Tailscale detected: mymac.tailnet.ts.net" in result.output
    assert "same WiFi network" not in result.output
    assert "install Tailscale" not in result.output


def test_show_url(valid_config, use_deps, make_deps) -> None:
    use_deps(make_deps())
    result = runner.invoke(app, ["--show-url"])
    assert result.exit_code == 0
    assert "token=s3cret" in result.output


def test_verbose_prints_probe_findings(valid_config, use_deps, make_deps) -> None:
    use_deps(make_deps())
    result = runner.invoke(app, ["-v"])
    assert result.exit_code == 0
    assert "socket table on port 18789" in result.output


def test_doctor_reports_every_signal(valid_config, use_deps, make_deps) -> None:
    use_deps(make_deps(mesh_status=FakeMeshStatus(name="mymac.tailnet.ts.net."), mesh_serve=FakeServeStatus(None)))

    result = runner.invoke(app, ["doctor"])

    assert result.exit_code == 0, result.output
    for name in ("Config", "Gateway token", "Socket table", "HTTP probe", "Tailscale Serve", "Local IPv4"):
        assert name in result.output


def test_doctor_collects_without_failing(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, make_deps) -> None:
    from core.config import AppSettings

    monkeypatch.setenv("OPENCLAW_CONFIG_PATH", str(tmp_path / "missing.json"))
    checks = doctor_module.collect_checks(AppSettings(), make_deps())
    assert [(c.name, c.status) for c in checks] == [("Config", "FAIL")]


def test_doctor_connection_verdict(valid_config, make_deps) -> None:
    from core.config import AppSettings

    checks = doctor_module.collect_checks(
        AppSettings(),
        make_deps(
            mesh_status=FakeMeshStatus(name="mymac.tailnet.ts.net."),
            mesh_serve=FakeServeStatus(SERVE_STATUS_18789),
        ),
    )
    verdict = {c.name: c for c in checks}["Connection"]
    assert verdict.status == "OK"
    assert verdict.detail == "mesh mymac.tailnet.ts.net:443"


def test_invalid_environment_exits_1(monkeypatch: pytest.MonkeyPatch, use_deps, make_deps) -> None:
    monkeypatch.setenv("OPENCLAW_MESH_STATUS_TIMEOUT_SECONDS", "60")
    use_deps(make_deps())
    result = runner.invoke(app, [])
    assert result.exit_code == 1
    assert "Invalid OPENCLAW_* environment settings" in result.output


def test_doctor_invalid_environment_exits_1(monkeypatch: pytest.MonkeyPatch, use_deps, make_deps) -> None:
    monkeypatch.setenv("OPENCLAW_HTTP_PROBE_TIMEOUT_SECONDS", "30")
    use_deps(make_deps())
    result = runner.invoke(app, ["doctor"])
    assert result.exit_code == 1
    assert "Invalid OPENCLAW_* environment settings" in result.output
    assert "Traceback" not in result.output
