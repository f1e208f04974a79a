"""Tests for runtime entrypoint startup sequencing."""

from __future__ import annotations

import socket

import pytest
from fastapi.testclient import TestClient

from snuc_portal import main as main_module
from snuc_portal.bootstrap import bootstrap_create_application
from snuc_portal.domain import ProcessClock
from snuc_portal.main import main, main_bind_listening_socket, main_resolve_settings


class _RecordingServer:
    """uvicorn.Server stand-in recording the served sockets."""

    instances: list["_RecordingServer"] = []

    def __init__(self, config):
        self.config = config
        self.sockets: list[socket.socket] = []
        _RecordingServer.instances.append(self)

    def run(self, sockets=None) -> None:
        self.sockets = list(sockets or [])


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for variable_name in ("PORT", "HOST", "LOG_LEVEL", "NODE_ENV"):
        monkeypatch.delenv(variable_name, raising=False)
    _RecordingServer.instances.clear()


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe_socket:
        probe_socket.bind(("127.0.0.1", 0))
        return probe_socket.getsockname()[1]


def test_main_binds_configured_port_and_prints_startup_line(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Bind PORT, print one startup line, then hand the socket to the server.

    Returns:
        None: Assertions validate startup behavior.

    Raises:
        AssertionError: Raised when startup sequencing drifts.
    """

    port = _free_port()
    monkeypatch.setenv("PORT", str(port))
    monkeypatch.setattr(main_module.uvicorn, "Server", _RecordingServer)

    main(["--host", "127.0.0.1"])

    output_lines = capsys.readouterr().out.splitlines()
    assert output_lines == [f"SNUC Pro Portal running on port {port}"]
    server = _RecordingServer.instances[0]
    assert server.config.log_level == "info"
    assert server.config.access_log is False
    assert len(server.sockets) == 1
    try:
        assert server.sockets[0].getsockname() == ("127.0.0.1", port)
    finally:
        server.sockets[0].close()


def test_main_propagates_bind_failure_without_startup_line(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Fail fatally when the port is already in use."""

    monkeypatch.setattr(main_module.uvicorn, "Server", _RecordingServer)
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as occupying_socket:
        occupying_socket.bind(("127.0.0.1", 0))
        occupying_socket.listen()
        occupied_port = occupying_socket.getsockname()[1]

        with pytest.raises(OSError):
            main(["--host", "127.0.0.1", "--port", str(occupied_port)])

    assert capsys.readouterr().out == ""
    assert _RecordingServer.instances == []


def test_main_bind_listening_socket_raises_for_occupied_port() -> None:
    """Raise OSError rather than choosing a fallback port."""

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as occupying_socket:
        occupying_socket.bind(("127.0.0.1", 0))
        occupying_socket.listen()
        occupied_port = occupying_socket.getsockname()[1]

        with pytest.raises(OSError):
            main_bind_listening_socket(host="127.0.0.1", port=occupied_port)


def test_main_resolve_settings_defaults_to_8080() -> None:
    """Resolve port 8080 when neither PORT nor an override is given."""

    assert main_resolve_settings().port == 8080


def test_main_resolve_settings_applies_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prefer command-line overrides over environment values."""

    monkeypatch.setenv("PORT", "3000")

    settings = main_resolve_settings(host="127.0.0.1", port="4000")

    assert settings.host == "127.0.0.1"
    assert settings.port == 4000


def test_main_resolve_settings_falls_back_for_invalid_override() -> None:
    """Apply the default-port fallback to invalid overrides."""

    assert main_resolve_settings(port="not-a-port").port == 8080


def test_bootstrap_create_application_uses_injected_clock() -> None:
    """Report uptime from the injected process clock."""

    process_clock = ProcessClock(started_monotonic=10.0, monotonic=lambda: 12.0)

    client = TestClient(bootstrap_create_application(process_clock=process_clock))

    assert client.get("/health").json()["uptime"] == 2.0


def test_bootstrap_create_application_serves_both_routes() -> None:
    """Expose landing and health routes when no clock is injected."""

    client = TestClient(bootstrap_create_application())

    assert client.get("/").status_code == 200
    assert client.get("/health").status_code == 200
