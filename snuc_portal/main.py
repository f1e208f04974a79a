"""Main module entrypoint for local runtime execution.

This module validates startup configuration, binds the listening socket and
launches the FastAPI service.
"""

import argparse
import socket

import uvicorn

from snuc_portal.bootstrap import bootstrap_create_application
from snuc_portal.config import AppSettings, config_load_settings
from snuc_portal.domain import ProcessClock


def main(argv: list[str] | None = None) -> None:
    """Serve the portal with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to process arguments.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        OSError: Raised when the listening socket cannot be bound.
    """

    process_clock = ProcessClock.started()

    argument_parser = argparse.ArgumentParser(description="SNUC Pro Portal runtime entrypoint")
    argument_parser.add_argument(
        "--host",
        dest="host",
        type=str,
        help="Optional host interface override; defaults to HOST or 0.0.0.0",
    )
    argument_parser.add_argument(
        "--port",
        dest="port",
        type=str,
        help="Optional port override; defaults to PORT or 8080",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    settings = main_resolve_settings(host=parsed_arguments.host, port=parsed_arguments.port)
    application = bootstrap_create_application(process_clock=process_clock)
    listening_socket = main_bind_listening_socket(host=settings.host, port=settings.port)
    print(f"SNUC Pro Portal running on port {settings.port}", flush=True)

    server = uvicorn.Server(uvicorn.Config(application, log_level=settings.log_level, access_log=False))
    server.run(sockets=[listening_socket])


def main_resolve_settings(host: str | None = None, port: str | None = None) -> AppSettings:
    """Load settings and apply command-line overrides.

    Overrides pass through the same validators as environment values, so an
    invalid port override falls back to the default port.

    Args:
        host: Optional host override.
        port: Optional port override.

    Returns:
        AppSettings: Validated settings with overrides applied.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    settings = config_load_settings()
    overrides: dict[str, str] = {}
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port
    if not overrides:
        return settings
    return AppSettings.model_validate({**settings.model_dump(), **overrides})


def main_bind_listening_socket(host: str, port: int) -> socket.socket:
    """Bind a TCP socket on the configured interface and port.

    No retry or fallback port is attempted.

    Args:
        host: Interface to bind; `0.0.0.0` binds all IPv4 interfaces.
        port: TCP port to bind.

    Returns:
        socket.socket: Bound socket handed to the ASGI server.

    Raises:
        OSError: Raised when the address is unavailable or already in use.
    """

    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    listening_socket = socket.socket(family=family, type=socket.SOCK_STREAM)
    listening_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        listening_socket.bind((host, port))
    except OSError:
        listening_socket.close()
        raise
    listening_socket.set_inheritable(True)
    return listening_socket


if __name__ == "__main__":
    main()
