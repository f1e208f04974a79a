"""Application bootstrap wiring for dependency assembly."""

from fastapi import FastAPI

from snuc_portal.api import create_api_application
from snuc_portal.domain import ProcessClock


def bootstrap_create_application(process_clock: ProcessClock | None = None) -> FastAPI:
    """Assemble the runtime application around the process clock.

    Args:
        process_clock: Optional process clock; captured now when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.
    """

    resolved_process_clock = process_clock or ProcessClock.started()
    return create_api_application(process_clock=resolved_process_clock)
