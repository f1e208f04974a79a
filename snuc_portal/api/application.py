"""FastAPI application factory for the portal service.

This module defines API application composition used by the runtime
entrypoint and by tests.
"""

from fastapi import FastAPI

from snuc_portal.domain import ProcessClock

from .routers import api_create_health_router, api_create_landing_router


def create_api_application(process_clock: ProcessClock) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Trailing-slash redirects are disabled so any path other than `/` and
    `/health` resolves to the framework-default 404.

    Args:
        process_clock: Process-scoped clock used by the health endpoint.

    Returns:
        FastAPI: Application exposing `/` and `/health` only.
    """

    application = FastAPI(
        title="SNUC Pro Portal",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    application.include_router(api_create_landing_router())
    application.include_router(api_create_health_router(process_clock=process_clock))

    return application
