"""Health endpoint router composition for process liveness checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from snuc_portal.config import config_resolve_environment_label
from snuc_portal.domain import ProcessClock, domain_build_health_report


def api_create_health_router(process_clock: ProcessClock) -> APIRouter:
    """Create health-check router reporting process liveness.

    Args:
        process_clock: Process-scoped clock used for uptime reporting.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when process_clock is invalid.
    """

    if process_clock is None:
        raise ValueError("process_clock must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return freshly computed liveness state.

        Returns:
            JSONResponse: Health payload with status, timestamp, uptime and environment.
        """

        health_report = domain_build_health_report(
            process_clock=process_clock,
            environment_name=config_resolve_environment_label(),
        )
        return JSONResponse(content=health_report.as_payload(), status_code=status.HTTP_200_OK)

    return router
