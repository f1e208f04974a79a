"""Landing page router serving the static portal markup."""

from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse

from ..pages import LANDING_PAGE_HTML


def api_create_landing_router() -> APIRouter:
    """Create router exposing the static landing page at `/`.

    Returns:
        APIRouter: Router exposing `/` endpoint.
    """

    router = APIRouter(tags=["landing"])

    @router.get("/", response_class=HTMLResponse)
    def api_landing_page() -> HTMLResponse:
        """Return the fixed landing page document.

        Returns:
            HTMLResponse: Byte-identical HTML document on every call.
        """

        return HTMLResponse(content=LANDING_PAGE_HTML, status_code=status.HTTP_200_OK)

    return router
