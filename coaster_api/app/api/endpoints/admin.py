"""
Admin portal endpoint.

A single HTML page behind HTTP Basic authentication.  Credentials are
checked by ``require_admin``; failures never reach this handler.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from coaster_api.app.core.security import require_admin
from coaster_api.app.services.admin_service import ADMIN_PAGE

router = APIRouter()


@router.get(
    "",
    response_class=HTMLResponse,
    responses={401: {"description": "Missing or invalid credentials"}},
)
def admin_portal(username: str = Depends(require_admin)) -> HTMLResponse:
    return HTMLResponse(ADMIN_PAGE)
