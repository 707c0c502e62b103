"""
Security helpers for the admin portal.

The portal is protected with HTTP Basic authentication.  Credentials
are read straight from the ``Authorization`` header and decoded as
UTF-8, so passwords outside ASCII work.  ``require_admin`` checks them
against the ``AdminService`` attached to the application; a missing,
malformed or wrong header is answered with the same 401.
"""

import base64
import binascii
from typing import Optional, Tuple

from fastapi import Depends, HTTPException, Request, status
from fastapi.security.utils import get_authorization_scheme_param

from coaster_api.app.services.admin_service import AdminService

UNAUTHORIZED_MESSAGE = "401 - Unauthorized"


def get_admin_service(request: Request) -> AdminService:
    """Return the admin service created by ``create_app``."""
    return request.app.state.admin_service


def basic_credentials(request: Request) -> Optional[Tuple[str, str]]:
    """Extract ``(username, password)`` from a Basic ``Authorization`` header.

    Returns ``None`` when the header is absent, uses another scheme, is
    not valid base64 or UTF-8, or has no ``:`` separator.  The password
    is everything after the first ``:`` and may itself contain colons.
    """
    scheme, param = get_authorization_scheme_param(request.headers.get("Authorization"))
    if scheme.lower() != "basic" or not param:
        return None
    try:
        decoded = base64.b64decode(param, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    username, separator, password = decoded.partition(":")
    if not separator:
        return None
    return username, password


def require_admin(
    credentials: Optional[Tuple[str, str]] = Depends(basic_credentials),
    admin_service: AdminService = Depends(get_admin_service),
) -> str:
    """Dependency that only lets the admin through.

    On success the user name is returned.
    """
    if credentials is None or not admin_service.authenticate(*credentials):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHORIZED_MESSAGE,
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials[0]
