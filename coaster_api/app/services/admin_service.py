"""
Service layer for the admin portal.

Only one account exists: the user name is fixed to ``admin`` and the
password comes from the ``ADMIN_PASSWORD`` environment variable, read
once at startup.  There is no lockout, rate limiting or session
handling; every request carries its own Basic-auth credentials.
"""

from __future__ import annotations

import logging
import secrets

from coaster_api.app.core.config import ConfigurationError

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"
ADMIN_PAGE = "<html><h1>Super Secret Admin Portal</h1></html>"


class AdminService:
    """Check credentials against the configured admin password."""

    def __init__(self, password: str) -> None:
        if not password:
            raise ConfigurationError("required env var ADMIN_PASSWORD is not set")
        self._password = password

    def authenticate(self, username: str, password: str) -> bool:
        """Return ``True`` if ``username``/``password`` identify the admin.

        Both values are compared in constant time.
        """
        user_ok = secrets.compare_digest(username.encode("utf-8"), ADMIN_USERNAME.encode("utf-8"))
        pass_ok = secrets.compare_digest(password.encode("utf-8"), self._password.encode("utf-8"))
        if not (user_ok and pass_ok):
            logger.warning("Rejected admin login for user %r", username)
            return False
        return True
