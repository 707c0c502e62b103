"""
Main entrypoint for the Coaster API.

This module assembles the FastAPI application: it sets up logging,
creates the coaster store and the services, registers the error
handlers and includes the routers.  ``create_app`` is a factory, so
the admin password is only required when an application is actually
built.  To serve it directly with uvicorn::

    ADMIN_PASSWORD=secret uvicorn --factory coaster_api.app.main:create_app --port 8080

``python -m coaster_api`` does the same with a clean exit on
configuration errors.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.error_handlers import register_error_handlers
from .api.router import router
from .core.config import Settings
from .core.logging_config import setup_logging
from .core.store import CoasterStore
from .services.admin_service import AdminService
from .services.coaster_service import CoasterService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[CoasterStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Read from the environment when omitted.
    store : Optional[CoasterStore]
        Store backing the coaster endpoints.  A fresh store holding the
        seed record is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.

    Raises
    ------
    ConfigurationError
        If no admin password is configured.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level, settings.log_file or None)

    # Fail before any route exists if the admin portal cannot work.
    admin_service = AdminService(settings.admin_password)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.admin_service = admin_service
    app.state.coaster_service = CoasterService(store if store is not None else CoasterStore())

    register_error_handlers(app)
    app.include_router(router)

    logger.debug("Application %s %s created", settings.project_name, settings.api_version)
    return app
