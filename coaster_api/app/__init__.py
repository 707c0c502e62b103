"""
Application package.

``main.create_app`` builds the FastAPI application.  The code is
split into ``core`` (configuration, logging, security, storage),
``schemas``, ``services`` and ``api`` (routers and error handlers).
"""

from .main import create_app  # noqa: F401
