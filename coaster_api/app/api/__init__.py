"""
API package containing the HTTP routes.

``router`` in ``router.py`` includes every endpoint module; the
global error handlers live in ``error_handlers.py``.
"""
