"""
Top-level router.

Aggregates the area routers under their fixed prefixes.  There is
exactly one routing entry per endpoint; see the endpoint modules for
the individual paths.
"""

from fastapi import APIRouter

from .endpoints import admin, coasters

router = APIRouter()

router.include_router(coasters.router, prefix="/coasters", tags=["coasters"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
