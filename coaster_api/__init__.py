"""
Top-level package for the Coaster API.

A small HTTP service keeping roller-coaster records in memory, with a
Basic-auth protected admin page.  Everything lives in ``app``; run the
service with ``python -m coaster_api``.
"""

__all__ = []
