"""
Top‑level router for version 1 of the API.

The whisky routes are served under ``/api/whiskies``; ``main`` mounts
this router at ``/api``.
"""

from fastapi import APIRouter

from .endpoints import whiskies

router = APIRouter()

router.include_router(whiskies.router, prefix="/whiskies", tags=["whiskies"])
