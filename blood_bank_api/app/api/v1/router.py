"""
Top‑level router for version 1 of the API.

The donation collection is served under ``/bloodbank``; ``/health``
reports basic service information.
"""

from fastapi import APIRouter

from .endpoints import bloodbank, health

router = APIRouter()

router.include_router(bloodbank.router, prefix="/bloodbank", tags=["bloodbank"])
router.include_router(health.router, prefix="/health", tags=["health"])
