"""
Top‑level router for version 1 of the API.

Aggregates the resource routers under a unified prefix.  When new
resources are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import meters

router = APIRouter()

router.include_router(meters.router, prefix="/meters", tags=["meters"])
