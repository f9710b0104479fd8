"""
Top‑level router for version 1 of the API.

This router aggregates the endpoint routers under a unified prefix.
When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import health, info

router = APIRouter()

router.include_router(info.router, prefix="/info", tags=["info"])
router.include_router(health.router, prefix="/health", tags=["health"])
