"""Liveness endpoint for API v1."""

from fastapi import APIRouter

from learn.event.schemas.info import HealthRead

router = APIRouter()


@router.get("/", response_model=HealthRead)
async def health() -> HealthRead:
    """Return ``{"status": "ok"}`` while the process is serving requests."""
    return HealthRead()
