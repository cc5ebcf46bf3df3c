"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from pathcommand import __version__
from pathcommand.engine.registry import get_registry
from pathcommand.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        transforms_registered=get_registry().count,
    )


@router.get("/transforms")
async def transforms() -> list[dict[str, str | None]]:
    """Registered stages in execution order, with the option that enables each."""
    return [
        {"id": spec.id, "option": spec.option, "description": spec.description}
        for spec in get_registry().resolve_order()
    ]
