"""
Health check endpoint.
"""

from fastapi import APIRouter

from ..dependencies import EventBus


router = APIRouter()


@router.get("/health")
async def health(event_bus: EventBus) -> dict:
    """Health check endpoint."""
    return {"status": "ok", "subscribers": event_bus.subscriber_count}
