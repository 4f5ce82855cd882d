"""
Health check endpoint.
Plain-text liveness probe for monitoring API availability.
"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

HEALTH_STATUS = "OK"

router = APIRouter()

@router.get("/health", response_class=PlainTextResponse)
async def health_check() -> str:
    return HEALTH_STATUS
