from fastapi import APIRouter
from app.api.hello import router as hello_router
from app.api.health import router as health_router

api_router = APIRouter()
api_router.include_router(hello_router, tags=["greeting"])

__all__ = ["api_router", "health_router"]
