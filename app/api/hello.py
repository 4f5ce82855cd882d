"""
Greeting endpoint.
Returns a fixed JSON message so CI pipelines can verify the deployment.
"""
from fastapi import APIRouter
from app.models import GreetingResponse

router = APIRouter()

@router.get("/hello", response_model=GreetingResponse)
async def hello() -> GreetingResponse:
    return GreetingResponse()
