"""
Greeting response model.
Static payload returned by the hello endpoint.
"""
from pydantic import BaseModel

GREETING_MESSAGE = "Hello from CI"


class GreetingResponse(BaseModel):
    message: str = GREETING_MESSAGE

    class Config:
        frozen = True
